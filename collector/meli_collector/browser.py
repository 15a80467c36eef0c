"""Playwright による検索ページのレンダリング.

JavaScript 描画後の HTML が必要な場合に使う。
ブラウザ設定（ヘッドレス・User-Agent・検出回避）は呼び出し側が渡す。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from playwright.sync_api import Error as PWError
from playwright.sync_api import TimeoutError as PWTimeout
from playwright.sync_api import sync_playwright

from meli_collector.config import (
    CONTAINER_SELECTORS,
    HEADLESS,
    NAVIGATION_TIMEOUT_MS,
    PC_USER_AGENT,
    RESULTS_WAIT_TIMEOUT_MS,
    SETTLE_DELAY_MS,
    STEALTH_ARGS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrowserConfig:
    """ブラウザ起動設定."""

    headless: bool = HEADLESS
    user_agent: str | None = PC_USER_AGENT
    stealth: bool = True

    def launch_args(self) -> list[str]:
        args = list(STEALTH_ARGS) if self.stealth else []
        if not self.headless:
            args.append("--start-maximized")
        return args


def render_search_page(url: str, config: BrowserConfig | None = None) -> str | None:
    """検索ページを開き、商品一覧が描画された後の HTML を返す.

    Returns:
        HTML 文字列。タイムアウトやブラウザエラー時は None。
    """
    config = config or BrowserConfig()
    wait_selector = ", ".join(CONTAINER_SELECTORS)

    with sync_playwright() as p:
        browser = p.chromium.launch(headless=config.headless, args=config.launch_args())
        try:
            context = browser.new_context(
                user_agent=config.user_agent,
                locale="es-MX",
                no_viewport=not config.headless,
            )
            page = context.new_page()
            logger.info("ページを開いています: %s", url)
            page.goto(url, wait_until="domcontentloaded", timeout=NAVIGATION_TIMEOUT_MS)
            page.wait_for_selector(wait_selector, timeout=RESULTS_WAIT_TIMEOUT_MS)
            page.wait_for_timeout(SETTLE_DELAY_MS)
            return page.content()
        except PWTimeout as e:
            logger.error("商品一覧の描画待ちがタイムアウト: url=%s, error=%s", url, e)
            return None
        except PWError as e:
            logger.error("ブラウザエラー: url=%s, error=%s", url, e)
            return None
        finally:
            browser.close()
