"""Mercado Libre 検索結果のスクレイピングモジュール.

抽出戦略:
  1. 商品一覧コンテナを新レイアウト → 旧レイアウトの順に探す
  2. 各商品の価格・商品名・リンクをセレクタ候補の先頭から順に解決する
  3. 価格が取れない商品は捨てる
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import quote, urljoin

import requests
from bs4 import BeautifulSoup, Tag

from meli_collector.config import (
    CONTAINER_SELECTORS,
    DEFAULT_TITLE,
    LINK_SELECTORS,
    MAX_ITEMS,
    PRICE_SELECTORS,
    REQUEST_TIMEOUT,
    SEARCH_URL_TEMPLATE,
    TITLE_SELECTORS,
    USER_AGENTS,
)
from meli_collector.exceptions import NoContainerFoundError
from meli_collector.models import Listing

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldLocator:
    """1フィールド分のセレクタ候補。先頭から順に試す."""

    field: str
    selectors: tuple[str, ...]
    attr: str | None = None  # None ならテキスト、指定時は属性値を読む


TITLE_LOCATOR = FieldLocator("title", tuple(TITLE_SELECTORS))
PRICE_LOCATOR = FieldLocator("price", tuple(PRICE_SELECTORS))
LINK_LOCATOR = FieldLocator("link", tuple(LINK_SELECTORS), attr="href")


@dataclass
class SearchPage:
    """取得済みの検索結果ページ."""

    soup: BeautifulSoup
    url: str = ""

    def select(self, selector: str) -> list[Tag]:
        return self.soup.select(selector)


def build_search_url(keyword: str) -> str:
    """検索語から Mercado Libre の検索 URL を組み立てる."""
    return SEARCH_URL_TEMPLATE.format(keyword=quote(keyword, safe=""))


def fetch_search_page(keyword: str, device: str = "pc") -> str | None:
    """検索ページの HTML を取得する.

    Args:
        keyword: 検索キーワード
        device: "pc" or "sp"

    Returns:
        HTML 文字列。失敗時は None。
    """
    url = build_search_url(keyword)
    headers = {
        "User-Agent": USER_AGENTS[device],
        "Accept-Language": "es-MX,es;q=0.9,en;q=0.8",
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }

    try:
        resp = requests.get(url, headers=headers, timeout=REQUEST_TIMEOUT)
        resp.raise_for_status()
        return resp.text
    except requests.RequestException as e:
        logger.error("検索ページ取得失敗: keyword=%s, device=%s, error=%s", keyword, device, e)
        return None


def parse_page(html: str, base_url: str = "") -> SearchPage:
    """HTML をパースして SearchPage を作る."""
    return SearchPage(soup=BeautifulSoup(html, "html.parser"), url=base_url)


def resolve_field(entry: Tag, locator: FieldLocator, base_url: str = "") -> str | None:
    """セレクタ候補を順に試し、最初に見つかった要素の値を返す.

    リンクは base_url で絶対 URL にする。どの候補にも一致しなければ None。
    """
    for selector in locator.selectors:
        node = entry.select_one(selector)
        if node is None:
            continue
        if locator.attr is None:
            return node.get_text().strip()
        value = (node.get(locator.attr) or "").strip()
        if value and base_url:
            value = urljoin(base_url, value)
        return value
    return None


def find_listing_entries(page: SearchPage) -> list[Tag]:
    """商品一覧のコンテナ要素を取得する.

    先に一致したレイアウトを優先する。どれにも一致しなければ
    NoContainerFoundError を送出する。
    """
    for selector in CONTAINER_SELECTORS:
        entries = page.select(selector)
        if entries:
            logger.debug("コンテナ検出: selector=%s, %d 件", selector, len(entries))
            return entries
    raise NoContainerFoundError(CONTAINER_SELECTORS)


def collect_listings(page: SearchPage, max_items: int = MAX_ITEMS) -> list[Listing]:
    """検索結果ページから商品リストを抽出する.

    先頭 max_items 件のうち、価格が取れた商品だけを返す。
    """
    if max_items < 1:
        raise ValueError(f"max_items must be >= 1, got {max_items}")

    entries = find_listing_entries(page)
    listings: list[Listing] = []
    for i, entry in enumerate(entries[:max_items], start=1):
        price = resolve_field(entry, PRICE_LOCATOR, page.url)
        if price is None:
            logger.debug("価格なしのためスキップ: index=%d", i)
            continue

        title = resolve_field(entry, TITLE_LOCATOR, page.url)
        link = resolve_field(entry, LINK_LOCATOR, page.url)
        listings.append(Listing(
            position=len(listings) + 1,
            title=title if title is not None else DEFAULT_TITLE,
            price=price,
            link=link or "",
        ))

    return listings
