"""Mercado Libre 検索結果取得 — メインエントリーポイント.

処理フロー:
  1. 検索ページを取得（HTTP または ブラウザ）
  2. 商品一覧から価格・商品名・リンクを抽出
  3. 検索語との一致度で並べ替え
  4. 結果を表示し、JSON（と任意で DB）に保存
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from datetime import datetime

from meli_collector import db
from meli_collector.browser import BrowserConfig, render_search_page
from meli_collector.config import FETCH_MODE, FETCH_MODES, HEADLESS, LOG_DIR, MAX_ITEMS
from meli_collector.exceptions import CollectorError, FetchError
from meli_collector.models import SearchResult
from meli_collector.pipeline import search
from meli_collector.scraper import build_search_url, fetch_search_page, parse_page
from meli_collector.storage import save_result_json

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """ロギングの初期設定."""
    log_file = LOG_DIR / f"collector_{datetime.now().strftime('%Y%m%d')}.log"
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"debe ser >= 1: {value}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="meli-collector",
        description="Busca un producto en Mercado Libre México y guarda los resultados.",
    )
    parser.add_argument("producto", nargs="?", default="laptop")
    parser.add_argument("--max-items", type=_positive_int, default=MAX_ITEMS)
    parser.add_argument("--mode", choices=FETCH_MODES, default=FETCH_MODE)
    parser.add_argument("--headed", action="store_true", help="ブラウザを表示して実行")
    parser.add_argument("--no-save", action="store_true", help="JSON に保存しない")
    parser.add_argument("--db", action="store_true", help="Supabase にも書き込む")
    return parser.parse_args(argv)


def fetch_page_html(query: str, mode: str, headless: bool = HEADLESS) -> str:
    """指定の方式で検索ページを取得する. 取得できなければ FetchError."""
    url = build_search_url(query)
    if mode == "browser":
        html = render_search_page(url, BrowserConfig(headless=headless))
    else:
        html = fetch_search_page(query)
    if html is None:
        raise FetchError(url)
    return html


def log_result(result: SearchResult) -> None:
    """検索結果を一覧表示する."""
    logger.info("=== RESULTADOS ===")
    for listing in result.listings:
        mark = "✓" if listing.exact_match else "~"
        logger.info("%d. [%s] %s", listing.position, mark, listing.title)
        logger.info("   Precio: $%s MXN", listing.price)
        logger.info("   Link: %s", listing.link)


def run(argv: list[str] | None = None) -> int:
    """メイン処理. 終了コードを返す."""
    args = parse_args(argv)
    setup_logging()
    query = args.producto
    logger.info("=== 検索 開始: %s ===", query)
    start_time = time.time()

    try:
        html = fetch_page_html(query, args.mode, headless=not args.headed and HEADLESS)
        page = parse_page(html, build_search_url(query))
        result = search(page, query, args.max_items)
    except CollectorError as e:
        logger.error("検索失敗: query=%s, error=%s", query, e)
        return 1

    log_result(result)

    if not args.no_save:
        try:
            save_result_json(result)
        except OSError as e:
            logger.error("結果の保存に失敗: query=%s, error=%s", query, e)
            return 1
    if args.db:
        db.insert_search_result(result)

    elapsed = time.time() - start_time
    logger.info("=== 検索 完了 ===")
    logger.info(
        "取得: %d 件 (完全一致 %d 件, 部分一致 %d 件), 所要時間: %.1f 秒",
        result.total_count, result.exact_count, result.partial_count, elapsed,
    )
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
