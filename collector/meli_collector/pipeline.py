"""抽出 → 並べ替え → 結果組み立てのパイプライン."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from meli_collector.config import MAX_ITEMS
from meli_collector.models import RankedListing, SearchResult
from meli_collector.ranking import classify_listings
from meli_collector.scraper import SearchPage, collect_listings

logger = logging.getLogger(__name__)


def assemble_result(
    query: str, ranked: list[RankedListing], now: datetime | None = None
) -> SearchResult:
    """並べ替え済みの商品リストから SearchResult を組み立てる."""
    listings = tuple(ranked)
    exact_count = sum(1 for listing in listings if listing.exact_match)
    return SearchResult(
        query=query,
        timestamp=now or datetime.now(timezone.utc),
        total_count=len(listings),
        exact_count=exact_count,
        partial_count=len(listings) - exact_count,
        listings=listings,
    )


def search(page: SearchPage, query: str, max_items: int = MAX_ITEMS) -> SearchResult:
    """取得済みページから検索結果を作る.

    コンテナが無ければ NoContainerFoundError がそのまま伝わる。
    """
    listings = collect_listings(page, max_items)
    logger.info("抽出結果: %d 件の商品を取得", len(listings))

    ranked = classify_listings(listings, query)
    result = assemble_result(query, ranked)
    logger.info(
        "完全一致: %d 件, 部分一致: %d 件",
        result.exact_count, result.partial_count,
    )
    return result
