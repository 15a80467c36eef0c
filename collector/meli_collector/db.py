"""Supabase データベース操作モジュール.

全テーブルは meli_search スキーマに配置。
認証情報が未設定の場合は書き込みを行わない。
"""

from __future__ import annotations

import logging

from supabase import create_client

from meli_collector.config import SUPABASE_SCHEMA, SUPABASE_SECRET_KEY, SUPABASE_URL
from meli_collector.models import SearchResult

logger = logging.getLogger(__name__)

_client = None


def is_enabled() -> bool:
    """Supabase の認証情報が設定されているか."""
    return bool(SUPABASE_URL and SUPABASE_SECRET_KEY)


def _table(name: str):
    """meli_search スキーマのテーブルを参照する."""
    global _client
    if _client is None:
        _client = create_client(SUPABASE_URL, SUPABASE_SECRET_KEY)
    return _client.schema(SUPABASE_SCHEMA).table(name)


def insert_search_result(result: SearchResult) -> str | None:
    """検索実行と商品リストを書き込む.

    Returns:
        作成した searches レコードの id。スキップ時は None。
    """
    if not is_enabled():
        logger.info("Supabase 未設定のため DB 書き込みをスキップ")
        return None

    resp = (
        _table("searches")
        .insert({
            "query": result.query,
            "searched_at": result.timestamp.isoformat(),
            "total_count": result.total_count,
            "exact_count": result.exact_count,
            "partial_count": result.partial_count,
        })
        .execute()
    )
    search_id = resp.data[0]["id"]

    records = [
        {
            "search_id": search_id,
            "position": listing.position,
            "title": listing.title,
            "price": listing.price,
            "link": listing.link,
            "exact_match": listing.exact_match,
        }
        for listing in result.listings
    ]
    if records:
        _table("listings").insert(records).execute()
    logger.info("searches に 1 件, listings に %d 件挿入", len(records))
    return search_id
