"""検索語との一致度による並べ替え.

全トークンを単語として含む商品（完全一致）を先頭に、残り（部分一致）を後ろに置く。
各グループ内の順序は検索結果ページの順序のまま。
"""

from __future__ import annotations

import re

from meli_collector.models import Listing, RankedListing


def tokenize_query(query: str) -> list[str]:
    """検索語を小文字化し、空白で区切ってトークンにする."""
    return query.lower().split()


def is_exact_match(title: str, tokens: list[str]) -> bool:
    """全トークンが商品名に単語として含まれるか判定する.

    "mesa" は "mesada" には一致しない。トークンが空なら True。
    """
    lowered = title.lower()
    return all(
        re.search(rf"(?<!\w){re.escape(token)}(?!\w)", lowered) is not None
        for token in tokens
    )


def classify_listings(listings: list[Listing], query: str) -> list[RankedListing]:
    """完全一致 → 部分一致の順に並べ替え、順位を振り直す."""
    tokens = tokenize_query(query)

    exact: list[Listing] = []
    partial: list[Listing] = []
    for listing in listings:
        if is_exact_match(listing.title, tokens):
            exact.append(listing)
        else:
            partial.append(listing)

    return [
        RankedListing(
            position=i,
            title=listing.title,
            price=listing.price,
            link=listing.link,
            exact_match=i <= len(exact),
        )
        for i, listing in enumerate(exact + partial, start=1)
    ]
