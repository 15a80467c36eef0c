"""データモデル定義."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Listing:
    """検索結果から抽出した1商品（順位付け前）を表す."""

    position: int  # 抽出順の仮順位（1始まり）
    title: str  # 商品名。取得できなければ "Sin título"
    price: str  # 表示どおりの価格文字列 (例: "12,999")
    link: str = ""  # 商品ページの絶対 URL。取得できなければ空文字


@dataclass(frozen=True)
class RankedListing:
    """関連度で並べ替えた後の1商品を表す."""

    position: int  # 並べ替え後の順位（1始まり・連番）
    title: str
    price: str
    link: str
    exact_match: bool  # 検索語の全トークンを単語として含むか

    def to_dict(self) -> dict:
        return {
            "posicion": self.position,
            "titulo": self.title,
            "precio": self.price,
            "link": self.link,
            "coincidenciaExacta": self.exact_match,
        }


@dataclass(frozen=True)
class SearchResult:
    """1回の検索実行結果。組み立て後は変更しない."""

    query: str
    timestamp: datetime  # 組み立て時刻 (UTC)
    total_count: int
    exact_count: int
    partial_count: int
    listings: tuple[RankedListing, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """JSON 保存用の辞書に変換する."""
        return {
            "producto": self.query,
            "fecha": self.timestamp.isoformat(),
            "totalResultados": self.total_count,
            "coincidenciasExactas": self.exact_count,
            "coincidenciasParciales": self.partial_count,
            "resultados": [listing.to_dict() for listing in self.listings],
        }
