"""例外定義."""

from __future__ import annotations


class CollectorError(Exception):
    """収集処理の基底例外."""


class NoContainerFoundError(CollectorError):
    """検索結果ページに商品一覧のコンテナが見つからない.

    ブロックされたか、ページ構造が変わった可能性が高い。
    """

    def __init__(self, selectors: list[str]) -> None:
        self.selectors = list(selectors)
        super().__init__(
            "No se encontraron resultados: ningún contenedor de listado "
            f"coincide con {', '.join(self.selectors)}"
        )


class FetchError(CollectorError):
    """検索結果ページを取得できなかった."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"No se pudo obtener la página de resultados: {url}")
