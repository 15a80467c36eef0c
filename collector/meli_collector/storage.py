"""検索結果の JSON ファイル保存."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from meli_collector.config import RESULTS_DIR
from meli_collector.models import SearchResult

logger = logging.getLogger(__name__)


def result_filename(result: SearchResult) -> str:
    """保存ファイル名を作る (例: resultados-mesa-de-centro-2026-02-27T10-15-00.json)."""
    slug = re.sub(r"[^\w-]+", "-", result.query.strip()).strip("-")
    stamp = result.timestamp.strftime("%Y-%m-%dT%H-%M-%S")
    return f"resultados-{slug}-{stamp}.json"


def save_result_json(result: SearchResult, results_dir: Path = RESULTS_DIR) -> Path:
    """検索結果を JSON で保存し、保存先パスを返す."""
    results_dir.mkdir(parents=True, exist_ok=True)
    path = results_dir / result_filename(result)
    path.write_text(
        json.dumps(result.to_dict(), ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
    logger.info("結果を保存しました: %s", path)
    return path
