"""設定モジュール — 環境変数・定数定義."""

import os
from pathlib import Path

from dotenv import load_dotenv

# .env はプロジェクトルートに配置
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

# --- Supabase (任意。未設定なら DB 書き込みをスキップ) ---
SUPABASE_URL: str = os.environ.get("SUPABASE_URL", "")
SUPABASE_SECRET_KEY: str = os.environ.get("SUPABASE_SECRET_KEY", "")
SUPABASE_SCHEMA = "meli_search"

# --- Mercado Libre 検索 ---
SEARCH_URL_TEMPLATE = os.environ.get(
    "MELI_SEARCH_URL", "https://listado.mercadolibre.com.mx/{keyword}"
)

# --- 取得件数 ---
def _env_positive_int(name: str, default: int) -> int:
    """環境変数を 1 以上の整数として読む. 不正な値なら ValueError."""
    raw = os.environ.get(name, str(default))
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer >= 1, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be an integer >= 1, got {raw!r}")
    return value


MAX_ITEMS = _env_positive_int("MELI_MAX_ITEMS", 15)

# --- 取得方式 ---
FETCH_MODES = ["http", "browser"]
FETCH_MODE = os.environ.get("MELI_FETCH_MODE", "http")
HEADLESS = os.environ.get("MELI_HEADLESS", "true").lower() not in ("0", "false", "no")

# --- User-Agent ---
PC_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/131.0.0.0 Safari/537.36"
)
SP_USER_AGENT = (
    "Mozilla/5.0 (Linux; Android 14; Pixel 8) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/131.0.0.0 Mobile Safari/537.36"
)

USER_AGENTS = {
    "pc": PC_USER_AGENT,
    "sp": SP_USER_AGENT,
}

# --- リクエスト設定 ---
REQUEST_TIMEOUT = 15  # 秒
NAVIGATION_TIMEOUT_MS = 30_000
RESULTS_WAIT_TIMEOUT_MS = 15_000
SETTLE_DELAY_MS = 2_000

# --- ブラウザ起動引数（自動操作検出の回避） ---
STEALTH_ARGS = [
    "--disable-blink-features=AutomationControlled",
    "--no-default-browser-check",
    "--no-first-run",
    "--disable-infobars",
]

# --- セレクタ（先頭から順に試す） ---
# 新レイアウト → 旧レイアウト
CONTAINER_SELECTORS = [".ui-search-layout__item", ".ui-search-result"]
TITLE_SELECTORS = [
    "h2.poly-box.poly-component__title a",
    "h2.poly-component__title a",
    ".poly-component__title",
    ".ui-search-item__title",
]
PRICE_SELECTORS = [".andes-money-amount__fraction", ".price-tag-fraction"]
LINK_SELECTORS = ["a.poly-component__title", "a"]

DEFAULT_TITLE = "Sin título"

# --- 出力 ---
RESULTS_DIR = _PROJECT_ROOT / "resultados"

# --- ログ ---
LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
LOG_DIR.mkdir(exist_ok=True)
