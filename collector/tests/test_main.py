"""main モジュールのテスト."""

from pathlib import Path
from unittest.mock import patch

import pytest

from meli_collector.main import parse_args, run

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture(autouse=True)
def _no_logging_setup():
    with patch("meli_collector.main.setup_logging"):
        yield


class TestParseArgs:
    """parse_args のテスト."""

    def test_defaults(self):
        args = parse_args([])
        assert args.producto == "laptop"
        assert args.max_items == 15
        assert not args.db

    def test_rejects_non_positive_max_items(self):
        with pytest.raises(SystemExit):
            parse_args(["mesa", "--max-items", "0"])


class TestRun:
    """run のテスト."""

    @patch("meli_collector.main.save_result_json")
    @patch("meli_collector.main.fetch_search_page")
    def test_success(self, mock_fetch, mock_save):
        mock_fetch.return_value = _fixture("search_poly.html")

        assert run(["mesa de centro"]) == 0

        mock_fetch.assert_called_once_with("mesa de centro")
        result = mock_save.call_args.args[0]
        assert result.query == "mesa de centro"
        assert result.total_count == 4
        assert result.exact_count == 2

    @patch("meli_collector.main.save_result_json")
    @patch("meli_collector.main.fetch_search_page")
    def test_no_save(self, mock_fetch, mock_save):
        mock_fetch.return_value = _fixture("search_legacy.html")

        assert run(["laptop", "--no-save"]) == 0
        mock_save.assert_not_called()

    @patch("meli_collector.main.db.insert_search_result")
    @patch("meli_collector.main.save_result_json")
    @patch("meli_collector.main.fetch_search_page")
    def test_db_flag(self, mock_fetch, _save, mock_insert):
        mock_fetch.return_value = _fixture("search_legacy.html")

        assert run(["laptop", "--db"]) == 0
        mock_insert.assert_called_once()

    @patch("meli_collector.main.save_result_json")
    @patch("meli_collector.main.fetch_search_page", return_value=None)
    def test_fetch_failure(self, _fetch, mock_save):
        assert run(["laptop"]) == 1
        mock_save.assert_not_called()

    @patch("meli_collector.main.save_result_json")
    @patch("meli_collector.main.fetch_search_page")
    def test_no_container(self, mock_fetch, mock_save):
        mock_fetch.return_value = "<html><body><p>Hubo un problema</p></body></html>"

        assert run(["laptop"]) == 1
        mock_save.assert_not_called()

    @patch("meli_collector.main.save_result_json")
    @patch("meli_collector.main.render_search_page")
    def test_browser_mode(self, mock_render, _save):
        mock_render.return_value = _fixture("search_legacy.html")

        assert run(["laptop", "--mode", "browser", "--headed"]) == 0
        url, config = mock_render.call_args.args
        assert url == "https://listado.mercadolibre.com.mx/laptop"
        assert config.headless is False

    @patch("meli_collector.main.save_result_json", side_effect=PermissionError("denied"))
    @patch("meli_collector.main.fetch_search_page")
    def test_save_failure(self, mock_fetch, _save):
        """保存に失敗したら終了コード 1 を返すこと."""
        mock_fetch.return_value = _fixture("search_legacy.html")

        assert run(["laptop"]) == 1
