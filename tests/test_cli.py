from __future__ import annotations

import json
import logging
import sys
from typing import List

import pytest

from services.page_fetcher import RequestsPageFetcher
from utils import logging_setup


def _run_cli_with_args(args_list: List[str]) -> None:
    """Run cli.py main() with provided argv in-process (no subprocess)."""
    argv_backup = sys.argv[:]
    try:
        sys.argv = ["cli.py"] + args_list
        # Import fresh to ensure clean parser each time
        if "cli" in sys.modules:
            del sys.modules["cli"]
        import cli  # type: ignore
        try:
            cli.main()  # type: ignore[attr-defined]
        except SystemExit as e:
            code = int(getattr(e, "code", 0) or 0)
            if code not in (0, None):
                raise
    finally:
        sys.argv = argv_backup


@pytest.fixture
def served(monkeypatch):
    """Serve one canned page to the real fetcher class and record requested URLs."""
    urls: List[str] = []

    def _serve(html: str) -> List[str]:
        def _fetch(self, url):
            urls.append(url)
            return html

        monkeypatch.setattr(RequestsPageFetcher, "fetch_page", _fetch)
        return urls

    return _serve


def test_cli_segment_prints_json(served, card_page, capsys):
    urls = served(card_page)
    _run_cli_with_args(["segment", "--location", "umeå", "--employees-to", "50", "--sort", "revenueDesc"])

    out, err = capsys.readouterr()
    data = json.loads(out)
    assert data["totalCount"] == 13170
    assert [r["name"] for r in data["results"]] == ["Fortnox AB", "Småbolaget AB"]
    assert all(r["location"] == "Umeå" for r in data["results"])
    assert "Umeå" in out
    assert "ALLABOLAG SEGMENTATION - SUMMARY" in err
    assert urls[0].endswith("location=Ume%C3%A5&numEmployeesTo=50&sort=revenueDesc")


def test_cli_segment_invalid_sort_exits_1(served, card_page, capsys):
    urls = served(card_page)
    with pytest.raises(SystemExit) as exc:
        _run_cli_with_args(["segment", "--sort", "invalidSortValue", "--quiet"])
    assert exc.value.code == 1
    _, err = capsys.readouterr()
    assert "Error: Invalid sort parameter: 'invalidSortValue'" in err
    assert urls == []


def test_cli_company(served, detail_page, capsys):
    served(detail_page)
    _run_cli_with_args(["company", "/foretag/fortnox-aktiebolag/växjö/programvaror/2K1Q3Z8I5YCDE"])
    data = json.loads(capsys.readouterr().out)
    assert data["name"] == "Fortnox Aktiebolag"
    assert data["orgNumber"] == "556469-6291"


def test_cli_search(served, empty_page, capsys):
    served(empty_page)
    _run_cli_with_args(["search", "ingenting"])
    assert json.loads(capsys.readouterr().out) == []


def test_cli_industry_codes_from_file(tmp_path, industry_page, capsys):
    path = tmp_path / "codes.html"
    path.write_text(industry_page, encoding="utf-8")
    _run_cli_with_args(["industry-codes", "--input", str(path)])
    data = json.loads(capsys.readouterr().out)
    assert data[1] == {"name": "Byggverksamhet", "industryCode": "10002"}


def test_cli_missing_input_file_exits_1(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        _run_cli_with_args(["industry-codes", "--input", str(tmp_path / "missing.html")])
    assert exc.value.code == 1
    assert "Error: " in capsys.readouterr().err


def test_cli_log_level_flag(served, empty_page, capsys):
    served(empty_page)
    _run_cli_with_args(["--log-level", "error", "search", "ingenting"])
    capsys.readouterr()
    assert logging_setup._HANDLER.level == logging.ERROR
    assert logging.getLogger().level == logging.ERROR
    # Restore the default for the remaining tests
    logging_setup.init_logging("info")
