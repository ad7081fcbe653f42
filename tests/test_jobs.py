import json
import logging
import sys
from pathlib import Path
from typing import Any

import pytest

from wyrmfinder.jobs.validate_catalog import main, run_validation
from wyrmfinder.models.failure import CatalogError, FailureKind


class TestValidateCatalog:
    def test_reports_default_result_by_category(
        self, tmp_path: Path, card_records: list[dict[str, Any]]
    ) -> None:
        path = tmp_path / "cards.json"
        path.write_text(json.dumps(card_records), encoding="utf-8")

        assert run_validation(path) == {"Dragon": 4, "Cave": 2}

    def test_logs_app_name(
        self,
        tmp_path: Path,
        card_records: list[dict[str, Any]],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        path = tmp_path / "cards.json"
        path.write_text(json.dumps(card_records), encoding="utf-8")

        with caplog.at_level(logging.INFO):
            run_validation(path)

        assert "Validating Wyrmfinder card catalog" in caplog.text

    def test_malformed_catalog_fails(self, tmp_path: Path) -> None:
        path = tmp_path / "cards.json"
        path.write_text(json.dumps([{"id": "a"}, {"id": "a"}]), encoding="utf-8")

        with pytest.raises(CatalogError):
            run_validation(path)

    def test_missing_catalog_fails(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            run_validation(tmp_path / "missing.json")


class TestMain:
    """Tests for the command-line entry point."""

    def test_valid_catalog_exits_cleanly(
        self,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
        card_records: list[dict[str, Any]],
    ) -> None:
        path = tmp_path / "cards.json"
        path.write_text(json.dumps(card_records), encoding="utf-8")
        monkeypatch.setattr(sys, "argv", ["wyrmfinder-validate", str(path)])

        main()

    def test_known_failure_logs_detail_and_exits(
        self,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        path = tmp_path / "cards.json"
        path.write_text(json.dumps([{"id": "a"}, {"id": "a"}]), encoding="utf-8")
        monkeypatch.setattr(sys, "argv", ["wyrmfinder-validate", str(path)])

        with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert f'"kind":"{FailureKind.DUPLICATE_ID.value}"' in caplog.text
        assert '"suggestion":"Fix the card dataset and restart."' in caplog.text
