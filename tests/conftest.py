from datetime import date
from pathlib import Path

import pytest

from postmortem import config
from postmortem.journal import get_report_path


@pytest.fixture(autouse=True)
def default_config(tmp_path, monkeypatch):
    """Every test starts from the built-in defaults, never the user's config."""
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(tmp_path / "no-such-config.yaml"))
    config.use_config(None)
    yield
    config.use_config(None)


@pytest.fixture
def reports_root(tmp_path) -> Path:
    root = tmp_path / "reports"
    root.mkdir()
    return root


@pytest.fixture
def write_report(reports_root):
    """Write a report for a date using the default folder layout."""

    def _write(day: date, text: str) -> Path:
        path = get_report_path(day, reports_root)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
