"""Shared pytest fixtures for the mini calendar tests."""

from datetime import date

import pytest

from calendar_logic import MONTH_NAMES


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    """Point the settings file at a per-test temp path."""
    path = tmp_path / "mini-calendar-settings.json"
    monkeypatch.setenv("MINI_CALENDAR_SETTINGS", str(path))
    return path


@pytest.fixture
def month_names() -> list[str]:
    """The month-name fixture the page title is checked against."""
    return list(MONTH_NAMES)


@pytest.fixture
def freeze_today(monkeypatch):
    """Freeze ``date.today()`` as seen by ``module`` to ``frozen``."""

    def _freeze(module, frozen: date) -> None:
        class _FixedDate(date):
            @classmethod
            def today(cls):
                return cls(frozen.year, frozen.month, frozen.day)

        monkeypatch.setattr(module, "date", _FixedDate)

    return _freeze
