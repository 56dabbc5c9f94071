"""JSON-based settings persistence for the mini calendar."""

import json
import logging
import os

from calendar_logic import DAY_ABBR, MONTH_NAMES

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".mini-calendar-settings.json")
_SETTINGS_ENV = "MINI_CALENDAR_SETTINGS"

_DEFAULTS = {
    "page_title": "DatePicker Example",
    "month_names": list(MONTH_NAMES),
    "day_abbr": list(DAY_ABBR),
    "selected_attribute": "aria-selected",
}

# Expected length of each list-valued key
_LIST_LENGTHS = {"month_names": 12, "day_abbr": 7}


def settings_path() -> str:
    """Return the settings file path, honouring ``MINI_CALENDAR_SETTINGS``."""
    return os.environ.get(_SETTINGS_ENV) or _SETTINGS_PATH


def _valid_names(value, length: int) -> bool:
    return (
        isinstance(value, list)
        and len(value) == length
        and all(isinstance(v, str) and v for v in value)
    )


def default_settings() -> dict:
    """Return a fresh copy of the built-in defaults."""
    return {k: list(v) if isinstance(v, list) else v for k, v in _DEFAULTS.items()}


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    path = path or settings_path()
    settings = default_settings()
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", path)
        return settings

    for key, length in _LIST_LENGTHS.items():
        if key in stored:
            if _valid_names(stored[key], length):
                settings[key] = list(stored[key])
            else:
                logger.warning("Ignoring invalid %r in %s", key, path)
    for key in ("page_title", "selected_attribute"):
        if isinstance(stored.get(key), str) and stored[key]:
            settings[key] = stored[key]
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    path = path or settings_path()
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
    logger.debug("Saved settings to %s", path)
