"""
View Preferences

Key-value persistence for the results panel: the active view mode and the
chart preferences (type, legend, grid). Axis bindings are never stored because
they depend on the data.
"""

from typing import Dict, Optional, Protocol
import json
import logging
import os
from pathlib import Path

from .models import ChartConfig, ChartType

logger = logging.getLogger(__name__)

VIEW_MODE_KEY = "queryResultsViewMode"
CHART_PREFERENCES_KEY = "chartPreferences"

VIEW_MODES = ("table", "chart")
DEFAULT_VIEW_MODE = "table"


class PreferencesStore(Protocol):
    """Minimal key-value store for string values."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryPreferencesStore:
    """Preferences held for the lifetime of the process."""

    def __init__(self, initial: Dict[str, str] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JSONFilePreferencesStore:
    """Preferences stored as a single JSON object on disk."""

    def __init__(self, path):
        self.path = Path(path).expanduser()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                values = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable preferences file {self.path}: {e}")
            return {}
        if not isinstance(values, dict):
            logger.warning(f"Ignoring malformed preferences file {self.path}")
            return {}
        return values

    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        values = self._load()
        values[key] = value
        os.makedirs(self.path.parent, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(values, f, indent=2)


def load_chart_preferences(store: PreferencesStore) -> ChartConfig:
    """Build the initial chart config from stored preferences, axes empty."""
    config = ChartConfig()
    try:
        raw = store.get(CHART_PREFERENCES_KEY)
        if not raw:
            return config
        prefs = json.loads(raw)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load chart preferences: {e}")
        return config

    if not isinstance(prefs, dict):
        return config

    try:
        config.chart_type = ChartType(prefs.get("type") or ChartType.BAR.value)
    except ValueError:
        logger.warning(f"Unknown stored chart type {prefs.get('type')!r}, using bar")
    if prefs.get("showLegend") is not None:
        config.show_legend = bool(prefs["showLegend"])
    if prefs.get("showGrid") is not None:
        config.show_grid = bool(prefs["showGrid"])
    return config


def save_chart_preferences(store: PreferencesStore, config: ChartConfig) -> None:
    """Persist type and display toggles. Failures are logged, not raised."""
    try:
        store.set(CHART_PREFERENCES_KEY, json.dumps(config.to_preferences()))
    except (OSError, TypeError, ValueError) as e:
        logger.warning(f"Failed to save chart preferences: {e}")


def load_view_mode(store: PreferencesStore) -> str:
    try:
        mode = store.get(VIEW_MODE_KEY)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load view mode preference: {e}")
        return DEFAULT_VIEW_MODE
    return mode if mode in VIEW_MODES else DEFAULT_VIEW_MODE


def save_view_mode(store: PreferencesStore, mode: str) -> None:
    try:
        store.set(VIEW_MODE_KEY, mode)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to save view mode preference: {e}")
