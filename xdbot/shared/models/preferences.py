"""Channel preference toggles."""

from __future__ import annotations

from typing import Any

DEFAULT_PREFERENCES: dict[str, bool] = {"autoplay": False}

PREFERENCE_DESCRIPTIONS: dict[str, str] = {
    "autoplay": "Allows playing sounds without the command prefix",
}

Preferences = dict[str, bool]


def default_preferences() -> Preferences:
    return dict(DEFAULT_PREFERENCES)


def load_preferences(data: dict[str, Any]) -> Preferences:
    """Known keys only, missing keys filled with their defaults."""
    prefs = default_preferences()
    for key in prefs:
        if isinstance(data.get(key), bool):
            prefs[key] = data[key]
    return prefs
