"""Data models for xdbot channel state."""

from .cooldown import Cooldown
from .preferences import (
    DEFAULT_PREFERENCES,
    PREFERENCE_DESCRIPTIONS,
    Preferences,
    default_preferences,
    load_preferences,
)
from .user import Role, User, Users

__all__ = [
    "Cooldown",
    "DEFAULT_PREFERENCES",
    "PREFERENCE_DESCRIPTIONS",
    "Preferences",
    "Role",
    "User",
    "Users",
    "default_preferences",
    "load_preferences",
]
