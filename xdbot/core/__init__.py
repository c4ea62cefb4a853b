"""Core modules for the soundboard bot."""

from .aliases import resolve
from .commands import (
    Branch,
    CommandHelp,
    DispatchResult,
    DispatchStatus,
    Leaf,
    describe_commands,
    dispatch,
    invoke_default,
    iter_commands,
)
from .config import DATA_DIR, SOUNDS_DIR, SoundboardSettings, get_settings
from .cooldowns import CooldownField, clear_cooldown, set_cooldown
from .dispatcher import Soundboard, handle_message
from .duration import format_duration, parse_duration
from .guards import allows, role_by_name, role_names
from .logging import setup_logging
from .player import Player, SubprocessAudioBackend, load_sound_library
from .tts import CommandTTS

__all__ = [
    # Settings
    "get_settings",
    "SoundboardSettings",
    # Path Constants
    "DATA_DIR",
    "SOUNDS_DIR",
    # Setup functions
    "setup_logging",
    # Commands
    "Branch",
    "CommandHelp",
    "DispatchResult",
    "DispatchStatus",
    "Leaf",
    "describe_commands",
    "dispatch",
    "invoke_default",
    "iter_commands",
    "Soundboard",
    "handle_message",
    # Guards
    "allows",
    "role_by_name",
    "role_names",
    # Policy
    "resolve",
    "CooldownField",
    "clear_cooldown",
    "set_cooldown",
    "format_duration",
    "parse_duration",
    # Collaborators
    "CommandTTS",
    "Player",
    "SubprocessAudioBackend",
    "load_sound_library",
]
