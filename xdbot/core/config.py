"""Soundboard bot configuration"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..shared.stores import DEFAULT_PREFIX
from .player import DEFAULT_PLAYER_COMMAND
from .tts import DEFAULT_TTS_COMMAND

logger = logging.getLogger(__name__)

# === Path Configuration ===
PACKAGE_DIR = Path(__file__).parent.parent
PROJECT_DIR = PACKAGE_DIR.parent
DATA_DIR = PROJECT_DIR / "data"
SOUNDS_DIR = PROJECT_DIR / "sounds"


class SoundboardSettings(BaseSettings):
    """Soundboard bot settings"""

    model_config = SettingsConfigDict(
        env_file=PROJECT_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Twitch OAuth
    client_id: str = Field(..., description="Twitch OAuth Client ID")
    client_secret: str = Field(..., description="Twitch OAuth Client Secret")

    # Bot Configuration
    bot_id: str = Field(..., description="Bot User ID")
    owner_id: str = Field(..., description="Owner User ID")

    # Channel whose chat drives the soundboard
    channel: str = Field(..., description="Twitch channel login")
    default_prefix: str = Field(default=DEFAULT_PREFIX, description="Initial command prefix")

    # Storage and media
    data_dir: Path = Field(default=DATA_DIR, description="Directory for persisted channel state")
    sounds_dir: Path = Field(default=SOUNDS_DIR, description="Directory of playable sound files")

    # External programs
    player_command: str = Field(default=DEFAULT_PLAYER_COMMAND, description="Audio player command")
    tts_command: str = Field(default=DEFAULT_TTS_COMMAND, description="Text-to-speech command")

    # Environment
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("channel")
    @classmethod
    def validate_channel(cls, v: str) -> str:
        """Channel logins are lowercase and must not be empty"""
        v = v.strip().lower()
        if not v:
            raise ValueError("CHANNEL must not be empty")
        return v

    @field_validator("default_prefix")
    @classmethod
    def validate_default_prefix(cls, v: str) -> str:
        """Reject an empty prefix (it would match every message)"""
        if not v.strip():
            raise ValueError("DEFAULT_PREFIX must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            logger.warning(f"Invalid log level '{v}', defaulting to INFO")
            return "INFO"
        return v_upper


@lru_cache
def get_settings() -> SoundboardSettings:
    """Get cached settings instance"""
    return SoundboardSettings()  # type: ignore[call-arg]
