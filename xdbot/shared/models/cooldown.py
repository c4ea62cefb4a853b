"""Data model for per-sound cooldown windows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Cooldown:
    """Cooldown windows of one sound, in milliseconds."""

    per_user: int = 0  # same user replaying the sound
    per_sound: int = 0  # anyone replaying the sound

    @property
    def is_empty(self) -> bool:
        return self.per_user == 0 and self.per_sound == 0

    def to_dict(self) -> dict[str, int]:
        return {"perUser": self.per_user, "perSound": self.per_sound}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Cooldown:
        return cls(
            per_user=int(data.get("perUser", 0)),
            per_sound=int(data.get("perSound", 0)),
        )
