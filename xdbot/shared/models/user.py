"""Data models for chat users and their roles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Role(IntEnum):
    """Chat roles, ordered by privilege (higher value = more privilege)."""

    NONE = 0
    USER = 1
    EDITOR = 2
    STREAMER = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class User:
    """Chat user record. Keyed by name in the users store."""

    name: str
    role: Role = Role.USER

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "role": int(self.role)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        return cls(name=str(data["name"]), role=Role(int(data.get("role", Role.USER))))


Users = dict[str, User]
