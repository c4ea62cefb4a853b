"""Per-channel store bundle: prefix, users, preferences, aliases, cooldowns."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .models.cooldown import Cooldown
from .models.preferences import Preferences, default_preferences, load_preferences
from .models.user import Role, User, Users
from .store import JsonFileStore, MemoryStore, Store

DEFAULT_PREFIX = "!xd"

Aliases = dict[str, str]
Cooldowns = dict[str, Cooldown]


def store_key(key: str, channel: str | None) -> str:
    """Namespace a store key by channel, e.g. ``users.somechannel``."""
    return f"{key}.{channel}" if channel else key


def _encode_users(users: Users) -> dict[str, Any]:
    return {name: user.to_dict() for name, user in users.items()}


def _decode_users(data: dict[str, Any]) -> Users:
    return {name: User.from_dict(value) for name, value in data.items()}


def _encode_cooldowns(cooldowns: Cooldowns) -> dict[str, Any]:
    return {sound: cooldown.to_dict() for sound, cooldown in cooldowns.items()}


def _decode_cooldowns(data: dict[str, Any]) -> Cooldowns:
    decoded = {sound: Cooldown.from_dict(value) for sound, value in data.items()}
    return {sound: cooldown for sound, cooldown in decoded.items() if not cooldown.is_empty}


def _decode_aliases(data: dict[str, Any]) -> Aliases:
    return {str(name).lower(): str(target) for name, target in data.items()}


def _decode_prefix(data: Any) -> str:
    if not isinstance(data, str) or not data:
        raise ValueError("prefix must be a non-empty string")
    return data


@dataclass
class ChannelStores:
    prefix: Store[str]
    users: Store[Users]
    prefs: Store[Preferences]
    aliases: Store[Aliases]
    cooldowns: Store[Cooldowns]


def _initial_users(channel: str | None) -> Callable[[], Users]:
    def factory() -> Users:
        if not channel:
            return {}
        return {channel: User(name=channel, role=Role.STREAMER)}

    return factory


def open_channel_stores(
    channel: str | None,
    data_dir: Path | None = None,
    *,
    default_prefix: str = DEFAULT_PREFIX,
) -> ChannelStores:
    """Open the stores of a channel.

    Without a channel or a data directory nothing is persisted.
    The channel owner is seeded as the only Streamer.
    """
    if not channel or data_dir is None:
        return ChannelStores(
            prefix=MemoryStore(store_key("prefix", channel), lambda: default_prefix),
            users=MemoryStore(store_key("users", channel), _initial_users(channel)),
            prefs=MemoryStore(store_key("preferences", channel), default_preferences),
            aliases=MemoryStore(store_key("aliases", channel), dict),
            cooldowns=MemoryStore(store_key("cooldowns", channel), dict),
        )

    return ChannelStores(
        prefix=JsonFileStore(
            data_dir,
            store_key("prefix", channel),
            lambda: default_prefix,
            decode=_decode_prefix,
        ),
        users=JsonFileStore(
            data_dir,
            store_key("users", channel),
            _initial_users(channel),
            encode=_encode_users,
            decode=_decode_users,
        ),
        prefs=JsonFileStore(
            data_dir,
            store_key("preferences", channel),
            default_preferences,
            decode=load_preferences,
        ),
        aliases=JsonFileStore(
            data_dir,
            store_key("aliases", channel),
            dict,
            decode=_decode_aliases,
        ),
        cooldowns=JsonFileStore(
            data_dir,
            store_key("cooldowns", channel),
            dict,
            encode=_encode_cooldowns,
            decode=_decode_cooldowns,
        ),
    )
