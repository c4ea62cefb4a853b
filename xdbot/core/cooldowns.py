"""Per-sound cooldown table transitions.

The table is sparse: a sound only has an entry while at least one of its
two windows is nonzero. Both operations return a new table and leave the
input untouched; if nothing changes, the input table itself is returned.
"""

from __future__ import annotations

from collections.abc import Container, Mapping
from dataclasses import replace
from enum import Enum

from ..shared.models.cooldown import Cooldown

Cooldowns = Mapping[str, Cooldown]


class CooldownField(str, Enum):
    PER_USER = "perUser"
    PER_SOUND = "perSound"

    @classmethod
    def from_scope(cls, scope: str) -> CooldownField:
        """"user" -> PER_USER, "sound" -> PER_SOUND."""
        return cls.PER_USER if scope == "user" else cls.PER_SOUND


def _with_field(record: Cooldown, field: CooldownField, millis: int) -> Cooldown:
    if field is CooldownField.PER_USER:
        return replace(record, per_user=millis)
    return replace(record, per_sound=millis)


def _store(table: Cooldowns, sound: str, record: Cooldown) -> dict[str, Cooldown]:
    updated = dict(table)
    if record.is_empty:
        updated.pop(sound, None)
    else:
        updated[sound] = record
    return updated


def set_cooldown(
    table: Cooldowns,
    sound: str,
    field: CooldownField,
    millis: int,
    known_sounds: Container[str],
) -> Cooldowns:
    """Set one window of a sound, keeping the other one."""
    if sound not in known_sounds:
        return table

    current = table.get(sound, Cooldown())
    return _store(table, sound, _with_field(current, field, max(0, millis)))


def clear_cooldown(
    table: Cooldowns,
    sound: str,
    field: CooldownField,
    known_sounds: Container[str],
) -> Cooldowns:
    """Zero one window of a sound; drop the entry once both are zero."""
    if sound not in known_sounds or sound not in table:
        return table

    return _store(table, sound, _with_field(table[sound], field, 0))
