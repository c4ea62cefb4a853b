"""Sound alias lookup."""

from __future__ import annotations

from collections.abc import Mapping


def resolve(aliases: Mapping[str, str], name: str) -> str:
    """Map a sound name to its canonical name.

    Only one hop is followed: if an alias points at another alias, the
    target is returned as-is.
    """
    name = name.lower()
    return aliases.get(name, name)
