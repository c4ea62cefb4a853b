"""Role hierarchy and command access checks."""

from __future__ import annotations

import re

from ..shared.models.user import Role

# Anything that looks like a number is refused so that "2" can never
# be confused with the role whose value happens to be 2.
_NUMERIC_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")


def allows(user_role: Role, required_role: Role) -> bool:
    """Check if a user role meets the minimum role requirement."""
    return user_role >= required_role


def role_names() -> list[str]:
    """Role names in ascending order of privilege."""
    return [role.label for role in Role]


def role_by_name(text: str) -> Role | None:
    """Look up a role by its (case-insensitive) name.

    Returns None for unknown names and for numeric input.
    """
    value = text.strip()
    if not value or _NUMERIC_PATTERN.fullmatch(value):
        return None

    value = value[:1].upper() + value[1:].lower()
    for role in Role:
        if role.label == value:
            return role
    return None
