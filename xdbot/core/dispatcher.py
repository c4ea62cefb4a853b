"""Chat message entry point: prefix matching, user lookup, autoplay."""

from __future__ import annotations

import logging

from ..shared.models.user import Role, User
from ..shared.stores import ChannelStores
from .commands import IGNORED, Branch, DispatchResult, dispatch, invoke_default

LOGGER = logging.getLogger("Dispatcher")


def handle_message(prefix: str, tree: Branch, user: User, raw_text: str) -> DispatchResult:
    """Dispatch raw chat text if it starts with the command prefix."""
    if not prefix or not raw_text.startswith(prefix):
        return IGNORED
    return dispatch(tree, user, raw_text[len(prefix):].split())


class Soundboard:
    """Routes one channel's chat messages through a command tree.

    The prefix, users and preferences are read from the stores on every
    message, so changes made by a command apply to the next message.
    """

    def __init__(self, stores: ChannelStores, tree: Branch) -> None:
        self.stores = stores
        self.tree = tree

    def resolve_user(self, name: str) -> User:
        name = name.lower()
        return self.stores.users.get().get(name) or User(name=name, role=Role.USER)

    def on_message(self, user_name: str, raw_text: str) -> DispatchResult:
        user = self.resolve_user(user_name)
        result = handle_message(self.stores.prefix.get(), self.tree, user, raw_text)

        if result is IGNORED and self.stores.prefs.get().get("autoplay", False):
            tokens = raw_text.split()
            if tokens:
                result = invoke_default(self.tree, user, tokens)

        if result is not IGNORED:
            LOGGER.debug(f"[{user.name}] {raw_text!r} -> {result.status.value} {result.reason or ''}")
        return result
