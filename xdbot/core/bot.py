"""Twitch Bot class: joins one channel's chat and feeds it to the soundboard."""

from __future__ import annotations

import logging

import twitchio
from twitchio import eventsub
from twitchio.ext import commands

from .dispatcher import Soundboard

LOGGER: logging.Logger = logging.getLogger("Bot")


class Bot(commands.Bot):
    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        bot_id: str,
        owner_id: str,
        channel: str,
        soundboard: Soundboard,
    ) -> None:
        self.channel_login = channel
        self.soundboard = soundboard

        # twitchio needs a prefix, but commands are routed by the soundboard
        # with the prefix from its own store.
        super().__init__(
            client_id=client_id,
            client_secret=client_secret,
            bot_id=bot_id,
            owner_id=owner_id,
            prefix=soundboard.stores.prefix.get(),
        )

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    async def setup_hook(self) -> None:
        users = await self.fetch_users(logins=[self.channel_login])
        if not users:
            LOGGER.error(f"Channel not found: {self.channel_login}")
            return

        broadcaster = users[0]
        subscription = eventsub.ChatMessageSubscription(
            broadcaster_user_id=broadcaster.id, user_id=self.bot_id
        )
        await self.subscribe_websocket(payload=subscription)
        LOGGER.info(f"Subscribed to chat of {self.channel_login} (ID: {broadcaster.id})")

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    async def event_ready(self) -> None:
        LOGGER.info("Successfully logged in as: %s", self.bot_id)

    async def event_message(self, payload: twitchio.ChatMessage) -> None:
        if payload.chatter.id == self.bot_id:
            return

        LOGGER.debug(f"[{payload.chatter.name}]: {payload.text}")
        if not payload.chatter.name or not payload.text:
            return

        self.soundboard.on_message(payload.chatter.name, payload.text)
