"""Soundboard chat commands.

Usage (with the default prefix):
    !xd <sound>                          Play a sound (same as !xd play)
    !xd play <sound>                     Play a sound
    !xd stop                             Stop the current sound
    !xd say <text>                       Read text out loud
    !xd alias set <name> <sound>         Add or update an alias
    !xd alias rm <name>                  Remove an alias
    !xd cooldown set user <sound> <dur>  Per-user cooldown, e.g. 1m 30s
    !xd cooldown set sound <sound> <dur> Per-sound cooldown
    !xd cooldown rm user|sound <sound>   Remove a cooldown
    !xd role <user> <role>               Set a user's role
    !xd prefs <key> <value>              Set a preference
    !xd prefix <value>                   Change the command prefix
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.aliases import resolve
from ..core.commands import Branch, Leaf
from ..core.cooldowns import CooldownField, clear_cooldown, set_cooldown
from ..core.duration import MAX_DURATION, format_duration, parse_duration
from ..core.guards import role_by_name, role_names
from ..core.player import SoundPlayer
from ..core.tts import TTS
from ..shared.models.preferences import PREFERENCE_DESCRIPTIONS
from ..shared.models.user import Role, User
from ..shared.stores import ChannelStores

LOGGER = logging.getLogger("Soundboard")

_TRUTHY = {"on", "true", "yes"}
_FALSY = {"off", "false", "no"}


def _parse_pref_value(value: str, current: bool) -> bool | None:
    """Returns the new value, or None if the keyword is unrecognised."""
    value = value.lower()
    if value == "toggle":
        return not current
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return None


@dataclass
class SoundboardContext:
    """Everything a soundboard command may read or change."""

    stores: ChannelStores
    player: SoundPlayer
    tts: TTS


class SoundboardCommands:
    def __init__(self, ctx: SoundboardContext) -> None:
        self.ctx = ctx

    @property
    def stores(self) -> ChannelStores:
        return self.ctx.stores

    def _canonical(self, name: str) -> str:
        return resolve(self.stores.aliases.get(), name)

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------

    def play(self, user: User, sound: str | None = None, *_: str) -> str | None:
        if self.ctx.player.playing:
            return "a sound is already playing"
        if not sound:
            return "missing sound"

        sound = self._canonical(sound)
        if sound not in self.ctx.player.sounds:
            return f"unknown sound {sound!r}"

        if not self.ctx.player.play(sound, user.name):
            return f"{sound} was not played"
        LOGGER.info(f"{user.name} played {sound}")
        return None

    def stop(self, user: User, *_: str) -> str | None:
        playing = self.ctx.player.playing
        if not playing:
            return "nothing is playing"

        LOGGER.info(f"{user.name} stopped {playing}")
        self.ctx.player.stop()
        return None

    def say(self, user: User, *words: str) -> str | None:
        text = " ".join(words)
        if not text:
            return "missing text"

        self.ctx.tts.say(text)
        LOGGER.info(f"{user.name} said {text} through TTS")
        return None

    # ------------------------------------------------------------------
    # Channel management
    # ------------------------------------------------------------------

    def role(self, user: User, name: str | None = None, role_name: str | None = None, *_: str) -> str | None:
        if not name or not role_name:
            return "usage: role <user> <role>"
        role = role_by_name(role_name)
        if role is None:
            return f"unknown role {role_name!r}"

        name = name.lower()
        self.stores.users.update(lambda users: {**users, name: User(name=name, role=role)})
        LOGGER.info(f"{user.name} set role of {name} to {role.label}")
        return None

    def prefs(self, user: User, key: str | None = None, value: str | None = None, *_: str) -> str | None:
        if not key or not value:
            return "usage: prefs <key> <value>"
        key = key.lower()
        current = self.stores.prefs.get()
        if key not in current:
            return f"unknown preference {key!r}"
        new_value = _parse_pref_value(value, current[key])
        if new_value is None:
            return f"unknown value {value!r}"

        self.stores.prefs.update(lambda prefs: {**prefs, key: new_value})
        LOGGER.info(f"{user.name} updated preference {key} to {new_value}")
        return None

    def prefix(self, user: User, value: str | None = None, *_: str) -> str | None:
        if not value:
            return "missing prefix"

        self.stores.prefix.update(lambda _: value)
        LOGGER.info(f"{user.name} updated prefix to {value}")
        return None

    # ------------------------------------------------------------------
    # Aliases
    # ------------------------------------------------------------------

    def alias_set(self, user: User, name: str | None = None, target: str | None = None, *_: str) -> str | None:
        if not name or not target:
            return "usage: alias set <name> <sound>"
        name = name.lower()
        target = target.lower()
        if target not in self.ctx.player.sounds:
            return f"unknown sound {target!r}"

        exists = name in self.stores.aliases.get()
        self.stores.aliases.update(lambda aliases: {**aliases, name: target})
        LOGGER.info(f"{user.name} {'updated' if exists else 'added'} an alias: {name} -> {target}")
        return None

    def alias_rm(self, user: User, name: str | None = None, *_: str) -> str | None:
        if not name:
            return "usage: alias rm <name>"
        name = name.lower()
        if name not in self.stores.aliases.get():
            return f"unknown alias {name!r}"

        self.stores.aliases.update(
            lambda aliases: {alias: target for alias, target in aliases.items() if alias != name}
        )
        LOGGER.info(f"{user.name} removed an alias: {name}")
        return None

    # ------------------------------------------------------------------
    # Cooldowns
    # ------------------------------------------------------------------

    def _cooldown_set(self, field: CooldownField):
        def handler(user: User, name: str | None = None, *duration: str) -> str | None:
            if not name or not duration:
                return "usage: cooldown set user|sound <sound> <duration>"
            sound = self._canonical(name)
            sounds = self.ctx.player.sounds
            if sound not in sounds:
                return f"unknown sound {sound!r}"

            millis = parse_duration(" ".join(duration))
            if millis > MAX_DURATION:
                return f"cooldown longer than {format_duration(MAX_DURATION)}"
            self.stores.cooldowns.update(
                lambda table: set_cooldown(table, sound, field, millis, sounds)
            )
            LOGGER.info(f"{user.name} set {field.value} cooldown of {sound} to {format_duration(millis)}")
            return None

        return handler

    def _cooldown_rm(self, field: CooldownField):
        def handler(user: User, name: str | None = None, *_: str) -> str | None:
            if not name:
                return "usage: cooldown rm user|sound <sound>"
            sound = self._canonical(name)
            sounds = self.ctx.player.sounds
            if sound not in sounds:
                return f"unknown sound {sound!r}"
            if sound not in self.stores.cooldowns.get():
                return f"{sound} has no cooldown"

            self.stores.cooldowns.update(
                lambda table: clear_cooldown(table, sound, field, sounds)
            )
            LOGGER.info(f"{user.name} removed {field.value} cooldown of {sound}")
            return None

        return handler

    # ------------------------------------------------------------------
    # Tree
    # ------------------------------------------------------------------

    def _cooldown_leaves(self, scope: str) -> tuple[Leaf, Leaf]:
        field = CooldownField.from_scope(scope)
        set_leaf = Leaf(
            allows=Role.EDITOR,
            handler=self._cooldown_set(field),
            description=f"Set {scope} cooldown for {{0}} to {{1}}",
            example=lambda p: f"{p}cooldown set {scope} ame_hates_minecraft 1m 30s",
        )
        rm_leaf = Leaf(
            allows=Role.EDITOR,
            handler=self._cooldown_rm(field),
            description=f"Remove {scope} cooldown for {{0}}",
            example=lambda p: f"{p}cooldown rm {scope} ame_hates_minecraft",
        )
        return set_leaf, rm_leaf

    def tree(self) -> Branch:
        play = Leaf(
            allows=Role.USER,
            handler=self.play,
            description="Play the sound {0}",
            example=lambda p: f"{p}play ame_hates_minecraft",
        )
        user_set, user_rm = self._cooldown_leaves("user")
        sound_set, sound_rm = self._cooldown_leaves("sound")

        return Branch(
            default=play,
            children={
                "play": play,
                "stop": Leaf(
                    allows=Role.EDITOR,
                    handler=self.stop,
                    description="Stop playing the current sound",
                    example=lambda p: f"{p}stop",
                ),
                "role": Leaf(
                    allows=Role.STREAMER,
                    handler=self.role,
                    description=f"Update role for user {{0}} to {{1}}. Roles: {', '.join(role_names())}",
                    example=lambda p: f"{p}role justinfan91234 editor",
                ),
                "prefs": Leaf(
                    allows=Role.STREAMER,
                    handler=self.prefs,
                    description=(
                        "Update preference {0}. Keys: "
                        + ", ".join(f"{key} ({text})" for key, text in PREFERENCE_DESCRIPTIONS.items())
                        + ", values: toggle, on/true/yes, off/false/no"
                    ),
                    example=lambda p: f"{p}prefs autoplay on",
                ),
                "alias": Branch(
                    children={
                        "set": Leaf(
                            allows=Role.EDITOR,
                            handler=self.alias_set,
                            description="Add {0} as an alias for {1}",
                            example=lambda p: f"{p}alias set SSSsss ame_hates_minecraft",
                        ),
                        "rm": Leaf(
                            allows=Role.EDITOR,
                            handler=self.alias_rm,
                            description="Remove {0} as an alias",
                            example=lambda p: f"{p}alias rm SSSsss",
                        ),
                    }
                ),
                "prefix": Leaf(
                    allows=Role.STREAMER,
                    handler=self.prefix,
                    description="Set command prefix to {0}",
                    example=lambda p: f"{p}prefix `",
                ),
                "say": Leaf(
                    allows=Role.USER,
                    handler=self.say,
                    description="Say {0} through TTS",
                    example=lambda p: f"{p}say L_? L_? L_? L_? L_? L_? L_? L_? L_?",
                ),
                "cooldown": Branch(
                    children={
                        "set": Branch(children={"user": user_set, "sound": sound_set}),
                        "rm": Branch(children={"user": user_rm, "sound": sound_rm}),
                    }
                ),
            },
        )
