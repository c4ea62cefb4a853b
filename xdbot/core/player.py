"""Sound playback: busy flag, cooldown enforcement, and the audio backend.

Only one sound plays at a time. A play request while something is playing
is dropped, and so is a stop request while nothing is playing.

Cooldowns are enforced here, not in the command layer. Two windows are
tracked per sound: one for the sound as a whole and one per requesting
user. Window lengths are read from the cooldown store on every play, so
changes made through chat apply immediately.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
import time
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Protocol

from cachetools import TLRUCache  # type: ignore[import-untyped]

from ..shared.models.cooldown import Cooldown
from ..shared.store import Store
from .duration import MAX_DURATION

LOGGER: logging.Logger = logging.getLogger("Player")

SOUND_EXTENSIONS = frozenset({".mp3", ".ogg", ".wav", ".flac", ".m4a"})
DEFAULT_PLAYER_COMMAND = "ffplay -nodisp -autoexit -loglevel quiet"


def load_sound_library(directory: Path) -> dict[str, Path]:
    """Map lowercase file stems to sound files found directly in directory."""
    if not directory.is_dir():
        LOGGER.warning(f"Sounds directory not found: {directory}")
        return {}

    sounds = {
        file.stem.lower(): file
        for file in sorted(directory.iterdir())
        if file.is_file() and file.suffix.lower() in SOUND_EXTENSIONS
    }
    LOGGER.info(f"Loaded {len(sounds)} sounds from {directory}")
    return sounds


class AudioBackend(Protocol):
    def start(self, path: Path) -> Any: ...

    def is_running(self, handle: Any) -> bool: ...

    def terminate(self, handle: Any) -> None: ...


class SubprocessAudioBackend:
    """Plays files by spawning an external player, one process per sound."""

    def __init__(self, command: str = DEFAULT_PLAYER_COMMAND) -> None:
        self.argv = shlex.split(command)

    def start(self, path: Path) -> subprocess.Popen | None:
        try:
            return subprocess.Popen(
                [*self.argv, str(path)],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            LOGGER.warning(f"Failed to start audio player {self.argv[0]!r}: {e}")
            return None

    def is_running(self, handle: subprocess.Popen | None) -> bool:
        return handle is not None and handle.poll() is None

    def terminate(self, handle: subprocess.Popen | None) -> None:
        if handle is not None and handle.poll() is None:
            handle.terminate()


class SoundPlayer(Protocol):
    sounds: Mapping[str, Path]

    @property
    def playing(self) -> str | None: ...

    def play(self, sound: str, requested_by: str) -> bool: ...

    def stop(self) -> None: ...


def _window_expiry(_key: Any, expires_at: float, _now: float) -> float:
    return expires_at


class Player:
    def __init__(
        self,
        sounds: Mapping[str, Path],
        cooldowns: Store[dict[str, Cooldown]],
        backend: AudioBackend,
        *,
        timer: Callable[[], float] = time.monotonic,
        max_windows: int = 4096,
    ) -> None:
        self.sounds = sounds
        self._cooldowns = cooldowns
        self._backend = backend
        self._timer = timer
        # key: ("sound", name) or ("user", name, requested_by) -> expiry time
        self._windows: TLRUCache = TLRUCache(maxsize=max_windows, ttu=_window_expiry, timer=timer)
        self._current: str | None = None
        self._handle: Any = None

    @property
    def playing(self) -> str | None:
        """Name of the sound currently playing, if any."""
        if self._current is not None and not self._backend.is_running(self._handle):
            self._current = None
            self._handle = None
        return self._current

    def is_on_cooldown(self, sound: str, requested_by: str) -> bool:
        # a window removed through chat stops blocking right away
        cooldown = self._cooldowns.get().get(sound)
        if cooldown is None:
            return False
        if cooldown.per_sound and ("sound", sound) in self._windows:
            return True
        return bool(cooldown.per_user) and ("user", sound, requested_by) in self._windows

    def _record_cooldown(self, sound: str, requested_by: str) -> None:
        cooldown = self._cooldowns.get().get(sound)
        if cooldown is None:
            return
        now = self._timer()
        windows = (
            (("sound", sound), cooldown.per_sound),
            (("user", sound, requested_by), cooldown.per_user),
        )
        for key, millis in windows:
            if millis > 0:
                self._windows[key] = now + min(millis, MAX_DURATION) / 1000
            else:
                self._windows.pop(key, None)

    def play(self, sound: str, requested_by: str) -> bool:
        """Start playing a sound. Returns False if the request was dropped."""
        if self.playing is not None:
            return False
        path = self.sounds.get(sound)
        if path is None:
            return False
        if self.is_on_cooldown(sound, requested_by):
            LOGGER.debug(f"{sound} is on cooldown for {requested_by}")
            return False

        handle = self._backend.start(path)
        if handle is None:
            return False

        self._record_cooldown(sound, requested_by)
        self._current = sound
        self._handle = handle
        return True

    def stop(self) -> None:
        if self.playing is None:
            return
        self._backend.terminate(self._handle)
        self._current = None
        self._handle = None
