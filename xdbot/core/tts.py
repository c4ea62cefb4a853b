"""Text-to-speech through a system command (espeak by default)."""

from __future__ import annotations

import logging
import shlex
import subprocess
from typing import Protocol

LOGGER: logging.Logger = logging.getLogger("TTS")

DEFAULT_TTS_COMMAND = "espeak"


class TTS(Protocol):
    def say(self, text: str) -> None: ...


class CommandTTS:
    """Speaks text by spawning the configured command with the text appended.

    Fire-and-forget: the process is not waited on, and a failure to start
    it is logged rather than raised.
    """

    def __init__(self, command: str = DEFAULT_TTS_COMMAND) -> None:
        self.argv = shlex.split(command)

    def say(self, text: str) -> None:
        if not text.strip():
            return
        try:
            subprocess.Popen(
                [*self.argv, text],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            LOGGER.warning(f"System TTS error ({self.argv[0]!r}): {e}")
