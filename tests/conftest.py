from collections.abc import Callable
from pathlib import Path

import pytest

from tests.fakes import FakePlayer, RecordingTTS
from xdbot.components.soundboard import SoundboardCommands, SoundboardContext
from xdbot.core.dispatcher import Soundboard
from xdbot.shared.stores import ChannelStores, open_channel_stores

CHANNEL = "ame"
SOUNDS = ["ame_hates_minecraft", "boom", "bruh"]


@pytest.fixture
def stores() -> ChannelStores:
    return open_channel_stores(CHANNEL)


@pytest.fixture
def player() -> FakePlayer:
    return FakePlayer(sounds={name: Path(f"/sounds/{name}.mp3") for name in SOUNDS})


@pytest.fixture
def tts() -> RecordingTTS:
    return RecordingTTS()


@pytest.fixture
def commands(stores, player, tts) -> SoundboardCommands:
    return SoundboardCommands(SoundboardContext(stores=stores, player=player, tts=tts))


@pytest.fixture
def soundboard(stores, commands) -> Soundboard:
    return Soundboard(stores, commands.tree())


@pytest.fixture
def send(soundboard) -> Callable:
    def _send(user: str, text: str):
        return soundboard.on_message(user, text)

    return _send
