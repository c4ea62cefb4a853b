from pathlib import Path

import pytest

from tests.fakes import FakeBackend, FakeClock
from xdbot.core.player import Player, load_sound_library
from xdbot.shared.models.cooldown import Cooldown
from xdbot.shared.store import MemoryStore

SOUNDS = {"boom": Path("/sounds/boom.mp3"), "bruh": Path("/sounds/bruh.ogg")}


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def cooldowns() -> MemoryStore:
    return MemoryStore("cooldowns", dict)


@pytest.fixture
def player(cooldowns, backend, clock) -> Player:
    return Player(SOUNDS, cooldowns, backend, timer=clock)


def test_play_sets_playing_until_finished(player, backend) -> None:
    assert player.playing is None
    assert player.play("boom", "viewer")
    assert player.playing == "boom"
    assert backend.started == [SOUNDS["boom"]]

    backend.finish_all()
    assert player.playing is None


def test_second_play_while_busy_is_dropped(player, backend) -> None:
    assert player.play("boom", "viewer")
    assert not player.play("bruh", "other")
    assert backend.started == [SOUNDS["boom"]]


def test_stop(player, backend) -> None:
    player.stop()
    assert player.play("boom", "viewer")
    player.stop()
    assert player.playing is None
    assert backend.running == set()


def test_unknown_sound_and_failed_start(player, backend) -> None:
    assert not player.play("nope", "viewer")
    backend.fail = True
    assert not player.play("boom", "viewer")
    assert player.playing is None


def test_per_sound_cooldown(player, backend, cooldowns, clock) -> None:
    cooldowns.update(lambda _: {"boom": Cooldown(per_sound=10_000)})

    assert player.play("boom", "viewer")
    backend.finish_all()
    assert not player.play("boom", "someone_else")
    assert player.play("bruh", "viewer")
    backend.finish_all()

    clock.advance(10)
    assert player.play("boom", "someone_else")


def test_per_user_cooldown(player, backend, cooldowns, clock) -> None:
    cooldowns.update(lambda _: {"boom": Cooldown(per_user=60_000)})

    assert player.play("boom", "viewer")
    backend.finish_all()
    assert player.is_on_cooldown("boom", "viewer")
    assert not player.play("boom", "viewer")
    assert player.play("boom", "other")
    backend.finish_all()

    clock.advance(61)
    assert player.play("boom", "viewer")


def test_no_cooldown_record_allows_replay(player, backend) -> None:
    assert player.play("boom", "viewer")
    backend.finish_all()
    assert player.play("boom", "viewer")


def test_load_sound_library(tmp_path) -> None:
    for name in ["Boom.mp3", "bruh.ogg", "notes.txt", "clip.WAV"]:
        (tmp_path / name).write_bytes(b"")
    (tmp_path / "nested").mkdir()

    assert load_sound_library(tmp_path) == {
        "boom": tmp_path / "Boom.mp3",
        "bruh": tmp_path / "bruh.ogg",
        "clip": tmp_path / "clip.WAV",
    }
    assert load_sound_library(tmp_path / "missing") == {}


def test_removed_cooldown_stops_blocking(player, backend, cooldowns) -> None:
    cooldowns.update(lambda _: {"boom": Cooldown(per_sound=60_000)})
    assert player.play("boom", "viewer")
    backend.finish_all()
    assert not player.play("boom", "viewer")

    cooldowns.update(lambda _: {})
    assert player.play("boom", "viewer")


def test_oversized_stored_cooldown_is_capped(player, backend, cooldowns, clock) -> None:
    cooldowns.update(lambda _: {"boom": Cooldown(per_sound=10**400, per_user=10**400)})

    assert player.play("boom", "viewer")
    assert player.playing == "boom"
    backend.finish_all()
    assert not player.play("boom", "viewer")

    clock.advance(365 * 86_400 + 1)
    assert player.play("boom", "viewer")
