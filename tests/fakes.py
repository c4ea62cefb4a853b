from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class FakePlayer:
    sounds: dict[str, Path] = field(default_factory=dict)
    playing: str | None = None
    plays: list[tuple[str, str]] = field(default_factory=list)
    stops: int = 0
    accept: bool = True

    def play(self, sound: str, requested_by: str) -> bool:
        self.plays.append((sound, requested_by))
        if not self.accept:
            return False
        self.playing = sound
        return True

    def stop(self) -> None:
        self.stops += 1
        self.playing = None


@dataclass
class RecordingTTS:
    said: list[str] = field(default_factory=list)

    def say(self, text: str) -> None:
        self.said.append(text)


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeBackend:
    """Audio backend whose 'processes' run until finished or terminated."""

    def __init__(self) -> None:
        self.started: list[Path] = []
        self.running: set[int] = set()
        self.fail = False

    def start(self, path: Path) -> int | None:
        if self.fail:
            return None
        self.started.append(path)
        handle = len(self.started)
        self.running.add(handle)
        return handle

    def is_running(self, handle: int | None) -> bool:
        return handle in self.running

    def terminate(self, handle: int | None) -> None:
        self.running.discard(handle)

    def finish_all(self) -> None:
        self.running.clear()
