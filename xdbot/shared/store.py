"""Key/value stores holding one snapshot each.

A store hands out snapshots with ``get()`` and replaces them atomically
with ``update(fn)``. Callers must treat snapshots as read-only and build
new values inside ``fn``.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Store(Protocol[T]):
    def get(self) -> T: ...

    def update(self, fn: Callable[[T], T]) -> None: ...


class MemoryStore(Generic[T]):
    """In-process store, lost on restart."""

    def __init__(self, key: str, initial: Callable[[], T]) -> None:
        self.key = key
        self._value = initial()

    def get(self) -> T:
        return self._value

    def update(self, fn: Callable[[T], T]) -> None:
        self._value = fn(self._value)


def _identity(value: Any) -> Any:
    return value


def atomic_write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(f"{path.suffix}.tmp")
    with open(tmp_path, "w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)
        handle.write("\n")
    os.replace(tmp_path, path)


class JsonFileStore(Generic[T]):
    """Store persisted as ``<directory>/<key>.json``.

    The file is read once on construction and rewritten on every update.
    A missing or unreadable file falls back to the initial value.
    """

    def __init__(
        self,
        directory: Path,
        key: str,
        initial: Callable[[], T],
        *,
        encode: Callable[[T], Any] = _identity,
        decode: Callable[[Any], T] = _identity,
    ) -> None:
        self.key = key
        self.path = directory / f"{key}.json"
        self._encode = encode
        self._value = self._load(initial, decode)

    def _load(self, initial: Callable[[], T], decode: Callable[[Any], T]) -> T:
        if not self.path.exists():
            return initial()
        try:
            with open(self.path, encoding="utf-8") as handle:
                return decode(json.load(handle))
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Failed to read store {self.path}: {type(e).__name__}: {e}")
            return initial()

    def get(self) -> T:
        return self._value

    def update(self, fn: Callable[[T], T]) -> None:
        value = fn(self._value)
        atomic_write_json(self.path, self._encode(value))
        self._value = value
