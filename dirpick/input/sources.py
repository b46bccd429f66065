"""Substitutable "next key" sources for the runtime loop."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from .reader import read_key


class TerminalKeySource:
    """Blocking key source reading raw bytes from a terminal descriptor."""

    def __init__(self, fd: int) -> None:
        self.fd = fd

    def next_key(self) -> str:
        """Block until one key token arrives; raise ``EOFError`` if input closes."""
        key = read_key(self.fd)
        if key == "":
            raise EOFError("terminal input closed")
        return key


class QueuedKeySource:
    """Key source replaying a fixed sequence of synthetic key tokens."""

    def __init__(self, keys: Iterable[str]) -> None:
        self._keys = deque(keys)

    def next_key(self) -> str:
        if not self._keys:
            raise EOFError("no queued keys left")
        return self._keys.popleft()

    def remaining(self) -> int:
        return len(self._keys)
