"""Undo and redo history for the line buffer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import NamedTuple

from shrline.cursor_buffer import CursorBuffer, Location


class BufferHistory(ABC):
    """Records buffer states so edits can be undone and redone."""

    @abstractmethod
    def next(self, cb: CursorBuffer) -> None:
        """Redo."""

    @abstractmethod
    def prev(self, cb: CursorBuffer) -> None:
        """Undo."""

    @abstractmethod
    def add(self, cb: CursorBuffer) -> None:
        """Record the current state of the buffer."""

    @abstractmethod
    def clear(self) -> None:
        """Forget all recorded changes."""


class _HistItem(NamedTuple):
    text: str
    cursor: int


class DefaultBufferHistory(BufferHistory):
    """Linear undo history starting from an empty buffer."""

    def __init__(self) -> None:
        self._hist: list[_HistItem] = [_HistItem("", 0)]
        self._index = 0

    def _restore(self, cb: CursorBuffer) -> None:
        item = self._hist[self._index]
        cb.clear()
        cb.insert(Location.cursor(), item.text)
        cb.move_cursor(Location.absolute(item.cursor))

    def next(self, cb: CursorBuffer) -> None:
        if self._index < len(self._hist) - 1:
            self._index += 1
            self._restore(cb)

    def prev(self, cb: CursorBuffer) -> None:
        if self._index > 0:
            self._index -= 1
            self._restore(cb)

    def add(self, cb: CursorBuffer) -> None:
        # A change made after undoing discards everything that could be redone.
        del self._hist[self._index + 1:]
        text = str(cb)
        if self._hist and self._hist[-1].text == text:
            return
        self._hist.append(_HistItem(text, cb.cursor))
        self._index += 1

    def clear(self) -> None:
        del self._hist[1:]
        self._index = 0