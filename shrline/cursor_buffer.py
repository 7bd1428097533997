"""Text buffer with a cursor and relative or absolute locations into it."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass


class CursorBufferError(Exception):
    """Base class for cursor buffer errors."""


class InvalidRelativeLocation(CursorBufferError):
    """A relative offset points outside the buffer."""

    def __init__(self, offset: int) -> None:
        super().__init__(f"Invalid relative offset {offset}")
        self.offset = offset


class InvalidAbsoluteLocation(CursorBufferError):
    """An absolute index points outside the buffer."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Invalid absolute index {index}")
        self.index = index


class DeletingTooMuch(CursorBufferError):
    """An edit tried to remove text past the end of the buffer."""

    def __init__(self) -> None:
        super().__init__("Deleting past end of buffer")


@dataclass(frozen=True)
class Location:
    """A position in a buffer, either absolute or relative to the cursor."""

    offset: int
    is_relative: bool = False

    @classmethod
    def absolute(cls, index: int) -> Location:
        return cls(index, False)

    @classmethod
    def relative(cls, offset: int) -> Location:
        return cls(offset, True)

    @classmethod
    def cursor(cls) -> Location:
        """The location at the cursor."""
        return cls.relative(0)

    @classmethod
    def before(cls) -> Location:
        """The location just before the cursor."""
        return cls.relative(-1)

    @classmethod
    def after(cls) -> Location:
        """The location just after the cursor."""
        return cls.relative(1)

    @classmethod
    def front(cls) -> Location:
        """The beginning of the buffer."""
        return cls.absolute(0)

    @classmethod
    def back(cls, cb: CursorBuffer) -> Location:
        """The end of the buffer."""
        return cls.absolute(len(cb))

    @classmethod
    def find(
        cls, cb: CursorBuffer, start: Location, predicate: Callable[[str], bool]
    ) -> Location | None:
        """Location of the next character, from ``start`` on, matching ``predicate``."""
        for i, ch in enumerate(cb.chars(start)):
            if predicate(ch):
                return start + cls.relative(i)
        return None

    @classmethod
    def find_char(cls, cb: CursorBuffer, start: Location, char: str) -> Location | None:
        """Location of the next occurrence of ``char``."""
        return cls.find(cb, start, lambda ch: ch == char)

    @classmethod
    def find_back(
        cls, cb: CursorBuffer, start: Location, predicate: Callable[[str], bool]
    ) -> Location | None:
        """Location of the previous character before ``start`` matching ``predicate``."""
        index = cb.to_absolute(start)
        for i, ch in enumerate(reversed(str(cb)[:index])):
            if predicate(ch):
                return start + cls.relative(-(i + 1))
        return None

    @classmethod
    def find_char_back(cls, cb: CursorBuffer, start: Location, char: str) -> Location | None:
        """Location of the previous occurrence of ``char``."""
        return cls.find_back(cb, start, lambda ch: ch == char)

    def __add__(self, other: Location) -> Location:
        if not isinstance(other, Location):
            return NotImplemented
        if self.is_relative and other.is_relative:
            return Location.relative(self.offset + other.offset)
        return Location.absolute(self.offset + other.offset)


class CursorBuffer:
    """Editable text with a cursor that always sits between characters.

    The cursor ranges over ``0..=len(buffer)``; a value of 0 is before the first
    character and ``len(buffer)`` is after the last.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._cursor = 0

    @property
    def cursor(self) -> int:
        """Current absolute cursor index."""
        return self._cursor

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"CursorBuffer({self._text!r}, cursor={self._cursor})"

    def move_cursor(self, loc: Location) -> None:
        self._cursor = self.to_absolute(loc)

    def insert(self, loc: Location, text: str) -> None:
        """Insert text and place the cursor after it."""
        index = self.to_absolute(loc)
        self._text = self._text[:index] + text + self._text[index:]
        self._cursor = index + len(text)

    def insert_inplace(self, loc: Location, text: str) -> None:
        """Overwrite text starting at ``loc`` without moving the cursor."""
        index = self.to_absolute(loc)
        end = index + len(text)
        if end > len(self._text):
            raise DeletingTooMuch()
        self._text = self._text[:index] + text + self._text[end:]

    def delete(self, start: Location, end: Location) -> None:
        """Delete the text between two locations and move the cursor to its start."""
        lo, hi = self._location_range(start, end)
        self._text = self._text[:lo] + self._text[hi:]
        self._cursor = lo

    def delete_before(self, start: Location, end: Location) -> None:
        """Delete text ending at ``start`` and beginning at ``end``."""
        self.delete(end, start)

    def location_slice(self, start: Location, end: Location) -> str:
        """Text between two locations, in either order."""
        lo, hi = self._location_range(start, end)
        return self._text[lo:hi]

    def clear(self) -> None:
        """Remove all text and reset the cursor."""
        self._text = ""
        self._cursor = 0

    def slice(self, start: int | None = None, stop: int | None = None) -> str:
        """Text in the character range ``start..stop``."""
        lo = 0 if start is None else self.to_absolute(Location.absolute(start))
        hi = len(self._text) if stop is None else self.to_absolute(Location.absolute(stop))
        if lo > hi:
            raise ValueError(f"slice start {lo} is after end {hi}")
        return self._text[lo:hi]

    def chars(self, loc: Location) -> Iterator[str]:
        """Iterate over the characters from ``loc`` to the end."""
        return iter(self._text[self.to_absolute(loc):])

    def char_at(self, loc: Location) -> str | None:
        """Character at ``loc``, or None if there is none."""
        try:
            index = self.to_absolute(loc)
        except CursorBufferError:
            return None
        if index < len(self._text):
            return self._text[index]
        return None

    def to_absolute(self, loc: Location) -> int:
        """Convert a location to a bounds-checked absolute index."""
        if loc.is_relative:
            index = self._cursor + loc.offset
            if self._in_bounds(index):
                return index
            raise InvalidRelativeLocation(loc.offset)
        if self._in_bounds(loc.offset):
            return loc.offset
        raise InvalidAbsoluteLocation(loc.offset)

    def _in_bounds(self, index: int) -> bool:
        return 0 <= index <= len(self._text)

    def _location_range(self, start: Location, end: Location) -> tuple[int, int]:
        lo = self.to_absolute(start)
        hi = self.to_absolute(end)
        return (lo, hi) if lo <= hi else (hi, lo)