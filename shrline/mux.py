"""Switching between shell languages and reading an interpreter's output."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Protocol

_MARKER = "\x1a"


class MuxState:
    """The shell language in use and the languages that can be chosen.

    The first language given is the starting one.
    """

    def __init__(self, langs: Iterable[str]) -> None:
        ordered = list(langs)
        if not ordered:
            raise ValueError("require at least one language")
        self._lang = ordered[0]
        self._registered = dict.fromkeys(ordered)

    def set_lang(self, lang: str) -> None:
        """Switch language; raises ValueError for an unknown one."""
        if lang not in self._registered:
            raise ValueError("invalid lang")
        self._lang = lang

    def get_lang(self) -> str:
        return self._lang

    def registered_langs(self) -> Iterator[str]:
        return iter(self._registered)


@dataclass(frozen=True)
class ChangeLangCtx:
    """Passed to hooks when the language changes."""

    old_lang: str
    new_lang: str


class _LineReader(Protocol):
    def readline(self) -> str: ...


def _lines(reader: _LineReader) -> Iterator[str]:
    while True:
        line = reader.readline()
        if not line:
            raise EOFError("interpreter closed its output")
        yield line


def read_out(reader: _LineReader, write: Callable[[str], object]) -> int:
    """Copy lines to ``write`` until the marker line; return the exit status on it."""
    for line in _lines(reader):
        if _MARKER in line:
            return int("".join(c for c in line if c.isnumeric()))
        write(line)
    raise AssertionError("unreachable")


def read_err(reader: _LineReader, write: Callable[[str], object]) -> None:
    """Copy lines to ``write`` until the marker line."""
    for line in _lines(reader):
        if _MARKER in line:
            return
        write(line)