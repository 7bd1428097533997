"""Completion values, the completion context and filesystem helpers."""

from __future__ import annotations

import enum
import os
import stat
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path


class ReplaceMethod(enum.Enum):
    """How a completion is substituted into the line."""

    APPEND = "append"
    """Insert the value at the cursor."""
    REPLACE = "replace"
    """Replace the word being typed."""


@dataclass(frozen=True)
class Completion:
    """One candidate for tab completion."""

    completion: str
    add_space: bool = True
    display: str | None = None
    replace_method: ReplaceMethod = ReplaceMethod.REPLACE
    comment: str | None = None

    def display_text(self) -> str:
        """Friendly preview of the value that will be completed."""
        return self.display if self.display is not None else self.completion

    def accept(self) -> str:
        """Text inserted when the completion is accepted."""
        return self.completion + " " if self.add_space else self.completion


class CompletionCtx:
    """The words typed so far; the cursor sits after the last one."""

    def __init__(self, line: Sequence[str]) -> None:
        self.line = list(line)

    def cmd_name(self) -> str | None:
        """Name of the command, if any word was typed."""
        return self.line[0] if self.line else None

    def cur_word(self) -> str | None:
        """The word being typed."""
        return self.line[-1] if self.line else None

    def arg_num(self) -> int:
        """Index of the argument being typed; 0 is the command name."""
        return max(len(self.line) - 1, 0)

    def __repr__(self) -> str:
        return f"CompletionCtx({self.line!r})"


class Completer(ABC):
    """Produces completions for the current input."""

    @abstractmethod
    def complete(self, ctx: CompletionCtx) -> list[Completion]:
        """Possible completions for ``ctx``."""


def filepaths(
    directory: str | os.PathLike[str],
    predicate: Callable[[os.DirEntry[str]], bool] | None = None,
) -> list[Path]:
    """Paths of the entries in ``directory`` accepted by ``predicate``.

    Raises OSError when the directory cannot be read.
    """
    with os.scandir(directory) as entries:
        return [Path(entry.path) for entry in entries if predicate is None or predicate(entry)]


def find_executables_in_path(path_str: str) -> list[str]:
    """Names of executable entries in each directory of a PATH-style string."""
    executables = []
    for directory in path_str.split(":"):
        try:
            entries = list(os.scandir(directory))
        except OSError:
            continue
        for entry in entries:
            try:
                mode = entry.stat(follow_symlinks=False).st_mode
            except OSError:
                continue
            if stat.S_IMODE(mode) & 0o111:
                executables.append(entry.name)
    return executables


def drop_path_end(path: str) -> str:
    """Drop everything after the last ``/``."""
    return path[: path.rfind("/") + 1]


def path_end(path: str) -> str:
    """Everything after the last ``/``."""
    return path[path.rfind("/") + 1:]