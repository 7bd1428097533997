"""Undo and redo for the working directory history."""

from __future__ import annotations

import os
from pathlib import Path


class CdStackState:
    """Back and forward stacks of visited directories."""

    def __init__(self, start: str | os.PathLike[str] | None = None) -> None:
        self._down_stack: list[Path] = []
        self._up_stack: list[Path] = []
        if start is not None:
            self.push(start)

    def push(self, path: str | os.PathLike[str]) -> None:
        """Record a new directory; forward history is forgotten."""
        self._down_stack.append(Path(path))
        self._up_stack.clear()

    def down(self) -> Path | None:
        """Go back in the history, returning the directory now current."""
        if self._down_stack:
            self._up_stack.append(self._down_stack.pop())
        return self._down_stack[-1] if self._down_stack else None

    def up(self) -> Path | None:
        """Go forward in the history, returning the directory reached."""
        if not self._up_stack:
            return None
        top = self._up_stack.pop()
        self._down_stack.append(top)
        return top