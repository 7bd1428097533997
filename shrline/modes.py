"""Line editing modes, history position and cursor appearance."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class LineMode(enum.Enum):
    """Operating mode of the line editor."""

    INSERT = "insert"
    NORMAL = "normal"


@dataclass(frozen=True)
class HistoryIndex:
    """Where the editor is while browsing history.

    ``line`` is None for a fresh prompt, otherwise the index of the history
    entry shown, 0 being the most recent.
    """

    line: int | None = None

    def __post_init__(self) -> None:
        if self.line is not None and self.line < 0:
            raise ValueError("history line cannot be negative")

    def up(self, limit: int) -> HistoryIndex:
        """Move to a less recent entry; from the prompt, enter history."""
        if self.line is None:
            return HistoryIndex() if limit == 0 else HistoryIndex(0)
        if limit <= 0:
            raise ValueError("cannot move within an empty history")
        return HistoryIndex(min(self.line + 1, limit - 1))

    def down(self) -> HistoryIndex:
        """Move to a more recent entry; past the newest, return to the prompt."""
        if self.line is None or self.line == 0:
            return HistoryIndex()
        return HistoryIndex(self.line - 1)


@dataclass(frozen=True)
class LineModeSwitchCtx:
    """Passed to hooks whenever the line mode changes."""

    line_mode: LineMode


class CursorShape(enum.Enum):
    DEFAULT_USER_SHAPE = "default_user_shape"
    BLINKING_BLOCK = "blinking_block"
    STEADY_BLOCK = "steady_block"
    BLINKING_UNDERSCORE = "blinking_underscore"
    STEADY_UNDERSCORE = "steady_underscore"
    BLINKING_BAR = "blinking_bar"
    STEADY_BAR = "steady_bar"


@dataclass
class CursorStyle:
    """Shape used to draw the terminal cursor."""

    style: CursorShape = CursorShape.DEFAULT_USER_SHAPE