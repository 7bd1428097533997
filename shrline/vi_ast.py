"""Syntax tree for vi style normal mode commands."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class MotionKind(enum.Enum):
    NONE = "none"
    BACK_WORD = "back_word"
    WORD_PUNC = "word_punc"
    WORD = "word"
    LEFT = "left"
    RIGHT = "right"
    START = "start"
    UP = "up"
    DOWN = "down"
    END = "end"
    # Selects the entire line; for a move this behaves the same as END.
    ALL = "all"
    FIND = "find"


@dataclass(frozen=True)
class Motion:
    """A cursor motion; FIND motions carry the character searched for."""

    kind: MotionKind
    char: str | None = None

    def __post_init__(self) -> None:
        if self.kind is MotionKind.FIND:
            if self.char is None or len(self.char) != 1:
                raise ValueError("a find motion needs exactly one character")
        elif self.char is not None:
            raise ValueError(f"motion {self.kind.name} takes no character")

    @classmethod
    def find(cls, char: str) -> Motion:
        """Motion to the next occurrence of ``char``."""
        return cls(MotionKind.FIND, char)


class ActionKind(enum.Enum):
    UNDO = "undo"
    REDO = "redo"
    DELETE = "delete"
    YANK = "yank"
    MOVE = "move"
    INSERT = "insert"
    CHAIN = "chain"
    TOGGLE_CASE = "toggle_case"
    PASTE = "paste"
    LOWER_CASE = "lower_case"
    UPPER_CASE = "upper_case"


_MOTION_ACTIONS = frozenset(
    {
        ActionKind.DELETE,
        ActionKind.YANK,
        ActionKind.MOVE,
        ActionKind.PASTE,
        ActionKind.LOWER_CASE,
        ActionKind.UPPER_CASE,
    }
)


@dataclass(frozen=True)
class Action:
    """An editing action, optionally applied over a motion or chained."""

    kind: ActionKind
    motion: Motion | None = None
    first: Action | None = None
    second: Action | None = None

    def __post_init__(self) -> None:
        if self.kind in _MOTION_ACTIONS:
            if self.motion is None:
                raise ValueError(f"action {self.kind.name} needs a motion")
        elif self.motion is not None:
            raise ValueError(f"action {self.kind.name} takes no motion")
        if self.kind is ActionKind.CHAIN:
            if self.first is None or self.second is None:
                raise ValueError("a chain needs two actions")
        elif self.first is not None or self.second is not None:
            raise ValueError(f"action {self.kind.name} cannot hold chained actions")

    @classmethod
    def chain(cls, first: Action, second: Action) -> Action:
        """Action that runs ``first`` and then ``second``."""
        return cls(ActionKind.CHAIN, first=first, second=second)


@dataclass(frozen=True)
class Command:
    """An action together with how many times to repeat it."""

    action: Action
    repeat: int = 1

    def __post_init__(self) -> None:
        if self.repeat < 0:
            raise ValueError("repeat count cannot be negative")