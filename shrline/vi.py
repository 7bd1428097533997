"""Execution of vi motions and actions on a cursor buffer."""

from __future__ import annotations

from shrline.cursor_buffer import CursorBuffer, Location
from shrline.modes import LineMode
from shrline.vi_ast import Action, ActionKind, Motion, MotionKind

_PUNCTUATION = '!-~*|".?[]{}()'

_CURSOR_MOTIONS = frozenset(
    {
        MotionKind.LEFT,
        MotionKind.RIGHT,
        MotionKind.START,
        MotionKind.END,
        MotionKind.WORD,
        MotionKind.WORD_PUNC,
        MotionKind.BACK_WORD,
        MotionKind.FIND,
    }
)


class Clipboard:
    """Holds yanked text for later pasting."""

    def __init__(self, text: str = "") -> None:
        self._text = text

    def get_text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text


_default_clipboard = Clipboard()


def _is_punc(ch: str) -> bool:
    return ch in _PUNCTUATION


def motion_to_loc(cb: CursorBuffer, motion: Motion) -> Location:
    """Location that ``motion`` leads to from the cursor."""
    kind = motion.kind
    if kind is MotionKind.FIND:
        # Skip the character under the cursor when it is the one searched for.
        start = Location.after() if cb.char_at(Location.cursor()) == motion.char else Location.cursor()
        return Location.find_char(cb, start, motion.char) or Location.cursor()
    if kind is MotionKind.LEFT:
        return Location.before()
    if kind is MotionKind.RIGHT:
        return Location.after()
    if kind is MotionKind.START:
        return Location.front()
    if kind is MotionKind.END:
        return Location.back(cb)
    if kind is MotionKind.WORD:
        cur = cb.char_at(Location.cursor())
        if cur is None:
            return Location.cursor()
        if cur.isspace():
            start = Location.cursor()
        else:
            start = Location.find(cb, Location.cursor(), str.isspace) or Location.back(cb)
        return Location.find(cb, start, lambda ch: not ch.isspace()) or Location.back(cb)
    if kind is MotionKind.WORD_PUNC:
        cur = cb.char_at(Location.cursor())
        if cur is None:
            return Location.cursor()
        if cur.isspace():
            start = Location.cursor()
        elif _is_punc(cur):
            start = Location.find(cb, Location.cursor(), lambda ch: not _is_punc(ch)) or Location.back(cb)
        else:
            start = Location.find(
                cb, Location.cursor(), lambda ch: ch.isspace() or _is_punc(ch)
            ) or Location.back(cb)
        return Location.find(cb, start, lambda ch: not ch.isspace()) or Location.back(cb)
    if kind is MotionKind.BACK_WORD:
        cur = cb.char_at(Location.cursor())
        before = cb.char_at(Location.before())
        if cur is not None and cur.isspace():
            offset = Location.find_back(cb, Location.cursor(), lambda ch: not ch.isspace()) or Location.front()
        elif before is not None and before.isspace():
            offset = Location.find_back(cb, Location.before(), lambda ch: not ch.isspace()) or Location.front()
        else:
            offset = Location.cursor()
        back = Location.find_back(cb, offset, str.isspace)
        if back is None:
            return Location.front()
        return back + Location.after()
    return Location.cursor()


def execute_vi(cb: CursorBuffer, action: Action, clipboard: Clipboard | None = None) -> LineMode:
    """Apply ``action`` to the buffer and return the mode the editor should be in."""
    clipboard = clipboard if clipboard is not None else _default_clipboard
    kind = action.kind
    if kind is ActionKind.INSERT:
        return LineMode.INSERT
    if kind is ActionKind.MOVE:
        if action.motion.kind in _CURSOR_MOTIONS:
            cb.move_cursor(motion_to_loc(cb, action.motion))
    elif kind is ActionKind.DELETE:
        if action.motion.kind is MotionKind.ALL:
            cb.clear()
        elif action.motion.kind in _CURSOR_MOTIONS:
            cb.delete(Location.cursor(), motion_to_loc(cb, action.motion))
    elif kind is ActionKind.CHAIN:
        execute_vi(cb, action.first, clipboard)
        return execute_vi(cb, action.second, clipboard)
    elif kind is ActionKind.TOGGLE_CASE:
        loc = Location.cursor()
        ch = cb.char_at(loc)
        if ch is not None:
            cb.insert_inplace(loc, ch.lower() if ch.isupper() else ch.upper())
    elif kind is ActionKind.PASTE:
        loc = motion_to_loc(cb, action.motion)
        try:
            cb.to_absolute(loc)
        except Exception:
            loc = Location.cursor()
        cb.insert(loc, clipboard.get_text())
    elif kind is ActionKind.YANK:
        clipboard.set_text(cb.location_slice(Location.cursor(), motion_to_loc(cb, action.motion)))
    elif kind in (ActionKind.UPPER_CASE, ActionKind.LOWER_CASE):
        loc = motion_to_loc(cb, action.motion)
        selected = cb.location_slice(Location.cursor(), loc)
        selected = selected.upper() if kind is ActionKind.UPPER_CASE else selected.lower()
        target = Location.cursor() if cb.to_absolute(loc) > cb.cursor else loc
        cb.insert_inplace(target, selected)
    return LineMode.NORMAL