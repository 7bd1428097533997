import pytest

from shrline.cursor_buffer import CursorBuffer, InvalidRelativeLocation
from shrline.modes import LineMode
from shrline.vi import Clipboard, execute_vi, motion_to_loc
from shrline.vi_ast import Action, ActionKind, Motion, MotionKind


def move(kind):
    return Action(ActionKind.MOVE, Motion(kind))


def test_move_next_word():
    cb = CursorBuffer("hello world goodbye world")
    assert cb.cursor == 0
    execute_vi(cb, move(MotionKind.WORD))
    assert cb.cursor == 6
    execute_vi(cb, move(MotionKind.WORD))
    assert cb.cursor == 12


def test_move_back_word():
    cb = CursorBuffer("hello world goodbye world")
    execute_vi(cb, move(MotionKind.END))
    execute_vi(cb, move(MotionKind.LEFT))
    assert cb.cursor == 24
    execute_vi(cb, move(MotionKind.BACK_WORD))
    assert cb.cursor == 20
    execute_vi(cb, move(MotionKind.BACK_WORD))
    assert cb.cursor == 12


def test_back_word_at_first_word_goes_to_front():
    cb = CursorBuffer("hello")
    cb.move_cursor(cb.to_absolute and __import_loc_back(cb))
    execute_vi(cb, move(MotionKind.BACK_WORD))
    assert cb.cursor == 0


def __import_loc_back(cb):
    from shrline.cursor_buffer import Location

    return Location.back(cb)


def test_word_at_end_stays():
    cb = CursorBuffer("abc")
    execute_vi(cb, move(MotionKind.END))
    execute_vi(cb, move(MotionKind.WORD))
    assert cb.cursor == len(cb)


def test_word_punc_stops_at_punctuation():
    cb = CursorBuffer("foo.bar baz")
    execute_vi(cb, move(MotionKind.WORD_PUNC))
    assert cb.cursor == 3
    execute_vi(cb, move(MotionKind.WORD_PUNC))
    assert cb.cursor == 4


def test_find_char_skips_current():
    cb = CursorBuffer("hello")
    execute_vi(cb, Action(ActionKind.MOVE, Motion.find("l")))
    assert cb.cursor == 2
    execute_vi(cb, Action(ActionKind.MOVE, Motion.find("l")))
    assert cb.cursor == 3


def test_find_missing_char_stays():
    cb = CursorBuffer("hello")
    assert motion_to_loc(cb, Motion.find("x")) == motion_to_loc(cb, Motion(MotionKind.NONE))
    execute_vi(cb, Action(ActionKind.MOVE, Motion.find("x")))
    assert cb.cursor == 0


def test_left_at_start_raises():
    cb = CursorBuffer("abc")
    with pytest.raises(InvalidRelativeLocation):
        execute_vi(cb, move(MotionKind.LEFT))


def test_delete_word():
    cb = CursorBuffer("hello world")
    mode = execute_vi(cb, Action(ActionKind.DELETE, Motion(MotionKind.WORD)))
    assert str(cb) == "world"
    assert cb.cursor == 0
    assert mode is LineMode.NORMAL


def test_delete_all():
    cb = CursorBuffer("hello world")
    execute_vi(cb, Action(ActionKind.DELETE, Motion(MotionKind.ALL)))
    assert str(cb) == ""
    assert cb.cursor == 0


def test_toggle_case():
    cb = CursorBuffer("hello")
    execute_vi(cb, Action(ActionKind.TOGGLE_CASE))
    assert str(cb) == "Hello"
    execute_vi(cb, Action(ActionKind.TOGGLE_CASE))
    assert str(cb) == "hello"
    assert cb.cursor == 0


def test_upper_case_word():
    cb = CursorBuffer("hello world")
    execute_vi(cb, Action(ActionKind.UPPER_CASE, Motion(MotionKind.WORD)))
    assert str(cb) == "HELLO world"
    assert cb.cursor == 0


def test_lower_case_backwards():
    cb = CursorBuffer("HELLO")
    execute_vi(cb, move(MotionKind.END))
    execute_vi(cb, Action(ActionKind.LOWER_CASE, Motion(MotionKind.START)))
    assert str(cb) == "hello"
    assert cb.cursor == 5


def test_yank_and_paste():
    clipboard = Clipboard()
    cb = CursorBuffer("abc")
    execute_vi(cb, Action(ActionKind.YANK, Motion(MotionKind.END)), clipboard)
    assert clipboard.get_text() == "abc"
    execute_vi(cb, Action(ActionKind.PASTE, Motion(MotionKind.END)), clipboard)
    assert str(cb) == "abcabc"
    assert cb.cursor == 6


def test_insert_and_chain_return_insert_mode():
    cb = CursorBuffer("abc")
    assert execute_vi(cb, Action(ActionKind.INSERT)) is LineMode.INSERT
    mode = execute_vi(cb, Action.chain(move(MotionKind.END), Action(ActionKind.INSERT)))
    assert mode is LineMode.INSERT
    assert cb.cursor == len(cb)


def test_undo_leaves_buffer_alone():
    cb = CursorBuffer("abc")
    assert execute_vi(cb, Action(ActionKind.UNDO)) is LineMode.NORMAL
    assert str(cb) == "abc"