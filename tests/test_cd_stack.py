from pathlib import Path

from shrline.cd_stack import CdStackState


def test_down_then_up_round_trip():
    state = CdStackState()
    state.push("/a")
    state.push("/b")
    assert state.down() == Path("/a")
    assert state.up() == Path("/b")
    assert state.up() is None


def test_push_clears_forward_history():
    state = CdStackState("/a")
    state.push("/b")
    state.down()
    state.push("/c")
    assert state.up() is None
    assert state.down() == Path("/a")


def test_down_from_single_entry():
    state = CdStackState("/a")
    assert state.down() is None
    assert state.up() == Path("/a")


def test_down_on_empty_stack():
    state = CdStackState()
    assert state.down() is None
    assert state.up() is None


def test_repeated_down_walks_back():
    state = CdStackState("/a")
    state.push("/b")
    state.push("/c")
    assert state.down() == Path("/b")
    assert state.down() == Path("/a")
    assert state.up() == Path("/b")
    assert state.up() == Path("/c")