import io

import pytest

from shrline.mux import ChangeLangCtx, MuxState, read_err, read_out


def test_first_language_is_current():
    state = MuxState(["shrs", "bash", "nu", "py"])
    assert state.get_lang() == "shrs"
    assert set(state.registered_langs()) == {"shrs", "bash", "nu", "py"}


def test_requires_a_language():
    with pytest.raises(ValueError, match="require at least one language"):
        MuxState([])


def test_set_lang():
    state = MuxState(["shrs", "bash"])
    state.set_lang("bash")
    assert state.get_lang() == "bash"


def test_set_invalid_lang_keeps_current():
    state = MuxState(["shrs", "bash"])
    with pytest.raises(ValueError, match="invalid lang"):
        state.set_lang("nu")
    assert state.get_lang() == "shrs"


def test_change_lang_ctx():
    ctx = ChangeLangCtx(old_lang="shrs", new_lang="bash")
    assert (ctx.old_lang, ctx.new_lang) == ("shrs", "bash")


def test_read_out_returns_status_and_copies_lines():
    written = []
    reader = io.StringIO("hello\nworld\n3\x1a\nafter\n")
    status = read_out(reader, written.append)
    assert status == 3
    assert written == ["hello\n", "world\n"]
    assert reader.read() == "after\n"


def test_read_out_at_eof_raises():
    with pytest.raises(EOFError):
        read_out(io.StringIO("partial\n"), lambda line: None)


def test_read_err_stops_at_marker():
    written = []
    reader = io.StringIO("oops\n\x1a\nrest\n")
    assert read_err(reader, written.append) is None
    assert written == ["oops\n"]
    assert reader.read() == "rest\n"


def test_read_err_at_eof_raises():
    with pytest.raises(EOFError):
        read_err(io.StringIO(""), lambda line: None)