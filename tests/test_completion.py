import os

import pytest

from shrline.completion import (
    Completion,
    CompletionCtx,
    ReplaceMethod,
    drop_path_end,
    filepaths,
    find_executables_in_path,
    path_end,
)


def test_drop_path_end():
    assert drop_path_end("Downloads/ab") == "Downloads/"
    assert drop_path_end("Downloads/") == "Downloads/"
    assert drop_path_end("Downloads") == ""


def test_path_end():
    assert path_end("Downloads/ab") == "ab"
    assert path_end("Downloads/") == ""
    assert path_end("Downloads") == "Downloads"


def test_accept_adds_space():
    assert Completion("status").accept() == "status "
    assert Completion("dir/", add_space=False).accept() == "dir/"


def test_display_text_falls_back_to_completion():
    assert Completion("abc").display_text() == "abc"
    assert Completion("a/b", display="b").display_text() == "b"


def test_completion_defaults():
    c = Completion("x")
    assert c.replace_method is ReplaceMethod.REPLACE
    assert c.comment is None


def test_ctx_accessors():
    ctx = CompletionCtx(["git", "com"])
    assert ctx.cmd_name() == "git"
    assert ctx.cur_word() == "com"
    assert ctx.arg_num() == 1


def test_empty_ctx():
    ctx = CompletionCtx([])
    assert ctx.cmd_name() is None
    assert ctx.cur_word() is None
    assert ctx.arg_num() == 0


def test_filepaths_lists_entries(tmp_path):
    (tmp_path / "a").write_text("")
    (tmp_path / "b").mkdir()
    assert sorted(p.name for p in filepaths(tmp_path)) == ["a", "b"]


def test_filepaths_predicate(tmp_path):
    (tmp_path / "a").write_text("")
    (tmp_path / "b").mkdir()
    result = filepaths(tmp_path, lambda e: e.is_dir())
    assert [p.name for p in result] == ["b"]


def test_filepaths_missing_directory(tmp_path):
    with pytest.raises(OSError):
        filepaths(tmp_path / "missing")


def test_find_executables_in_path(tmp_path):
    runnable = tmp_path / "run"
    runnable.write_text("")
    os.chmod(runnable, 0o755)
    plain = tmp_path / "data"
    plain.write_text("")
    os.chmod(plain, 0o644)
    result = find_executables_in_path(f"{tmp_path}:{tmp_path / 'missing'}")
    assert result == ["run"]