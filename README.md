# shrline

Building blocks for the input line of an interactive shell. shrline is a
library: it has no command of its own, and you put its parts together to keep
and edit the line a user types.

## What is inside

- `shrline.cursor_buffer`: `CursorBuffer`, a text buffer with a cursor that
  sits between characters. A `Location` is absolute (`Location.absolute`,
  `Location.front`, `Location.back`) or relative to the cursor
  (`Location.cursor`, `Location.before`, `Location.after`).
  - `Location.find` and `Location.find_back` search forward and back with a predicate.
  - `Location.find_char` and `Location.find_char_back` search for one character.
  - Out-of-range locations raise `InvalidAbsoluteLocation` or `InvalidRelativeLocation`.
  - Overwriting past the end raises `DeletingTooMuch`.
  - All three errors derive from `CursorBufferError`.
- `shrline.vi_ast`: vi commands as data: `Motion`/`MotionKind`,
  `Action`/`ActionKind` and `Command`, which is an action plus a repeat count.
- `shrline.vi`: `motion_to_loc` and `execute_vi` run motions and actions
  against a `CursorBuffer`. `execute_vi` returns the `LineMode` the editor
  should be in afterwards. Yank and paste use a `Clipboard`, which is an
  in-process text holder and not the system clipboard.
- `shrline.modes`: `LineMode` (insert or normal), `HistoryIndex` for the
  position while browsing history, `LineModeSwitchCtx`, and `CursorStyle`
  together with `CursorShape`.
- `shrline.buffer_history`: the `BufferHistory` interface and
  `DefaultBufferHistory`, a linear undo and redo history for a buffer.
- `shrline.completion`: `Completion`, `ReplaceMethod`, `CompletionCtx` and the
  abstract `Completer`. It also has these filesystem helpers:
  - `filepaths` lists the entries of a directory.
  - `find_executables_in_path` finds executables in the directories of a PATH-style string.
  - `drop_path_end` and `path_end` split a path at its last `/`.
- `shrline.menu`: the `Menu` interface and `DefaultMenu`.
  - `DefaultMenu` sorts its entries by display name, ignoring case.
  - Moving past either end of the menu wraps around.
  - `DefaultMenu.render(term_width)` lays the entries out in columns and returns the rows as
    `StyledBuf` values. Each comment is shortened with `truncate`.
- `shrline.highlight`: `Highlighter`, `DefaultHighlighter`, which colours the
  whole line green, and `SyntaxHighlighter`. A `SyntaxHighlighter` applies the
  rule functions of a `SyntaxTheme`. Each rule maps character indices to a
  `ContentStyle`.
- `shrline.styled_buf`: `StyledBuf` holds text with one `ContentStyle` per
  character. `styled(*parts)` composes one from strings, `StyledContent`
  values and `None`. `line_content_len` measures the terminal width of a line.
- `shrline.algo`: `longest_common_prefix`.
- State for shell plugins:
  - `shrline.cd_stack.CdStackState`: back and forward through visited directories.
  - `shrline.command_timer.CommandTimerState`: how long the previous command took.
  - `shrline.mux`: `MuxState` tracks the current shell language and `ChangeLangCtx` describes a
    change of language. `read_out` and `read_err` copy an interpreter's output lines until a
    line holding the `\x1a` marker. `read_out` returns the exit status written on that line.
  - `shrline.analytics.AnalyticsState`: counts command names and working directories, and
    `report` lists the most used of each.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from shrline.cursor_buffer import CursorBuffer, Location
from shrline.vi import execute_vi
from shrline.vi_ast import Action, ActionKind, Motion, MotionKind

cb = CursorBuffer("hello world goodbye world")
execute_vi(cb, Action(ActionKind.MOVE, Motion(MotionKind.WORD)))
print(cb.cursor)  # 6

cb.insert(Location.cursor(), "big ")
print(str(cb))    # hello big world goodbye world
```

A completer of your own, shown in a menu:

```python
from shrline.completion import Completer, Completion, CompletionCtx
from shrline.menu import DefaultMenu


class GitCompleter(Completer):
    def complete(self, ctx):
        word = ctx.cur_word() or ""
        return [Completion(c) for c in ("status", "stash", "add") if c.startswith(word)]


menu = DefaultMenu()
completions = GitCompleter().complete(CompletionCtx(["git", "st"]))
menu.set_items((c.display_text(), c) for c in completions)
menu.activate()
print(menu.accept().accept())  # "stash "
```

## What it does not do

shrline does not read the keyboard or draw on the terminal. It has no event
loop that turns key presses into edits, and no prompt painter. It has no
ready-made completer or set of completion rules. Its syntax highlighter has no
built-in rules for shell syntax. It has no detection of git, node or cargo
projects. The caller supplies input handling, output and any rules.