"""Selection menu used to pick a completion."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable

from shrline.completion import Completion
from shrline.styled_buf import Color, ContentStyle, StyledBuf

MenuEntry = tuple[str, Completion]

_PLAIN = ContentStyle()
_SELECTED = ContentStyle(foreground=Color.BLACK, background=Color.WHITE)
_COMMENT = ContentStyle(foreground=Color.YELLOW)


class Menu(ABC):
    """A menu of completions that the user moves through."""

    @abstractmethod
    def next(self) -> None:
        """Go to the next selection."""

    @abstractmethod
    def previous(self) -> None:
        """Go to the previous selection."""

    @abstractmethod
    def accept(self) -> Completion | None:
        """Accept the current selection."""

    @abstractmethod
    def current_selection(self) -> Completion | None:
        """The currently selected completion."""

    @abstractmethod
    def cursor(self) -> int:
        """Index of the selected entry."""

    @abstractmethod
    def is_active(self) -> bool:
        """Whether the menu is shown."""

    @abstractmethod
    def activate(self) -> None:
        """Show the menu."""

    @abstractmethod
    def deactivate(self) -> None:
        """Hide the menu."""

    @abstractmethod
    def items(self) -> list[MenuEntry]:
        """The entries in the menu."""

    @abstractmethod
    def set_items(self, items: Iterable[MenuEntry]) -> None:
        """Replace the entries in the menu."""

    @abstractmethod
    def render(self, term_width: int) -> list[StyledBuf]:
        """Rows to draw below the prompt."""

    @abstractmethod
    def required_lines(self, term_width: int) -> int:
        """Number of terminal lines needed to show the prompt and menu."""


def _by_display_name(entry: MenuEntry) -> str:
    return entry[0].lower()


class DefaultMenu(Menu):
    """Menu laid out in columns, sorted alphabetically by display name."""

    def __init__(self, limit: int = 20) -> None:
        self._selections: list[MenuEntry] = []
        self._cursor = 0
        self._active = False
        self.column_padding = 2
        self.comment_max_length = 30
        self.limit = limit
        self.sort_key: Callable[[MenuEntry], object] = _by_display_name

    def next(self) -> None:
        if self._cursor == max(len(self._selections) - 1, 0):
            self._cursor = 0
        else:
            self._cursor += 1

    def previous(self) -> None:
        if self._cursor == 0:
            self._cursor = max(len(self._selections) - 1, 0)
        else:
            self._cursor -= 1

    def accept(self) -> Completion | None:
        self.deactivate()
        return self.current_selection()

    def current_selection(self) -> Completion | None:
        if 0 <= self._cursor < len(self._selections):
            return self._selections[self._cursor][1]
        return None

    def cursor(self) -> int:
        return self._cursor

    def is_active(self) -> bool:
        return self._active

    def activate(self) -> None:
        # An empty menu is never shown.
        self._active = bool(self._selections)

    def deactivate(self) -> None:
        self._active = False

    def items(self) -> list[MenuEntry]:
        return list(self._selections)

    def set_items(self, items: Iterable[MenuEntry]) -> None:
        self._selections = sorted(items, key=self.sort_key)
        self._cursor = 0

    def _max_width(self) -> int:
        widest = 0
        for preview, completion in self._selections:
            comment_len = 0
            if completion.comment is not None:
                # four extra columns for the parentheses and spacing
                comment_len = min(len(completion.comment), self.comment_max_length) + 4
            widest = max(widest, len(preview) + comment_len)
        return widest

    def _rows_needed(self, term_width: int) -> int:
        max_width = self._max_width()
        columns = term_width // max_width if max_width else 1
        columns = max(columns, 1)
        return -(-len(self._selections) // columns)

    def render(self, term_width: int) -> list[StyledBuf]:
        if not self._selections:
            return []
        max_width = self._max_width()
        rows_needed = self._rows_needed(term_width)
        grid: list[list[tuple[int | None, str, ContentStyle]]] = [[] for _ in range(rows_needed)]

        for i, (preview, completion) in enumerate(self._selections):
            column, row = divmod(i, rows_needed)
            start = column * (max_width + self.column_padding)
            segments = grid[row]
            segments.append((start, preview, _SELECTED if i == self._cursor else _PLAIN))
            if completion.comment is not None:
                comment_len = min(len(completion.comment), self.comment_max_length)
                segments.append((start + max_width - comment_len - 2, "(", _PLAIN))
                segments.append((None, truncate(completion.comment, comment_len), _COMMENT))
                segments.append((None, ")", _PLAIN))

        rows = []
        for segments in grid:
            buf = StyledBuf()
            pos = 0
            for column, text, style in segments:
                if column is not None and column > pos:
                    buf.push(" " * (column - pos), _PLAIN)
                    pos = column
                buf.push(text, style)
                pos += len(text)
            rows.append(buf)
        return rows

    def required_lines(self, term_width: int) -> int:
        return self._rows_needed(term_width) + 1


def truncate(text: str, max_chars: int) -> str:
    """Cut ``text`` to ``max_chars`` characters, ending it with an ellipsis."""
    if len(text) <= max_chars:
        return text
    return text[: max(max_chars - 3, 0)] + "..."