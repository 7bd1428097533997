"""Text with a style attached to each character."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from wcwidth import wcwidth


class Color(enum.Enum):
    RESET = "reset"
    BLACK = "black"
    DARK_GREY = "dark_grey"
    RED = "red"
    DARK_RED = "dark_red"
    GREEN = "green"
    DARK_GREEN = "dark_green"
    YELLOW = "yellow"
    DARK_YELLOW = "dark_yellow"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"
    MAGENTA = "magenta"
    DARK_MAGENTA = "dark_magenta"
    CYAN = "cyan"
    DARK_CYAN = "dark_cyan"
    WHITE = "white"
    GREY = "grey"


@dataclass(frozen=True)
class ContentStyle:
    """Colours and attributes used to draw text."""

    foreground: Color | None = None
    background: Color | None = None
    bold: bool = False
    dim: bool = False
    italic: bool = False
    underlined: bool = False
    reverse: bool = False


@dataclass(frozen=True)
class StyledContent:
    """A piece of text drawn with one style."""

    content: str
    style: ContentStyle = ContentStyle()

    def __str__(self) -> str:
        return self.content


def _display_width(text: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in text)


class StyledBuf:
    """Text to be rendered, with one style per character."""

    def __init__(self, content: str = "", style: ContentStyle | None = None) -> None:
        self.content = ""
        self._styles: list[ContentStyle] = []
        self.push(content, style or ContentStyle())

    @classmethod
    def from_spans(cls, spans: Iterable[StyledContent]) -> StyledBuf:
        buf = cls()
        for span in spans:
            buf.push(span.content, span.style)
        return buf

    def push(self, content: str, style: ContentStyle) -> None:
        """Append text drawn in ``style``."""
        self.content += content
        self._styles.extend(style for _ in content)

    def lines(self) -> list[list[StyledContent]]:
        """Per-character spans, split into lines at newlines."""
        result = []
        index = 0
        for line in self.content.split("\n"):
            spans = []
            for ch in line:
                spans.append(StyledContent(ch, self._styles[index]))
                index += 1
            index += 1
            result.append(spans)
        return result

    def spans(self) -> list[StyledContent]:
        """One span per character."""
        return [StyledContent(ch, style) for ch, style in zip(self.content, self._styles)]

    def count_newlines(self) -> int:
        return self.content.count("\n")

    def content_len(self) -> int:
        """Number of terminal columns the content takes up."""
        return _display_width(self.content)

    def change_style(self, styles: Mapping[int, ContentStyle], offset: int) -> None:
        """Restyle characters; keys are indices shifted by ``offset``."""
        for index, style in styles.items():
            if offset <= index:
                self._styles[index - offset] = style

    def __str__(self) -> str:
        return self.content

    def __repr__(self) -> str:
        return f"StyledBuf({self.content!r})"


def line_content_len(line: Iterable[StyledContent]) -> int:
    """Number of terminal columns a line of spans takes up."""
    return _display_width("".join(span.content for span in line))


def _render(part: object) -> StyledContent:
    if isinstance(part, StyledContent):
        return part
    if part is None or isinstance(part, BaseException):
        return StyledContent("")
    return StyledContent(str(part))


def styled(*args: object) -> StyledBuf:
    """Compose a StyledBuf from parts.

    StyledContent keeps its style; None and exceptions render as empty text;
    anything else is rendered with ``str`` in the default style.
    """
    return StyledBuf.from_spans(_render(part) for part in args)