"""Syntax highlighting of the input line."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field

from shrline.styled_buf import Color, ContentStyle, StyledBuf

RuleFn = Callable[[str], Mapping[int, ContentStyle]]
"""Maps a whole buffer to styles keyed by character index."""


class Highlighter(ABC):
    """Turns the input line into styled text."""

    @abstractmethod
    def highlight(self, buf: str, begin: int) -> StyledBuf:
        """Style ``buf`` from character ``begin`` on."""


@dataclass
class DefaultHighlighter(Highlighter):
    """Colours the whole line green."""

    style: ContentStyle = field(default_factory=ContentStyle)

    def highlight(self, buf: str, begin: int) -> StyledBuf:
        return StyledBuf(buf[begin:], ContentStyle(foreground=Color.GREEN))


@dataclass
class SyntaxTheme:
    """Base style plus rules that restyle parts of the line."""

    auto: ContentStyle = field(default_factory=ContentStyle)
    style_rules: list[RuleFn] = field(default_factory=list)

    def push_rule(self, rule: RuleFn) -> None:
        self.style_rules.append(rule)


class SyntaxHighlighter(Highlighter):
    """Highlights according to the rules of a theme."""

    def __init__(self, theme: SyntaxTheme | None = None, rules: Iterable[RuleFn] = ()) -> None:
        self.theme = theme if theme is not None else SyntaxTheme()
        for rule in rules:
            self.theme.push_rule(rule)

    def highlight(self, buf: str, begin: int) -> StyledBuf:
        styled_buf = StyledBuf(buf[begin:], self.theme.auto)
        for rule in self.theme.style_rules:
            styled_buf.change_style(rule(buf), begin)
        return styled_buf