"""Small string algorithms."""

from __future__ import annotations

from collections.abc import Iterable


def longest_common_prefix(strings: Iterable[str]) -> str:
    """Longest prefix shared by every string; empty for no input."""
    ordered = sorted(strings)
    if not ordered:
        return ""
    first, last = ordered[0], ordered[-1]
    prefix = []
    for a, b in zip(first, last):
        if a != b:
            break
        prefix.append(a)
    return "".join(prefix)