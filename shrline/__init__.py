"""Building blocks for a shell input line: buffer, vi motions, completion, menus, highlighting and plugin state."""

__version__ = "0.1.0"