"""Usage statistics on commands run and the directories they ran in."""

from __future__ import annotations

import json
import os
from collections import Counter
from pathlib import Path

LIMIT = 5


class AnalyticsState:
    """Counts of command names and working directories."""

    def __init__(self) -> None:
        self.commands: Counter[str] = Counter()
        self.dirs: Counter[Path] = Counter()

    def record_command(self, command: str, working_dir: str | os.PathLike[str]) -> None:
        """Count the command's name and the directory it ran in."""
        self.commands[command.split(" ")[0]] += 1
        self.dirs[Path(working_dir)] += 1

    def report(self, limit: int = LIMIT) -> list[str]:
        """Report lines listing at most ``limit`` commands and directories."""
        lines = ["most used commands ===="]
        for name, count in sorted(self.commands.items(), reverse=True)[:limit]:
            lines.append(f"{name} {count}")
        lines.append("most used dirs ====")
        for path, count in sorted(self.dirs.items(), reverse=True)[:limit]:
            lines.append(f"{json.dumps(str(path), ensure_ascii=False)} {count}")
        return lines