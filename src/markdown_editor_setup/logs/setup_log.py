"""Plain-text setup log under ~/.claude-code-logs.

Each entry goes to both ``setup-<YYYY-MM-DD>.log`` and ``setup-latest.log``.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

import click

LATEST_LOG_NAME = "setup-latest.log"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_entry(message: str, when: datetime, is_error: bool = False) -> str:
    stamp = when.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    prefix = "ERROR: " if is_error else ""
    return f"[{stamp}] {prefix}{message}\n"


class SetupLog:
    """Append-only log sink whose writes never raise."""

    def __init__(self, log_dir: Path, clock: Callable[[], datetime] = _utc_now) -> None:
        self.log_dir = log_dir
        self.clock = clock

    def daily_path(self, when: datetime) -> Path:
        return self.log_dir / f"setup-{when.astimezone(timezone.utc):%Y-%m-%d}.log"

    @property
    def latest_path(self) -> Path:
        return self.log_dir / LATEST_LOG_NAME

    def write(self, message: str, is_error: bool = False) -> bool:
        """Append one entry. Returns False if the log could not be written."""
        when = self.clock()
        entry = format_entry(message, when, is_error)
        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            for path in (self.daily_path(when), self.latest_path):
                with open(path, "a", encoding="utf-8") as f:
                    f.write(entry)
        except OSError as e:
            if is_error:
                click.echo(f"[Log Error] {e}", err=True)
            return False
        return True
