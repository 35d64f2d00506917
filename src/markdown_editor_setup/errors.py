"""Setup errors raised by the config layer and reported by the CLI."""

from __future__ import annotations

from pathlib import Path


class SetupError(Exception):
    """Base class for failures that abort setup."""


class UnsupportedPlatformError(SetupError):
    def __init__(self, platform: str) -> None:
        super().__init__(f"Unsupported operating system: {platform}")
        self.platform = platform


class ConfigParseError(SetupError):
    """Existing desktop config could not be parsed as a JSON object."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Error parsing existing config {path}: {reason}")
        self.path = path
        self.reason = reason
