"""Settings and platform paths for the desktop config installer.

Desktop config (macOS):   ~/Library/Application Support/Claude/claude_desktop_config.json
Desktop config (Windows): %APPDATA%/Claude/claude_desktop_config.json
Setup logs:               ~/.claude-code-logs/
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from markdown_editor_setup.errors import UnsupportedPlatformError


SERVER_NAME = "markdown-editor-mcp"
MCP_SERVERS_KEY = "mcpServers"
RUNTIME_COMMAND = "node"
INSPECT_PORT = 9229
INSPECT_FLAG = f"--inspect-brk={INSPECT_PORT}"
SERVER_ENTRY = Path("dist") / "index.js"

APP_NAME = "Claude"
CONFIG_FILENAME = "claude_desktop_config.json"
LOG_DIR_NAME = ".claude-code-logs"
INSTALL_DIR_ENV = "MARKDOWN_EDITOR_MCP_DIR"

MACOS_PLATFORMS = ("darwin",)
WINDOWS_PLATFORMS = ("win32", "cygwin", "msys", "windows")


def resolve_config_path(platform: str, home: Path, appdata: str | None = None) -> Path:
    """Map an OS identifier to the desktop app's config file path.

    Raises:
        UnsupportedPlatformError: for anything other than macOS or Windows.
    """
    key = platform.lower()
    if key in MACOS_PLATFORMS:
        return home / "Library" / "Application Support" / APP_NAME / CONFIG_FILENAME
    if key in WINDOWS_PLATFORMS:
        roaming = Path(appdata) if appdata else home / "AppData" / "Roaming"
        return roaming / APP_NAME / CONFIG_FILENAME
    raise UnsupportedPlatformError(platform)


@dataclass
class Settings:
    """Resolved inputs for one setup run."""

    home: Path = field(default_factory=Path.home)
    platform: str = sys.platform
    appdata: str | None = None
    install_dir: Path = field(default_factory=Path.cwd)
    log_dir: Path | None = None

    def __post_init__(self) -> None:
        if self.log_dir is None:
            self.log_dir = self.home / LOG_DIR_NAME

    @property
    def config_path(self) -> Path:
        return resolve_config_path(self.platform, self.home, self.appdata)

    @property
    def server_path(self) -> Path:
        return self.install_dir / SERVER_ENTRY

    def ensure_config_dir(self) -> Path:
        """Create the config file's parent directory; return the config path."""
        path = self.config_path
        path.parent.mkdir(parents=True, exist_ok=True)
        return path


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build settings from the environment, falling back to defaults."""
    if env is None:
        env = os.environ

    home = Path(env["HOME"]) if env.get("HOME") else Path.home()
    install_dir = env.get(INSTALL_DIR_ENV)

    return Settings(
        home=home,
        platform=sys.platform,
        appdata=env.get("APPDATA") or None,
        install_dir=Path(install_dir).expanduser().resolve() if install_dir else Path.cwd(),
    )
