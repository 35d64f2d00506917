"""Add or remove this server's launch descriptor in a loaded config."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from markdown_editor_setup.config.settings import (
    INSPECT_FLAG,
    MCP_SERVERS_KEY,
    RUNTIME_COMMAND,
    SERVER_NAME,
)


def build_descriptor(server_path: Path, debug: bool = False) -> dict[str, Any]:
    """Launch descriptor for the server entry point, optionally under the inspector."""
    args = [str(server_path)]
    if debug:
        args.insert(0, INSPECT_FLAG)
    return {"command": RUNTIME_COMMAND, "args": args}


def install_entry(config: dict[str, Any], server_path: Path, debug: bool = False) -> dict[str, Any]:
    descriptor = build_descriptor(server_path, debug)
    config[MCP_SERVERS_KEY][SERVER_NAME] = descriptor
    return descriptor


def uninstall_entry(config: dict[str, Any]) -> bool:
    """Remove the entry. Returns False if it was not registered."""
    servers = config[MCP_SERVERS_KEY]
    if SERVER_NAME not in servers:
        return False
    del servers[SERVER_NAME]
    return True
