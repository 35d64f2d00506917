"""Desktop config file helpers: read, initialize, and write."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from markdown_editor_setup.config.settings import MCP_SERVERS_KEY
from markdown_editor_setup.errors import ConfigParseError

logger = logging.getLogger(__name__)


def read_config(path: Path) -> dict[str, Any]:
    """Load the desktop config, or start from an empty document.

    The returned document always carries an ``mcpServers`` mapping.

    Raises:
        ConfigParseError: if the file is not a JSON object, or its
            ``mcpServers`` value is neither empty nor an object.
    """
    config: dict[str, Any] = {}

    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigParseError(path, str(e)) from e
        if not isinstance(data, dict):
            raise ConfigParseError(path, f"expected a JSON object, got {type(data).__name__}")
        config = data
        logger.debug("Loaded %s with keys %s", path, list(config))
    else:
        logger.debug("No config at %s, starting from an empty document", path)

    if not config.get(MCP_SERVERS_KEY):
        config[MCP_SERVERS_KEY] = {}
    elif not isinstance(config[MCP_SERVERS_KEY], dict):
        raise ConfigParseError(path, f"{MCP_SERVERS_KEY} is not a JSON object")

    return config


def write_config(path: Path, config: dict[str, Any]) -> None:
    """Overwrite the config file with the whole document."""
    path.write_text(json.dumps(config, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    logger.debug("Wrote %s", path)
