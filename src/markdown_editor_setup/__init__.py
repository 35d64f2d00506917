"""Installer for the markdown-editor MCP server entry in Claude Desktop."""

__version__ = "0.1.0"
