"""Tests for adding and removing the launch descriptor."""

from pathlib import Path

from markdown_editor_setup.desktop.entry import build_descriptor, install_entry, uninstall_entry

SERVER_PATH = Path("/opt/markdown-editor/dist/index.js")


class TestBuildDescriptor:
    def test_plain(self) -> None:
        assert build_descriptor(SERVER_PATH) == {"command": "node", "args": [str(SERVER_PATH)]}

    def test_debug_adds_inspector_flag_first(self) -> None:
        descriptor = build_descriptor(SERVER_PATH, debug=True)
        assert descriptor["args"] == ["--inspect-brk=9229", str(SERVER_PATH)]
        assert descriptor["command"] == build_descriptor(SERVER_PATH)["command"]


class TestInstallEntry:
    def test_inserts_entry(self) -> None:
        config = {"mcpServers": {}}
        descriptor = install_entry(config, SERVER_PATH)
        assert config["mcpServers"]["markdown-editor-mcp"] == descriptor

    def test_overwrites_existing_entry(self) -> None:
        config = {"mcpServers": {"markdown-editor-mcp": {"command": "old", "args": []}}}
        install_entry(config, SERVER_PATH, debug=True)
        assert config["mcpServers"]["markdown-editor-mcp"]["command"] == "node"

    def test_leaves_other_servers(self) -> None:
        other = {"command": "uvx", "args": ["other"]}
        config = {"mcpServers": {"other": other}}
        install_entry(config, SERVER_PATH)
        assert config["mcpServers"]["other"] is other


class TestUninstallEntry:
    def test_removes_entry(self) -> None:
        config = {"mcpServers": {"markdown-editor-mcp": {}, "other": {}}}
        assert uninstall_entry(config) is True
        assert config["mcpServers"] == {"other": {}}

    def test_absent_entry_is_not_an_error(self) -> None:
        config = {"mcpServers": {"other": {}}}
        assert uninstall_entry(config) is False
        assert config["mcpServers"] == {"other": {}}
