"""
Pytest fixtures for exercising the installer against a temporary home directory.
"""

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from markdown_editor_setup.cli.main import cli
from markdown_editor_setup.config.settings import Settings


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def install_dir(tmp_path: Path) -> Path:
    path = tmp_path / "markdown-editor"
    (path / "dist").mkdir(parents=True)
    (path / "dist" / "index.js").write_text("// server\n")
    return path


@pytest.fixture
def settings(home: Path, install_dir: Path) -> Settings:
    """macOS settings rooted in a temporary home."""
    return Settings(home=home, platform="darwin", install_dir=install_dir)


@pytest.fixture
def config_path(settings: Settings) -> Path:
    return settings.config_path


@pytest.fixture
def write_config_file(config_path: Path) -> Callable[[object], Path]:
    """Factory writing a JSON document to the desktop config path."""

    def _write(document: object) -> Path:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(document, indent=2))
        return config_path

    return _write


@pytest.fixture
def run_cli(settings: Settings) -> Callable[..., Result]:
    """Invoke the CLI with the temporary settings injected."""
    runner = CliRunner()

    def _run(*args: str) -> Result:
        return runner.invoke(cli, list(args), obj={"settings": settings})

    return _run
