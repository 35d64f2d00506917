"""markdown-editor-setup CLI entry point."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import click

from markdown_editor_setup import __version__
from markdown_editor_setup.cli import report
from markdown_editor_setup.config.settings import MACOS_PLATFORMS, Settings, load_settings
from markdown_editor_setup.desktop.config_file import read_config, write_config
from markdown_editor_setup.desktop.entry import install_entry, uninstall_entry
from markdown_editor_setup.desktop.restart import SetupTracker, restart_desktop_app
from markdown_editor_setup.env.context import describe_environment
from markdown_editor_setup.errors import SetupError
from markdown_editor_setup.logs.setup_log import SetupLog

logger = logging.getLogger("markdown-editor-setup")


@click.command(context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
@click.version_option(version=__version__, prog_name="markdown-editor-setup")
@click.option("--debug", is_flag=True, help="Launch the server under the Node.js inspector (port 9229)")
@click.option("--uninstall", is_flag=True, help="Remove the server from Claude Desktop instead of adding it")
@click.option(
    "--install-dir",
    type=click.Path(file_okay=False, resolve_path=True, path_type=Path),
    default=None,
    help="Directory containing dist/index.js (defaults to $MARKDOWN_EDITOR_MCP_DIR or the current directory)",
)
@click.option("--restart", is_flag=True, help="Restart Claude Desktop afterwards (macOS only)")
@click.option("--verbose", "-v", is_flag=True, help="Print diagnostics to stderr")
@click.pass_context
def cli(
    ctx: click.Context,
    debug: bool,
    uninstall: bool,
    install_dir: Path | None,
    restart: bool,
    verbose: bool,
) -> None:
    """Register the markdown-editor MCP server with Claude Desktop."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[logging.StreamHandler()])
        logger.setLevel(logging.DEBUG)

    ctx.ensure_object(dict)
    if "settings" not in ctx.obj:
        ctx.obj["settings"] = load_settings()
    settings = ctx.obj["settings"]
    if install_dir is not None:
        settings.install_dir = install_dir

    if ctx.args:
        logger.debug("Ignoring unrecognized arguments: %s", " ".join(ctx.args))

    setup_log = SetupLog(settings.log_dir)

    try:
        _run_setup(settings, setup_log, debug=debug, uninstall=uninstall, restart=restart)
    except Exception as e:
        click.echo(f"\n❌ Setup failed: {e}", err=True)
        setup_log.write(f"Setup failed: {e}", is_error=True)
        raise SystemExit(1)


def _run_setup(settings: Settings, setup_log: SetupLog, debug: bool, uninstall: bool, restart: bool) -> None:
    click.echo("\n🚀 Setting up Markdown Editor MCP for Claude Desktop...\n")

    if debug:
        click.echo("🐛 Debug mode enabled\n")
    if uninstall:
        click.echo("🗑️  Uninstall mode\n")

    if logger.isEnabledFor(logging.DEBUG):
        for key, value in describe_environment(os.environ, sys.argv, settings.install_dir).items():
            logger.debug("%s: %s", key, value)

    try:
        config_path = settings.ensure_config_dir()
        config = read_config(config_path)
    except SetupError as e:
        click.echo(f"❌ {e}", err=True)
        raise SystemExit(1)

    if uninstall:
        report.report_removed(uninstall_entry(config))
    else:
        install_entry(config, settings.server_path, debug)
        report.report_added(settings.server_path, debug)

    write_config(config_path, config)
    report.report_finished(config_path, uninstall, debug)

    mode = "uninstall" if uninstall else "install"
    setup_log.write(f"Setup completed successfully - Mode: {mode}, Debug: {str(debug).lower()}")

    if restart:
        if settings.platform.lower() not in MACOS_PLATFORMS:
            click.echo("ℹ️  Automatic restart is only supported on macOS; restart Claude Desktop manually.")
            return
        click.echo("🔄 Restarting Claude Desktop...")
        restart_desktop_app(SetupTracker())
        click.echo("✅ Claude Desktop restarted")
