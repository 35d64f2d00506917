"""Console messages for setup progress and next steps."""

from __future__ import annotations

from pathlib import Path

import click

from markdown_editor_setup.config.settings import INSPECT_PORT, SERVER_NAME


def report_removed(removed: bool) -> None:
    if removed:
        click.echo(f"✅ Removed {SERVER_NAME} from Claude config")
    else:
        click.echo(f"ℹ️  {SERVER_NAME} was not found in Claude config")


def report_added(server_path: Path, debug: bool) -> None:
    click.echo(f"✅ Added {SERVER_NAME} to Claude config")
    click.echo(f"📍 Server path: {server_path}")

    if debug:
        click.echo()
        click.echo("🐛 Debug mode configuration:")
        click.echo(f"- Node.js inspector will be available on port {INSPECT_PORT}")
        click.echo("- You can attach a debugger to debug the MCP server")
        click.echo("- Use Chrome DevTools or VS Code for debugging")
        click.echo("- Open chrome://inspect in Chrome to connect to the debugger")
        click.echo()


def report_finished(config_path: Path, uninstall: bool, debug: bool) -> None:
    click.echo(f"✅ Updated Claude config at: {config_path}")

    if uninstall:
        click.echo()
        click.echo("🎉 Uninstallation complete!")
        click.echo("The server has been removed from Claude config.")
        click.echo("Restart Claude Desktop app to apply changes.")
        click.echo()
        return

    click.echo()
    click.echo("🎉 Installation complete!")
    click.echo()
    click.echo("📝 Next steps:")
    click.echo("1. Restart Claude Desktop app")
    click.echo(f'2. Look for "{SERVER_NAME}" in the available MCP servers')
    click.echo("3. The server will start automatically when you use Claude")
    click.echo()

    if debug:
        click.echo("🐛 Debug-specific instructions:")
        click.echo("- When Claude starts the server, it will pause and wait for debugger")
        click.echo(f"- Attach your debugger to port {INSPECT_PORT} to continue execution")
        click.echo()
