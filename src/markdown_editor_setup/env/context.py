"""Probes describing how and where setup was launched."""

from __future__ import annotations

import json
import subprocess
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path


SHELL_NAMES: dict[str, str] = {
    "bash": "bash",
    "zsh": "zsh",
    "fish": "fish",
    "sh": "sh",
    "dash": "dash",
    "ksh": "ksh",
    "tcsh": "tcsh",
    "csh": "csh",
    "cmd": "cmd",
    "powershell": "powershell",
    "pwsh": "powershell",
}


def detect_shell(env: Mapping[str, str]) -> str:
    shell = env.get("SHELL") or "unknown"
    name = shell.replace("\\", "/").rsplit("/", 1)[-1] or shell
    return SHELL_NAMES.get(name.lower(), name)


def get_execution_context(env: Mapping[str, str], argv: Sequence[str]) -> str:
    """Classify the launcher: npx, an npm script, or a direct interpreter run."""
    first = argv[0] if argv else ""
    if env.get("npm_command") == "exec" or "npx" in first:
        return "npx"
    if env.get("npm_lifecycle_event"):
        return f"npm_{env['npm_lifecycle_event']}"
    if "python" in Path(first).name or first.endswith(".py"):
        return "python_direct"
    return "unknown"


def get_npm_version(run: Callable[..., subprocess.CompletedProcess] = subprocess.run) -> str:
    try:
        result = run(["npm", "--version"], capture_output=True, text=True, check=True)
    except (subprocess.CalledProcessError, OSError):
        return "unknown"
    return result.stdout.strip() or "unknown"


def get_package_version(install_dir: Path) -> str:
    """Version from the server's package.json, or 'unknown'."""
    try:
        data = json.loads((install_dir / "package.json").read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return "unknown"
    if not isinstance(data, dict):
        return "unknown"
    return str(data.get("version") or "unknown")


def describe_environment(
    env: Mapping[str, str],
    argv: Sequence[str],
    install_dir: Path,
    run: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> dict[str, str]:
    return {
        "shell": detect_shell(env),
        "context": get_execution_context(env, argv),
        "npm": get_npm_version(run),
        "server_version": get_package_version(install_dir),
    }
