"""Restart the desktop app so it picks up config changes (macOS only)."""

from __future__ import annotations

import logging
import subprocess
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from markdown_editor_setup.config.settings import APP_NAME

logger = logging.getLogger(__name__)

PROCESS_NAMES = (APP_NAME, f"{APP_NAME}.app")
RESTART_DELAY_SECONDS = 1.0


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class SetupStep:
    step: str
    status: str = "started"
    timestamp: int = field(default_factory=_now_ms)
    duration: int = 0
    error: str | None = None


@dataclass
class SetupTracker:
    """In-memory record of setup steps for one run."""

    steps: list[SetupStep] = field(default_factory=list)
    clock: Callable[[], int] = _now_ms

    def add_step(self, step: str, status: str = "started", error: BaseException | str | None = None) -> int:
        self.steps.append(
            SetupStep(step=step, status=status, timestamp=self.clock(), error=_error_text(error))
        )
        return len(self.steps) - 1

    def update_step(self, index: int, status: str, error: BaseException | str | None = None) -> None:
        if not 0 <= index < len(self.steps):
            return
        step = self.steps[index]
        step.status = status
        step.duration = self.clock() - step.timestamp
        if error:
            step.error = _error_text(error)


def _error_text(error: BaseException | str | None) -> str | None:
    if error is None:
        return None
    return str(error) or type(error).__name__


def restart_desktop_app(
    tracker: SetupTracker,
    run: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Kill the running desktop app and launch it again.

    Raises:
        subprocess.CalledProcessError, OSError: if the relaunch fails.
    """
    index = tracker.add_step("restart_claude")

    for name in PROCESS_NAMES:
        try:
            run(["pkill", "-x", name], check=True, capture_output=True)
        except (subprocess.CalledProcessError, OSError):
            logger.debug("%s was not running", name)

    sleep(RESTART_DELAY_SECONDS)

    try:
        run(["open", "-a", APP_NAME], check=True, capture_output=True)
    except (subprocess.CalledProcessError, OSError) as e:
        tracker.update_step(index, "failed", e)
        logger.error("Failed to restart %s: %s", APP_NAME, e)
        raise

    tracker.update_step(index, "completed")
