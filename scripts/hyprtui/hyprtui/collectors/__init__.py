"""hyprctl invocation helpers shared by the window collector and actions."""

from __future__ import annotations

import json
import logging
import subprocess
from typing import Any

logger = logging.getLogger(__name__)

HYPRCTL_TIMEOUT = 5


class HyprctlError(Exception):
    """hyprctl could not be run or did not return what was asked for."""


def run_hyprctl(args: list[str], hyprctl: str = "hyprctl", timeout: float = HYPRCTL_TIMEOUT) -> str:
    cmd = [hyprctl, *args]
    logger.debug("running %s", cmd)
    try:
        proc = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as exc:
        raise HyprctlError(f"{hyprctl} not installed") from exc
    except subprocess.TimeoutExpired as exc:
        raise HyprctlError(f"{hyprctl} {' '.join(args)} timed out") from exc
    except OSError as exc:
        raise HyprctlError(f"{hyprctl} failed to start: {exc}") from exc

    if proc.returncode != 0:
        lines = (proc.stderr or proc.stdout or "").strip().splitlines()
        message = lines[0] if lines else f"{hyprctl} exited with {proc.returncode}"
        raise HyprctlError(message)
    return proc.stdout


def run_hyprctl_json(args: list[str], hyprctl: str = "hyprctl", timeout: float = HYPRCTL_TIMEOUT) -> Any:
    output = run_hyprctl([*args, "-j"], hyprctl=hyprctl, timeout=timeout)
    try:
        return json.loads(output)
    except json.JSONDecodeError as exc:
        raise HyprctlError(f"invalid JSON from {hyprctl}") from exc
