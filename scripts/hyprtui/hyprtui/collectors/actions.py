"""Window focus/close dispatch through hyprctl."""

from __future__ import annotations

import logging

from hyprtui.collectors import HyprctlError, run_hyprctl
from hyprtui.models import ActionOutcome, ActionResult, Window

logger = logging.getLogger(__name__)


def dispatch(verb: str, window: Window, hyprctl: str = "hyprctl") -> ActionOutcome:
    if not window.id:
        return ActionOutcome(ActionResult.FAILED, f"cannot {verb}: window has no address")

    try:
        run_hyprctl(["dispatch", f"{verb}window", f"address:{window.id}"], hyprctl=hyprctl)
    except HyprctlError as exc:
        logger.warning("%s %s failed: %s", verb, window.id, exc)
        return ActionOutcome(ActionResult.FAILED, f"{verb} failed: {exc}")

    logger.info("%s %s (%s)", verb, window.id, window.window_class)
    return ActionOutcome(ActionResult.OK, f"{verb} {window.window_class}")


def focus_window(window: Window, hyprctl: str = "hyprctl") -> ActionOutcome:
    return dispatch("focus", window, hyprctl=hyprctl)


def close_window(window: Window, hyprctl: str = "hyprctl") -> ActionOutcome:
    return dispatch("close", window, hyprctl=hyprctl)
