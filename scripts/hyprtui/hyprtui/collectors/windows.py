"""Hyprland client list collector (fail-soft)."""

from __future__ import annotations

import logging
from typing import Any

from hyprtui.collectors import HyprctlError, run_hyprctl_json
from hyprtui.models import Window, WindowListing

logger = logging.getLogger(__name__)


def _text(value: Any, default: str) -> str:
    if isinstance(value, str):
        return value
    return default


def _workspace(client: dict) -> str:
    workspace = client.get("workspace")
    if not isinstance(workspace, dict):
        return "?"
    ws_id = workspace.get("id")
    # bool is an int subclass; hyprctl never reports one as a workspace id
    if isinstance(ws_id, int) and not isinstance(ws_id, bool):
        return str(ws_id)
    return "?"


def parse_client(client: dict) -> Window:
    return Window(
        id=_text(client.get("address"), ""),
        window_class=_text(client.get("class"), "UnknownClass"),
        title=_text(client.get("title"), "No Title"),
        workspace=_workspace(client),
    )


def parse_clients(data: Any) -> WindowListing:
    if not isinstance(data, list):
        return WindowListing(errors=["unexpected client list from hyprctl"])
    windows = [parse_client(client) for client in data if isinstance(client, dict)]
    return WindowListing(windows=windows)


def collect(hyprctl: str = "hyprctl") -> WindowListing:
    try:
        data = run_hyprctl_json(["clients"], hyprctl=hyprctl)
    except HyprctlError as exc:
        logger.warning("window listing failed: %s", exc)
        return WindowListing(errors=[str(exc)])

    listing = parse_clients(data)
    logger.debug("collected %d windows", len(listing.windows))
    return listing
