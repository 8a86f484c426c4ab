"""One-line transient status bar."""

from __future__ import annotations

from rich.text import Text

from hyprtui.models import StatusMessage
from hyprtui.panels import color, style_for_status


def render(status: StatusMessage | None, now: float) -> Text:
    if status is None or not status.active(now):
        return Text("", style=f"on {color('background')}")
    return Text(
        f" {status.text}",
        style=f"bold {style_for_status(status.level)} on {color('background')}",
        no_wrap=True,
        overflow="ellipsis",
    )
