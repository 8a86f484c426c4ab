"""Switcher header renderer."""

from __future__ import annotations

from rich.padding import Padding
from rich.text import Text

from hyprtui.formatting import SWITCHER_HELP, window_count_label
from hyprtui.panels import color


def render(window_count: int) -> Padding:
    text = Text(justify="center", no_wrap=True, overflow="ellipsis")
    text.append("󰖲 ", style=color("accent"))
    text.append("Hyprland Window Switcher", style=f"bold {color('on_background')}")
    text.append("\n")
    text.append(f"{window_count_label(window_count)} • {SWITCHER_HELP}", style=f"dim {color('on_surface')}")
    return Padding(text, (0, 2), style=f"on {color('background')}", expand=True)
