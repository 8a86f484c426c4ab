"""Panel rendering helpers and the shared palette."""

from __future__ import annotations

from rich.text import Text

# Dracula
THEME = {
    "background": "#282a36",
    "surface": "#44475a",
    "surface_variant": "#6272a4",
    "primary": "#bd93f9",
    "on_background": "#f8f8f2",
    "on_surface": "#f8f8f2",
    "accent": "#50fa7b",
    "border_selected": "#ff79c6",
    "border_normal": "#6272a4",
    "error": "#ff5555",
}

CLOCK_THEME = {
    "border": "rgb(255,105,180)",
    "text": "rgb(220,220,220)",
    "muted": "rgb(150,150,150)",
}

STATUS_STYLE = {
    "info": THEME["accent"],
    "error": THEME["error"],
}


def color(name: str) -> str:
    return THEME[name]


def style_for_status(level: str) -> str:
    return STATUS_STYLE.get(level, THEME["on_surface"])


def centered_text(text: str, style: str = "") -> Text:
    return Text(text, style=style, justify="center", no_wrap=True, overflow="ellipsis")
