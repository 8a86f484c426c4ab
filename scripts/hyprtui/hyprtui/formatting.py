"""Shared text helpers for human-facing cards and headers."""

from __future__ import annotations

from datetime import date, datetime

DEFAULT_ICON = "󰣆"

APP_ICONS = {
    ("firefox", "firefox-esr"): "󰈹",
    ("google-chrome", "chromium"): "󰊯",
    ("code", "code-oss", "vscodium"): "󰨞",
    ("kitty", "alacritty", "wezterm", "foot"): "󰆍",
    ("thunar", "nautilus", "dolphin", "pcmanfm"): "󰉋",
    ("discord",): "󰙯",
    ("slack",): "󰒱",
    ("telegram", "telegram-desktop"): "󰔿",
    ("spotify",): "󰓇",
    ("vlc", "mpv"): "󰕼",
    ("gimp",): "󰏘",
    ("blender",): "󰂫",
    ("libreoffice",): "󰈙",
    ("steam",): "󰓓",
    ("obsidian",): "󱓷",
    ("notion",): "󰈚",
}

ICON_BY_CLASS = {name: icon for names, icon in APP_ICONS.items() for name in names}

WORKSPACE_GLYPH = "󰋁"
CLOSE_HINT = "󰅖 Del/x to close"
SWITCHER_HELP = "Use ←→↑↓ or mouse • Enter/Click: focus • Del/x: close • r: refresh • q: quit"


def app_icon(window_class: str | None) -> str:
    if not window_class:
        return DEFAULT_ICON
    return ICON_BY_CLASS.get(window_class.strip().lower(), DEFAULT_ICON)


def workspace_label(workspace: str) -> str:
    return f"{WORKSPACE_GLYPH} {workspace}"


def window_count_label(count: int) -> str:
    noun = "window" if count == 1 else "windows"
    return f"Found {count} {noun}"


def clock_text(now: datetime) -> str:
    return now.strftime("%H:%M:%S")


def month_title(day: date) -> str:
    return day.strftime("%B %Y")
