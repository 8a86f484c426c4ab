"""Hyprland window switcher application entrypoint."""

from __future__ import annotations

import argparse
import json
import logging
import time
from functools import partial
from typing import Callable

from rich.console import Console
from rich.layout import Layout
from rich.live import Live

from hyprtui import setup_logging
from hyprtui.collectors.actions import close_window, focus_window
from hyprtui.collectors.windows import collect as collect_windows
from hyprtui.config import resolve_profile
from hyprtui.layout import compute_layout, hit_test, switcher_areas
from hyprtui.models import ActionOutcome, Rect, StatusMessage, SwitcherState, Window, WindowListing
from hyprtui.panels.header import render as render_header
from hyprtui.panels.status import render as render_status
from hyprtui.panels.windows import render as render_windows
from hyprtui.terminal import InputEvent, KeyEvent, MouseEvent, TerminalError, TerminalSession

logger = logging.getLogger(__name__)

Action = Callable[[Window], ActionOutcome]


def console_viewport(console: Console) -> Rect:
    width, height = console.size
    return Rect(0, 0, width, height)


class Switcher:
    """Event handling and rendering for one switcher run.

    All mutable data lives in the ``SwitcherState`` handed to each method.
    """

    def __init__(
        self,
        profile: dict,
        collect: Callable[[], WindowListing] | None = None,
        focus: Action | None = None,
        close: Action | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        hyprctl = profile.get("hyprctl", "hyprctl")
        self.profile = profile
        self.cell_height = int(profile.get("cell_height", 10))
        self.status_seconds = float(profile.get("status_seconds", 3))
        self.collect = collect or partial(collect_windows, hyprctl=hyprctl)
        self.focus = focus or partial(focus_window, hyprctl=hyprctl)
        self.close = close or partial(close_window, hyprctl=hyprctl)
        self.clock = clock

    def load(self) -> SwitcherState:
        listing = self.collect()
        state = SwitcherState(windows=list(listing.windows))
        if listing.errors:
            self.notify(state, listing.errors[0], level="error")
        return state

    def notify(self, state: SwitcherState, text: str, level: str = "info") -> None:
        state.status = StatusMessage(text=text, level=level, expires_at=self.clock() + self.status_seconds)

    def grid_area(self, viewport: Rect) -> Rect:
        return switcher_areas(viewport)[1]

    def columns(self, state: SwitcherState, viewport: Rect) -> int:
        return compute_layout(self.grid_area(viewport).width, len(state.windows)).columns

    def move(self, state: SwitcherState, direction: str, columns: int) -> None:
        count = len(state.windows)
        index = state.selected_index
        if direction == "left" and index > 0:
            state.selected_index = index - 1
        elif direction == "right" and index + 1 < count:
            state.selected_index = index + 1
        elif direction == "up" and index >= columns:
            state.selected_index = index - columns
        elif direction == "down" and index + columns < count:
            state.selected_index = index + columns

    def refresh(self, state: SwitcherState) -> None:
        previous = state.selected
        listing = self.collect()
        if listing.errors:
            self.notify(state, f"refresh failed: {listing.errors[0]}", level="error")
            return

        state.windows = list(listing.windows)
        if not state.windows:
            state.running = False
            return

        if previous is not None:
            for index, window in enumerate(state.windows):
                if window.id == previous.id:
                    state.selected_index = index
                    break
        state.selected_index = min(state.selected_index, len(state.windows) - 1)

    def focus_selected(self, state: SwitcherState) -> None:
        window = state.selected
        if window is None:
            state.running = False
            return
        outcome = self.focus(window)
        if outcome.ok:
            state.running = False
        else:
            self.notify(state, outcome.message, level="error")

    def close_selected(self, state: SwitcherState) -> None:
        window = state.selected
        if window is None:
            return
        outcome = self.close(window)
        if not outcome.ok:
            self.notify(state, outcome.message, level="error")
            return

        del state.windows[state.selected_index]
        if not state.windows:
            state.running = False
            return
        state.selected_index = min(state.selected_index, len(state.windows) - 1)
        self.notify(state, outcome.message)

    def handle_key(self, state: SwitcherState, key: str, viewport: Rect) -> None:
        logger.debug("key %r", key)
        if key in ("left", "right", "up", "down"):
            self.move(state, key, self.columns(state, viewport))
        elif key == "enter":
            self.focus_selected(state)
        elif key in ("delete", "x"):
            self.close_selected(state)
        elif key == "r":
            self.refresh(state)
        elif key in ("q", "esc"):
            state.running = False

    def handle_mouse(self, state: SwitcherState, event: MouseEvent, viewport: Rect) -> None:
        if event.kind not in ("move", "left", "right"):
            return
        index = hit_test(event.x, event.y, self.grid_area(viewport), len(state.windows), self.cell_height)
        if index is not None:
            state.selected_index = index
        if event.kind == "left":
            self.focus_selected(state)
        elif event.kind == "right":
            self.close_selected(state)

    def handle_event(self, state: SwitcherState, event: InputEvent, viewport: Rect) -> None:
        if isinstance(event, KeyEvent):
            self.handle_key(state, event.name, viewport)
        elif isinstance(event, MouseEvent):
            self.handle_mouse(state, event, viewport)

    def render(self, state: SwitcherState, viewport: Rect) -> Layout:
        header, body, status = switcher_areas(viewport)
        # rich treats size=0 as flexible, so empty areas are left out
        parts = []
        if header.height:
            parts.append(Layout(render_header(len(state.windows)), name="header", size=header.height))
        parts.append(
            Layout(
                render_windows(state.windows, state.selected_index, body, self.cell_height),
                name="body",
            )
        )
        if status.height:
            parts.append(Layout(render_status(state.status, self.clock()), name="status", size=status.height))

        screen = Layout(name="screen")
        screen.split_column(*parts)
        return screen

    def run(self, console: Console) -> int:
        state = self.load()
        tick_seconds = self.profile.get("tick_ms", 200) / 1000

        with TerminalSession(mouse=bool(self.profile.get("mouse", True))) as session:
            with Live(
                self.render(state, console_viewport(console)),
                console=console,
                screen=True,
                auto_refresh=False,
            ) as live:
                while state.running:
                    for event in session.poll(tick_seconds):
                        self.handle_event(state, event, console_viewport(console))
                        if not state.running:
                            break
                    live.update(self.render(state, console_viewport(console)), refresh=True)
        return 0


def _json_output(listing: WindowListing, width: int) -> str:
    layout = compute_layout(width, len(listing.windows))
    payload = {
        "windows": [window.to_dict() for window in listing.windows],
        "errors": listing.errors,
        "layout": {
            "width": width,
            "columns": layout.columns,
            "rows": layout.rows,
            "cell_width": layout.cell_width,
            "text_width": layout.text_width,
        },
    }
    return json.dumps(payload, indent=2)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Hyprland terminal window switcher")
    parser.add_argument("--json", action="store_true", help="Emit window list and grid layout as JSON")
    parser.add_argument("--snapshot", action="store_true", help="Print one frame and exit")
    parser.add_argument("--config", help="Optional JSON config file (defaults to $HYPRTUI_CONFIG)")
    parser.add_argument("--hyprctl", help="Override the hyprctl executable")
    parser.add_argument("--no-mouse", action="store_true", help="Disable mouse reporting")
    parser.add_argument("--log-file", help="Write logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging (needs --log-file)")
    args = parser.parse_args(argv)

    setup_logging(args.log_file, args.verbose)
    console = Console()

    try:
        profile = resolve_profile("switcher", args.config)
    except ValueError as exc:
        Console(stderr=True).print(f"[red]config error:[/red] {exc}")
        return 2
    if args.hyprctl:
        profile["hyprctl"] = args.hyprctl
    if args.no_mouse:
        profile["mouse"] = False

    switcher = Switcher(profile)

    if args.json:
        print(_json_output(switcher.collect(), switcher.grid_area(console_viewport(console)).width))
        return 0

    if args.snapshot:
        state = switcher.load()
        console.print(switcher.render(state, console_viewport(console)))
        return 0

    try:
        return switcher.run(console)
    except TerminalError as exc:
        Console(stderr=True).print(f"[red]terminal error:[/red] {exc}")
        return 1
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
