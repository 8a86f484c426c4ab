"""Calendar clock application entrypoint."""

from __future__ import annotations

import argparse
import logging
from datetime import datetime
from typing import Callable

from rich.console import Console
from rich.layout import Layout
from rich.live import Live

from hyprtui import dates, setup_logging
from hyprtui.config import resolve_profile
from hyprtui.models import ClockState, Rect
from hyprtui.panels.clock import render as render_clock_screen
from hyprtui.terminal import KeyEvent, TerminalError, TerminalSession

logger = logging.getLogger(__name__)

DATE_KEYS: dict[str, Callable] = {
    "n": dates.next_month,
    "p": dates.prev_month,
    "left": dates.prev_day,
    "right": dates.next_day,
    "up": dates.prev_week,
    "down": dates.next_week,
}


def new_state(now: datetime) -> ClockState:
    return ClockState(now=now, selected_date=now.date())


def tick(state: ClockState, now: datetime) -> None:
    state.now = now


def handle_key(state: ClockState, key: str, now: datetime) -> None:
    if key == "q":
        state.running = False
    elif key == "r":
        state.selected_date = now.date()
    elif key in DATE_KEYS:
        state.selected_date = DATE_KEYS[key](state.selected_date)
        logger.debug("key %r selected %s", key, state.selected_date)


def render(state: ClockState, console: Console, profile: dict) -> Layout:
    width, height = console.size
    return render_clock_screen(
        state,
        Rect(0, 0, width, height),
        box_width=int(profile.get("box_width", 50)),
        box_height=int(profile.get("box_height", 25)),
        today=state.now.date(),
    )


def run(console: Console, profile: dict, now: Callable[[], datetime] = datetime.now) -> int:
    state = new_state(now())
    tick_seconds = profile.get("tick_ms", 100) / 1000

    with TerminalSession() as session:
        with Live(render(state, console, profile), console=console, screen=True, auto_refresh=False) as live:
            while state.running:
                for event in session.poll(tick_seconds):
                    if isinstance(event, KeyEvent):
                        handle_key(state, event.name, now())
                tick(state, now())
                live.update(render(state, console, profile), refresh=True)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Terminal calendar clock")
    parser.add_argument("--snapshot", action="store_true", help="Print one frame and exit")
    parser.add_argument("--config", help="Optional JSON config file (defaults to $HYPRTUI_CONFIG)")
    parser.add_argument("--log-file", help="Write logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging (needs --log-file)")
    args = parser.parse_args(argv)

    setup_logging(args.log_file, args.verbose)
    console = Console()

    try:
        profile = resolve_profile("clock", args.config)
    except ValueError as exc:
        Console(stderr=True).print(f"[red]config error:[/red] {exc}")
        return 2

    if args.snapshot:
        console.print(render(new_state(datetime.now()), console, profile))
        return 0

    try:
        return run(console, profile)
    except TerminalError as exc:
        Console(stderr=True).print(f"[red]terminal error:[/red] {exc}")
        return 1
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
