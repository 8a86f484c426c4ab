"""Clock and month calendar renderers."""

from __future__ import annotations

from datetime import date

from rich.layout import Layout
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from hyprtui.dates import WEEKDAY_NAMES, month_grid
from hyprtui.formatting import clock_text, month_title
from hyprtui.layout import centered_rect
from hyprtui.models import ClockState, Rect
from hyprtui.panels import CLOCK_THEME, centered_text

CONTROLS = [
    ("[n/p]", " : Next/Prev Month"),
    ("[←→][↑↓]", " : Navigate Day"),
    ("[r]", "   : Today"),
    ("[q]", "   : Quit"),
]


def render_clock(state: ClockState) -> Panel:
    return Panel(
        centered_text(clock_text(state.now), style=CLOCK_THEME["text"]),
        border_style=CLOCK_THEME["border"],
    )


def day_style(day: date, selected: date, today: date) -> str:
    if day == selected:
        return f"black on {CLOCK_THEME['text']}"
    if day == today:
        return f"bold {CLOCK_THEME['text']}"
    return CLOCK_THEME["text"]


def render_calendar(selected: date, today: date) -> Panel:
    table = Table.grid(expand=True)
    for _ in WEEKDAY_NAMES:
        table.add_column(justify="center", ratio=1)

    table.add_row(*(Text(name, style=CLOCK_THEME["muted"]) for name in WEEKDAY_NAMES))
    for week in month_grid(selected.year, selected.month):
        cells = []
        for day_number in week:
            if day_number is None:
                cells.append(Text(""))
                continue
            day = date(selected.year, selected.month, day_number)
            cells.append(Text(f"{day_number:>2}", style=day_style(day, selected, today)))
        table.add_row(*cells)

    return Panel(table, border_style=CLOCK_THEME["border"], padding=0)


def render_controls() -> Panel:
    text = Text()
    for number, (keys, label) in enumerate(CONTROLS):
        if number:
            text.append("\n")
        text.append(" ")
        text.append(keys, style=f"bold {CLOCK_THEME['border']}")
        text.append(label, style=CLOCK_THEME["text"])
    return Panel(text, border_style=CLOCK_THEME["border"])


def _blank(name: str, **kwargs) -> Layout:
    return Layout(Text(""), name=name, **kwargs)


def render(state: ClockState, area: Rect, box_width: int, box_height: int, today: date) -> Layout:
    box_area = centered_rect(box_width, box_height, area)

    # rich treats size=0 as flexible, so zero-height margins are left out
    top = box_area.y - area.y
    left = box_area.x - area.x

    screen = Layout(name="screen")
    screen.split_column(
        *([_blank("top", size=top)] if top else []),
        Layout(name="middle", size=box_area.height),
        _blank("bottom"),
    )
    screen["middle"].split_row(
        *([_blank("left", size=left)] if left else []),
        Layout(name="box", size=box_area.width),
        _blank("right"),
    )
    screen["box"].split_column(
        Layout(render_clock(state), name="clock", size=3),
        _blank("gap1", size=1),
        Layout(centered_text(month_title(state.selected_date), style=CLOCK_THEME["border"]), name="title", size=1),
        # 1 header row + 6 weeks + 2 border rows
        Layout(render_calendar(state.selected_date, today), name="calendar", size=9),
        _blank("gap2", size=1),
        Layout(centered_text("CONTROLS", style=CLOCK_THEME["border"]), name="controls_title", size=1),
        Layout(render_controls(), name="controls", size=6),
        _blank("rest"),
    )
    return screen
