"""Window card grid renderer.

Card geometry comes from ``hyprtui.layout.visible_regions``; the rich Layout
built here only replays those sizes so pointer hit tests match what is drawn.
"""

from __future__ import annotations

from rich import box
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from hyprtui.formatting import CLOSE_HINT, app_icon, workspace_label
from hyprtui.layout import CELL_HEIGHT, compute_layout, visible_regions, wrap_text
from hyprtui.models import CellRegion, Rect, Window
from hyprtui.panels import color

CLASS_LINES = 2
TITLE_LINES = 2


def card_text(window: Window, text_width: int, selected: bool) -> Text:
    text = Text(no_wrap=True, overflow="crop")
    text.append(f"{app_icon(window.window_class)} ", style=color("primary"))
    if selected:
        text.append(CLOSE_HINT, style=f"dim {color('error')}")

    class_style = f"bold {color('on_background') if selected else color('on_surface')}"
    for line in wrap_text(window.window_class, max(text_width - 2, 0), CLASS_LINES):
        text.append("\n")
        text.append(line, style=class_style)

    for line in wrap_text(window.title, text_width, TITLE_LINES):
        text.append("\n")
        text.append(line, style=color("on_surface"))

    text.append("\n")
    text.append(workspace_label(window.workspace), style=f"dim {color('accent')}")
    return text


def card(window: Window, text_width: int, selected: bool) -> Panel:
    if selected:
        background, border, border_box = color("surface_variant"), color("border_selected"), box.HEAVY
    else:
        background, border, border_box = color("surface"), color("border_normal"), box.SQUARE
    return Panel(
        card_text(window, text_width, selected),
        box=border_box,
        border_style=border,
        style=f"on {background}",
        padding=(0, 1),
        expand=True,
    )


def _rows(regions: list[CellRegion]) -> list[list[CellRegion]]:
    rows: list[list[CellRegion]] = []
    for region in regions:
        if rows and rows[-1][0].rect.y == region.rect.y:
            rows[-1].append(region)
        else:
            rows.append([region])
    return rows


def render(windows: list[Window], selected_index: int, area: Rect, cell_height: int = CELL_HEIGHT):
    if not windows:
        return Text("No windows", style=f"dim {color('on_surface')}", justify="center")

    layout_info = compute_layout(area.width, len(windows))
    regions = visible_regions(area, len(windows), cell_height)

    grid = Layout(name="grid")
    row_layouts = []
    for row_number, row in enumerate(_rows(regions)):
        row_layout = Layout(name=f"row{row_number}", size=row[0].rect.height)
        row_layout.split_row(
            *(
                Layout(
                    card(windows[region.index], layout_info.text_width, region.index == selected_index),
                    name=f"card{region.index}",
                    size=region.rect.width,
                )
                for region in row
            )
        )
        row_layouts.append(row_layout)

    if not row_layouts:
        return Text("")
    grid.split_column(*row_layouts)
    return grid
