"""Responsive grid layout, text wrapping and pointer hit testing.

Rendering and hit testing both go through ``visible_regions`` so the cards a
user sees and the cards a click lands on are computed by the same code.
"""

from __future__ import annotations

from hyprtui.models import CellRegion, LayoutResult, Rect

MIN_CELL_WIDTH = 25
CELL_HEIGHT = 10
CELL_CHROME = 4
TEXT_PADDING = 4
HEADER_HEIGHT = 3
STATUS_HEIGHT = 1


def compute_layout(width: int, count: int) -> LayoutResult:
    width = max(0, int(width))
    count = max(0, int(count))

    if count <= 3:
        columns = max(count, 1)
    elif width < 80:
        columns = 2
    elif width < 120:
        columns = 3
    else:
        columns = 4
    columns = min(columns, max(width // MIN_CELL_WIDTH, 1))

    cell_width = max(width // columns - CELL_CHROME, 0)
    text_width = max(cell_width - TEXT_PADDING, 0)
    rows = -(-count // columns)
    return LayoutResult(columns=columns, cell_width=cell_width, text_width=text_width, rows=rows)


def split_span(start: int, total: int, parts: int) -> list[tuple[int, int]]:
    """Split ``total`` cells into ``parts`` (offset, size) spans with no gaps."""
    parts = max(1, parts)
    edges = [start + (total * k) // parts for k in range(parts + 1)]
    return [(edges[k], edges[k + 1] - edges[k]) for k in range(parts)]


def grid_regions(area: Rect, count: int, cell_height: int = CELL_HEIGHT) -> list[CellRegion]:
    if count <= 0 or area.width <= 0 or cell_height <= 0:
        return []

    layout = compute_layout(area.width, count)
    spans = split_span(area.x, area.width, layout.columns)
    regions: list[CellRegion] = []
    for index in range(count):
        row, col = divmod(index, layout.columns)
        x, width = spans[col]
        rect = Rect(x=x, y=area.y + row * cell_height, width=width, height=cell_height)
        regions.append(CellRegion(index=index, rect=rect))
    return regions


def clip_rect(rect: Rect, bounds: Rect) -> Rect:
    left = max(rect.x, bounds.x)
    top = max(rect.y, bounds.y)
    right = min(rect.right, bounds.right)
    bottom = min(rect.bottom, bounds.bottom)
    return Rect(x=left, y=top, width=max(0, right - left), height=max(0, bottom - top))


def visible_regions(area: Rect, count: int, cell_height: int = CELL_HEIGHT) -> list[CellRegion]:
    regions: list[CellRegion] = []
    for region in grid_regions(area, count, cell_height):
        clipped = clip_rect(region.rect, area)
        if clipped.is_empty():
            continue
        regions.append(CellRegion(index=region.index, rect=clipped))
    return regions


def hit_test(x: int, y: int, area: Rect, count: int, cell_height: int = CELL_HEIGHT) -> int | None:
    for region in visible_regions(area, count, cell_height):
        if region.contains(x, y):
            return region.index
    return None


def wrap_text(text: str, width: int, max_lines: int) -> list[str]:
    if width <= 0:
        return [""]

    lines: list[str] = []
    current = ""

    for word in text.split():
        if len(lines) >= max_lines:
            break

        if len(word) > width:
            if current:
                lines.append(current)
                current = ""
            remaining = word
            while remaining and len(lines) < max_lines:
                lines.append(remaining[:width])
                remaining = remaining[width:]
        elif len(current) + len(word) + 1 <= width:
            current = f"{current} {word}" if current else word
        else:
            if current:
                lines.append(current)
            current = word

    if current and len(lines) < max_lines:
        lines.append(current)

    return lines or [""]


def switcher_areas(viewport: Rect) -> tuple[Rect, Rect, Rect]:
    """Header, card grid and status line areas of the switcher screen."""
    header_height = min(HEADER_HEIGHT, viewport.height)
    status_height = min(STATUS_HEIGHT, max(0, viewport.height - header_height))
    body_height = max(0, viewport.height - header_height - status_height)

    header = Rect(viewport.x, viewport.y, viewport.width, header_height)
    body = Rect(viewport.x, header.bottom, viewport.width, body_height)
    status = Rect(viewport.x, body.bottom, viewport.width, status_height)
    return header, body, status


def centered_rect(width: int, height: int, area: Rect) -> Rect:
    actual_width = min(max(0, width), area.width)
    actual_height = min(max(0, height), area.height)
    return Rect(
        x=area.x + (area.width - actual_width) // 2,
        y=area.y + (area.height - actual_height) // 2,
        width=actual_width,
        height=actual_height,
    )
