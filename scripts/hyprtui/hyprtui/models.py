"""Shared records passed between collectors, layout, panels and event handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.right and self.y <= y < self.bottom

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class LayoutResult:
    columns: int
    cell_width: int
    text_width: int
    rows: int


@dataclass(frozen=True)
class CellRegion:
    index: int
    rect: Rect

    def contains(self, x: int, y: int) -> bool:
        return self.rect.contains(x, y)


@dataclass(frozen=True)
class Window:
    id: str = ""
    window_class: str = "UnknownClass"
    title: str = "No Title"
    workspace: str = "?"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "class": self.window_class,
            "title": self.title,
            "workspace": self.workspace,
        }


@dataclass
class WindowListing:
    windows: list[Window] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class ActionResult(Enum):
    OK = "ok"
    FAILED = "failed"


@dataclass(frozen=True)
class ActionOutcome:
    result: ActionResult
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.result is ActionResult.OK


@dataclass(frozen=True)
class StatusMessage:
    text: str
    level: str = "info"
    expires_at: float = 0.0

    def active(self, now: float) -> bool:
        return now < self.expires_at


@dataclass
class SwitcherState:
    windows: list[Window] = field(default_factory=list)
    selected_index: int = 0
    running: bool = True
    status: StatusMessage | None = None

    @property
    def selected(self) -> Window | None:
        if 0 <= self.selected_index < len(self.windows):
            return self.windows[self.selected_index]
        return None


@dataclass
class ClockState:
    now: datetime
    selected_date: date
    running: bool = True
