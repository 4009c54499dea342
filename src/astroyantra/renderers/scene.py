"""VectorScene interface shared by every blueprint backend.

Coordinates are pixels with the origin at the top-left and y growing
downwards. Angles are degrees measured clockwise from +x (screen convention),
so 90° points straight down.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

import numpy as np

Point = tuple[float, float]


@dataclass(frozen=True)
class StrokeStyle:
    color: str = "#7f8c8d"
    width: float = 1.0
    fill: str | None = None  # CSS colour, e.g. "rgba(52,152,219,0.1)"


@dataclass(frozen=True)
class TextStyle:
    color: str = "#ecf0f1"
    font_size: float = 12.0
    font_family: str = "Poppins"
    anchor: str = "start"  # "start" | "middle"
    rotation: float = 0.0  # Degrees, negative = counter-clockwise on screen


class VectorScene(Protocol):
    """Immediate-mode drawing surface."""

    def clear(self) -> None: ...

    def add_polygon(self, points: list[Point], style: StrokeStyle) -> None: ...

    def add_line(self, start: Point, end: Point, style: StrokeStyle) -> None: ...

    def add_arc(
        self,
        center: Point,
        radius: float,
        start_deg: float,
        end_deg: float,
        style: StrokeStyle,
    ) -> None: ...

    def add_label(self, position: Point, text: str, style: TextStyle) -> None: ...

    def present(self) -> None: ...


def arc_points(
    center: Point, radius: float, start_deg: float, end_deg: float, steps: int = 24
) -> list[Point]:
    """Sample an arc as a polyline, for backends without a native arc primitive."""
    cx, cy = center
    angles = np.radians(np.linspace(start_deg, end_deg, steps + 1))
    xs = cx + radius * np.cos(angles)
    ys = cy + radius * np.sin(angles)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


@dataclass
class RecordedPrimitive:
    kind: str  # "polygon" | "line" | "arc" | "label"
    points: tuple[Point, ...]
    style: StrokeStyle | TextStyle
    text: str = ""
    radius: float = 0.0
    start_deg: float = 0.0
    end_deg: float = 0.0


@dataclass
class RecordingScene:
    """Keeps primitives in a list. Used by tests and as a no-op surface."""

    primitives: list[RecordedPrimitive] = field(default_factory=list)
    present_count: int = 0
    clear_count: int = 0

    def clear(self) -> None:
        self.primitives.clear()
        self.clear_count += 1

    def add_polygon(self, points: list[Point], style: StrokeStyle) -> None:
        self.primitives.append(RecordedPrimitive("polygon", tuple(points), style))

    def add_line(self, start: Point, end: Point, style: StrokeStyle) -> None:
        self.primitives.append(RecordedPrimitive("line", (start, end), style))

    def add_arc(
        self,
        center: Point,
        radius: float,
        start_deg: float,
        end_deg: float,
        style: StrokeStyle,
    ) -> None:
        self.primitives.append(
            RecordedPrimitive(
                "arc",
                (center,),
                style,
                radius=radius,
                start_deg=start_deg,
                end_deg=end_deg,
            )
        )

    def add_label(self, position: Point, text: str, style: TextStyle) -> None:
        self.primitives.append(RecordedPrimitive("label", (position,), style, text=text))

    def present(self) -> None:
        self.present_count += 1

    def of_kind(self, kind: str) -> list[RecordedPrimitive]:
        return [p for p in self.primitives if p.kind == kind]
