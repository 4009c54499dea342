"""SVG blueprint backend.

Produces a standalone SVG document for the blueprint download and CLI output.

Coordinate system: pixel viewBox "0 0 width height", y grows downwards,
which is already what the blueprint renderer emits; no flip needed.
"""

from __future__ import annotations

import math
from html import escape

from astroyantra.renderers.scene import Point, StrokeStyle, TextStyle

_BG = "#1c2833"


def _fill_attrs(style: StrokeStyle) -> str:
    return f'fill="{style.fill}"' if style.fill else 'fill="none"'


class SvgScene:
    """VectorScene that serialises primitives to SVG elements.

    present() assembles the current elements into `markup`; until then the
    previous markup stays valid.
    """

    def __init__(self, width: float, height: float, background: str = _BG) -> None:
        self.width = width
        self.height = height
        self.background = background
        self._elements: list[str] = []
        self.markup: str = ""

    def clear(self) -> None:
        self._elements = []

    def add_polygon(self, points: list[Point], style: StrokeStyle) -> None:
        pts = " ".join(f"{x:.2f},{y:.2f}" for x, y in points)
        self._elements.append(
            f'<polygon points="{pts}" {_fill_attrs(style)}'
            f' stroke="{style.color}" stroke-width="{style.width}"/>'
        )

    def add_line(self, start: Point, end: Point, style: StrokeStyle) -> None:
        (x0, y0), (x1, y1) = start, end
        self._elements.append(
            f'<line x1="{x0:.2f}" y1="{y0:.2f}" x2="{x1:.2f}" y2="{y1:.2f}"'
            f' stroke="{style.color}" stroke-width="{style.width}"/>'
        )

    def add_arc(
        self,
        center: Point,
        radius: float,
        start_deg: float,
        end_deg: float,
        style: StrokeStyle,
    ) -> None:
        cx, cy = center
        a0, a1 = math.radians(start_deg), math.radians(end_deg)
        x0, y0 = cx + radius * math.cos(a0), cy + radius * math.sin(a0)
        x1, y1 = cx + radius * math.cos(a1), cy + radius * math.sin(a1)
        large = 1 if abs(end_deg - start_deg) > 180 else 0
        # Screen y is down, so increasing angle sweeps clockwise (sweep-flag 1)
        sweep = 1 if end_deg >= start_deg else 0
        self._elements.append(
            f'<path d="M {x0:.2f},{y0:.2f} A {radius:.2f},{radius:.2f} 0 {large} {sweep}'
            f' {x1:.2f},{y1:.2f}" {_fill_attrs(style)}'
            f' stroke="{style.color}" stroke-width="{style.width}"/>'
        )

    def add_label(self, position: Point, text: str, style: TextStyle) -> None:
        x, y = position
        rotate = (
            f' transform="rotate({style.rotation:.1f} {x:.2f} {y:.2f})"'
            if style.rotation
            else ""
        )
        self._elements.append(
            f'<text x="{x:.2f}" y="{y:.2f}" fill="{style.color}"'
            f' font-size="{style.font_size}" font-family="{escape(style.font_family)}"'
            f' text-anchor="{style.anchor}"{rotate}>{escape(text)}</text>'
        )

    def present(self) -> None:
        body = "\n  ".join(self._elements)
        self.markup = (
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.width:g}"'
            f' height="{self.height:g}" viewBox="0 0 {self.width:g} {self.height:g}">\n'
            f'  <rect x="0" y="0" width="{self.width:g}" height="{self.height:g}"'
            f' fill="{self.background}"/>\n'
            f"  {body}\n"
            f"</svg>"
        )
