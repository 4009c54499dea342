"""Plotly 2D interactive blueprint backend.

Shapes are placed in data coordinates equal to the scene's pixel
coordinates; the y axis is reversed so y grows downwards like the scene.
Supports wheel zoom and drag panning to inspect the schematic.
"""

import plotly.graph_objects as go

from astroyantra.renderers.scene import Point, StrokeStyle, TextStyle, arc_points

_BG = "#1c2833"

_ANCHORS = {"start": "left", "middle": "center"}


def _path(points: list[Point], closed: bool) -> str:
    head, *rest = points
    d = f"M {head[0]:.2f},{head[1]:.2f}"
    d += "".join(f" L {x:.2f},{y:.2f}" for x, y in rest)
    return d + " Z" if closed else d


class PlotlyScene:
    """VectorScene that collects Plotly shapes/annotations into `figure`."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self._shapes: list[dict] = []
        self._annotations: list[dict] = []
        self.figure: go.Figure | None = None

    def clear(self) -> None:
        self._shapes = []
        self._annotations = []

    def _add_path(self, points: list[Point], style: StrokeStyle, closed: bool) -> None:
        self._shapes.append(
            dict(
                type="path",
                xref="x",
                yref="y",
                path=_path(points, closed),
                line=dict(color=style.color, width=style.width),
                fillcolor=style.fill or "rgba(0,0,0,0)",
            )
        )

    def add_polygon(self, points: list[Point], style: StrokeStyle) -> None:
        self._add_path(points, style, closed=True)

    def add_line(self, start: Point, end: Point, style: StrokeStyle) -> None:
        self._shapes.append(
            dict(
                type="line",
                xref="x",
                yref="y",
                x0=start[0],
                y0=start[1],
                x1=end[0],
                y1=end[1],
                line=dict(color=style.color, width=style.width),
            )
        )

    def add_arc(
        self,
        center: Point,
        radius: float,
        start_deg: float,
        end_deg: float,
        style: StrokeStyle,
    ) -> None:
        # Plotly paths have no arc command; sample it
        self._add_path(arc_points(center, radius, start_deg, end_deg), style, closed=False)

    def add_label(self, position: Point, text: str, style: TextStyle) -> None:
        self._annotations.append(
            dict(
                x=position[0],
                y=position[1],
                xref="x",
                yref="y",
                text=text,
                showarrow=False,
                textangle=style.rotation,
                xanchor=_ANCHORS.get(style.anchor, "left"),
                # Rotated labels centre on their anchor like the SVG/PNG output
                yanchor="middle" if style.rotation else "bottom",
                font=dict(
                    color=style.color, size=style.font_size, family=style.font_family
                ),
            )
        )

    def present(self) -> None:
        fig = go.Figure()
        fig.update_layout(
            paper_bgcolor=_BG,
            plot_bgcolor=_BG,
            showlegend=False,
            margin=dict(l=0, r=0, t=0, b=0),
            width=self.width,
            height=self.height,
            dragmode="pan",
            xaxis=dict(
                visible=False,
                range=[0.0, self.width],
                autorange=False,
                fixedrange=False,
            ),
            # Reversed: y=0 at the top, matching scene coordinates
            yaxis=dict(
                visible=False,
                range=[self.height, 0.0],
                autorange=False,
                fixedrange=False,
                scaleanchor="x",
            ),
            shapes=list(self._shapes),
            annotations=list(self._annotations),
        )
        self.figure = fig
