"""Matplotlib static PNG blueprint backend."""

import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.colors import to_rgba  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402
from matplotlib.patches import Arc, Polygon  # noqa: E402

from astroyantra.models import DimensionRecord  # noqa: E402
from astroyantra.renderers.blueprint import render_blueprint  # noqa: E402
from astroyantra.renderers.scene import Point, StrokeStyle, TextStyle  # noqa: E402

logger = logging.getLogger(__name__)

_BG = "#1c2833"
_DPI = 100


def _css_color(color: str | None) -> tuple[float, float, float, float] | str:
    """Accept "#rrggbb" or "rgba(r,g,b,a)" with 0-255 channels."""
    if color is None:
        return "none"
    if color.startswith("rgba("):
        r, g, b, a = (float(c) for c in color[5:-1].split(","))
        return (r / 255, g / 255, b / 255, a)
    return to_rgba(color)


class MatplotlibScene:
    """VectorScene drawing into a matplotlib Figure sized width × height pixels."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.fig, self.ax = plt.subplots(figsize=(width / _DPI, height / _DPI), dpi=_DPI)
        self._setup_axes()

    def _setup_axes(self) -> None:
        self.fig.patch.set_facecolor(_BG)
        self.fig.subplots_adjust(left=0, right=1, top=1, bottom=0)
        self.ax.set_facecolor(_BG)
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(self.height, 0)  # y grows downwards
        self.ax.set_aspect("equal")
        self.ax.axis("off")

    def clear(self) -> None:
        self.ax.clear()
        self._setup_axes()

    def add_polygon(self, points: list[Point], style: StrokeStyle) -> None:
        self.ax.add_patch(
            Polygon(
                points,
                closed=True,
                facecolor=_css_color(style.fill),
                edgecolor=_css_color(style.color),
                linewidth=style.width,
            )
        )

    def add_line(self, start: Point, end: Point, style: StrokeStyle) -> None:
        self.ax.plot(
            [start[0], end[0]],
            [start[1], end[1]],
            color=_css_color(style.color),
            linewidth=style.width,
        )

    def add_arc(
        self,
        center: Point,
        radius: float,
        start_deg: float,
        end_deg: float,
        style: StrokeStyle,
    ) -> None:
        # Inverted y axis flips the angle sense, so screen angles map directly
        self.ax.add_patch(
            Arc(
                center,
                radius * 2,
                radius * 2,
                theta1=start_deg,
                theta2=end_deg,
                edgecolor=_css_color(style.color),
                linewidth=style.width,
            )
        )

    def add_label(self, position: Point, text: str, style: TextStyle) -> None:
        self.ax.text(
            position[0],
            position[1],
            text,
            color=_css_color(style.color),
            fontsize=style.font_size * 72 / _DPI,  # px → pt
            family=[style.font_family, "sans-serif"],
            ha="center" if style.anchor == "middle" else "left",
            va="baseline",
            rotation=-style.rotation,  # matplotlib rotates counter-clockwise
            rotation_mode="anchor",
        )

    def present(self) -> None:
        self.fig.canvas.draw_idle()


def render_static_blueprint(
    dimensions: DimensionRecord, width: int = 600, height: int = 400
) -> Figure:
    """Render a blueprint as a static matplotlib Figure.

    Raises:
        NotBuildableError: The record has a non-finite base.
    """
    scene = MatplotlibScene(width, height)
    try:
        render_blueprint(dimensions, scene, width, height)
    except Exception:
        plt.close(scene.fig)
        raise
    return scene.fig


def save_static_blueprint(
    dimensions: DimensionRecord, output_path: Path, width: int = 600, height: int = 400
) -> Path:
    """Save a blueprint as a PNG file.

    Args:
        dimensions: Computed dimension record.
        output_path: Destination path.
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Path to the saved file.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_blueprint(dimensions, width, height)
    fig.savefig(output_path, facecolor=_BG, dpi=_DPI)
    plt.close(fig)
    logger.info("Saved blueprint PNG to %s", output_path)
    return output_path
