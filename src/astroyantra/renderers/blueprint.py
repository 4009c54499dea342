"""Scaled 2D gnomon schematic with dimension annotations.

Draws the gnomon cross-section as a right triangle (vertical edge on the
left, base along the bottom, hypotenuse as the dial edge) into any
VectorScene. Labels are rounded to two decimals; the record is not touched.
"""

import logging
import math

from astroyantra.compute import NotBuildableError
from astroyantra.models import DimensionRecord, MisraDimensions, ReferenceDimensions
from astroyantra.renderers.scene import StrokeStyle, TextStyle, VectorScene

logger = logging.getLogger(__name__)

DEFAULT_PADDING = 40.0

GNOMON_STYLE = StrokeStyle(color="#3498db", width=2.0, fill="rgba(52,152,219,0.1)")
DIMENSION_STYLE = StrokeStyle(color="#7f8c8d", width=1.0)
LABEL_STYLE = TextStyle(color="#ecf0f1", font_size=12.0, font_family="Poppins")

_DIM_OFFSET = 10.0  # Dimension line distance from the gnomon edge
_ARC_RADIUS = 20.0


def _gnomon_of(dimensions: DimensionRecord) -> ReferenceDimensions:
    if isinstance(dimensions, MisraDimensions):
        return dimensions.sundial
    return dimensions


def render_blueprint(
    dimensions: DimensionRecord,
    scene: VectorScene,
    width: float,
    height: float,
    padding: float = DEFAULT_PADDING,
) -> float:
    """Clear scene and draw the gnomon schematic scaled to fit width × height.

    The scale is uniform: whichever of base or height fits worse decides it.
    A Misra record draws its embedded sundial gnomon.

    Args:
        dimensions: Computed dimension record.
        scene: Target drawing surface.
        width: Surface width in pixels.
        height: Surface height in pixels.
        padding: Margin kept free on every side.

    Returns:
        The pixels-per-metre scale used.

    Raises:
        NotBuildableError: Base or height is non-finite; scene is left untouched.
        ValueError: width or height leaves no room inside the padding.
    """
    gnomon = _gnomon_of(dimensions)
    base_m = gnomon.base_length_m
    height_m = gnomon.gnomon_height_m
    if not (math.isfinite(base_m) and math.isfinite(height_m)):
        raise NotBuildableError(
            f"Cannot draw a gnomon at latitude {gnomon.angle_deg}: infinite base length"
        )

    area_w = width - padding * 2
    area_h = height - padding * 2
    if area_w <= 0 or area_h <= 0:
        raise ValueError(
            f"Surface {width}x{height} is too small for padding {padding}"
        )
    scale = min(area_w / base_m, area_h / height_m)
    scaled_base = base_m * scale
    scaled_height = height_m * scale

    left = padding
    bottom = padding + area_h
    bottom_left = (left, bottom)
    bottom_right = (left + scaled_base, bottom)
    top_left = (left, bottom - scaled_height)

    scene.clear()
    scene.add_polygon([bottom_left, bottom_right, top_left], GNOMON_STYLE)

    # Height: vertical dimension line + rotated label to the left
    scene.add_line(
        (left - _DIM_OFFSET, top_left[1]),
        (left - _DIM_OFFSET, bottom),
        DIMENSION_STYLE,
    )
    scene.add_label(
        (left - 15, top_left[1] + scaled_height / 2),
        f"{height_m:.2f}m",
        TextStyle(
            color=LABEL_STYLE.color,
            font_size=LABEL_STYLE.font_size,
            font_family=LABEL_STYLE.font_family,
            anchor="middle",
            rotation=-90.0,
        ),
    )

    # Base: horizontal dimension line + label below
    scene.add_line(
        (left, bottom + _DIM_OFFSET),
        (bottom_right[0], bottom + _DIM_OFFSET),
        DIMENSION_STYLE,
    )
    scene.add_label(
        (left + scaled_base / 2, bottom + 25),
        f"{base_m:.2f}m",
        TextStyle(
            color=LABEL_STYLE.color,
            font_size=LABEL_STYLE.font_size,
            font_family=LABEL_STYLE.font_family,
            anchor="middle",
        ),
    )

    # Incline angle: quarter arc at the top-left vertex, from +x round to +y (down)
    scene.add_arc(top_left, _ARC_RADIUS, 0.0, 90.0, DIMENSION_STYLE)
    scene.add_label(
        (top_left[0] + 25, top_left[1] + 30),
        f"{gnomon.angle_deg:.2f}°",
        LABEL_STYLE,
    )

    scene.present()
    logger.debug("Blueprint drawn at %.3f px/m", scale)
    return scale
