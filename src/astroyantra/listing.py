"""Dimension listing rows shown next to the schematic."""

from typing import NamedTuple

from astroyantra.export import format_dimension
from astroyantra.models import GeneratedResult, MisraDimensions

NOT_BUILDABLE = "Infinite (not buildable)"


class DimensionRow(NamedTuple):
    label: str
    value: str
    tooltip: str = ""


def _fmt(value: float) -> str:
    return format_dimension(value, infinite_text=NOT_BUILDABLE)


def dimension_rows(result: GeneratedResult) -> tuple[str, list[DimensionRow]]:
    """Return (heading, rows) for the dimension list of a generation."""
    dims = result.dimensions
    if isinstance(dims, MisraDimensions):
        return "3. Misra Yantra: Construction Principles", [
            DimensionRow(
                "Inclination Angle",
                f"{_fmt(dims.angle_deg)}°",
                "The main gnomon must be aligned with Earth's axis at your location.",
            ),
            DimensionRow(
                "Structure Height",
                f"{_fmt(dims.structure_height_m)}m (Fixed)",
                "Overall fixed height of the central structure.",
            ),
            DimensionRow(
                "Structure Width",
                f"{_fmt(dims.structure_width_m)}m (Fixed)",
                "Overall fixed width of the central structure.",
            ),
            DimensionRow(
                "Orientation",
                dims.orientation_note,
                "The instrument must be perfectly aligned with the cardinal directions.",
            ),
            DimensionRow(
                "Markings",
                dims.markings_note,
                "Scales must be accurately inscribed for measurements.",
            ),
        ]
    return "3. Generated Dimensions", [
        DimensionRow("Angle of Incline", f"{_fmt(dims.angle_deg)}°"),
        DimensionRow("Gnomon Height", f"{_fmt(dims.gnomon_height_m)}m"),
        DimensionRow("Base Length", f"{_fmt(dims.base_length_m)}m"),
        DimensionRow("Dial Radius", f"{_fmt(dims.dial_radius_m)}m"),
    ]
