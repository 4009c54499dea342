"""Data model definitions — explicit boundaries between input, compute, and render layers."""

import math
from dataclasses import dataclass
from enum import Enum


class InstrumentKind(Enum):
    """The two instruments the generator knows how to dimension."""

    SAMRAT = "samrat"
    MISRA = "misra"

    @property
    def display_name(self) -> str:
        return "Samrat Yantra" if self is InstrumentKind.SAMRAT else "Misra Yantra"


@dataclass(frozen=True)
class ReferenceDimensions:
    """Trigonometric gnomon dimensions for a single latitude and gnomon height.

    base_length_m and dial_radius_m are math.inf exactly when angle_deg == 0.
    """

    angle_deg: float  # Incline angle (= latitude, sign preserved)
    gnomon_height_m: float  # Vertical gnomon edge
    base_length_m: float  # Horizontal extent of the triangular cross-section
    dial_radius_m: float  # Radius of the angular markings

    @property
    def is_buildable(self) -> bool:
        return math.isfinite(self.base_length_m) and math.isfinite(self.dial_radius_m)


MISRA_SUNDIAL_HEIGHT_M = 0.5
MISRA_STRUCTURE_HEIGHT_M = 8.0
MISRA_STRUCTURE_WIDTH_M = 11.0
MISRA_ORIENTATION_NOTE = "Gnomon must point to True North."
MISRA_MARKINGS_NOTE = "Hour/declination lines on quadrants; altitude on meridian wall."


@dataclass(frozen=True)
class MisraDimensions:
    """Misra Yantra: a fixed-size structure with an embedded small sundial.

    The sundial gnomon (0.5 m) and the structure height (8.0 m) are distinct.
    """

    sundial: ReferenceDimensions
    structure_height_m: float = MISRA_STRUCTURE_HEIGHT_M
    structure_width_m: float = MISRA_STRUCTURE_WIDTH_M
    orientation_note: str = MISRA_ORIENTATION_NOTE
    markings_note: str = MISRA_MARKINGS_NOTE

    @property
    def angle_deg(self) -> float:
        return self.sundial.angle_deg

    @property
    def base_length_m(self) -> float:
        return self.sundial.base_length_m

    @property
    def dial_radius_m(self) -> float:
        return self.sundial.dial_radius_m

    @property
    def is_buildable(self) -> bool:
        return self.sundial.is_buildable


DimensionRecord = ReferenceDimensions | MisraDimensions


@dataclass(frozen=True)
class GeneratedResult:
    """One successful generation: what was asked for and what came out."""

    instrument: InstrumentKind
    dimensions: DimensionRecord


class GenerationSession:
    """Single-slot holder for the most recent GeneratedResult.

    Starts empty, replaced wholesale by store(), never cleared by export.
    One instance per app session; the Streamlit app keeps it in session_state.
    """

    def __init__(self) -> None:
        self._current: GeneratedResult | None = None

    @property
    def current(self) -> GeneratedResult | None:
        return self._current

    @property
    def is_empty(self) -> bool:
        return self._current is None

    def store(self, result: GeneratedResult) -> None:
        self._current = result
