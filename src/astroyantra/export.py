"""Plain-text export of the most recent generation."""

import logging
import math
from dataclasses import dataclass
from pathlib import Path

from astroyantra.compute import NothingGeneratedError
from astroyantra.models import (
    GeneratedResult,
    GenerationSession,
    InstrumentKind,
    MisraDimensions,
    ReferenceDimensions,
)

logger = logging.getLogger(__name__)

EXPORT_MIME = "text/plain;charset=utf-8"

_FILENAMES: dict[InstrumentKind, str] = {
    InstrumentKind.SAMRAT: "samrat-yantra-dimensions.txt",
    InstrumentKind.MISRA: "misra-yantra-principles.txt",
}


@dataclass(frozen=True)
class ExportDocument:
    """A ready-to-download text file."""

    filename: str
    content: str
    mime: str = EXPORT_MIME

    @property
    def data(self) -> bytes:
        return self.content.encode("utf-8")


def format_dimension(value: float, infinite_text: str = "Infinite") -> str:
    """Two decimals, or infinite_text for a non-finite value."""
    return f"{value:.2f}" if math.isfinite(value) else infinite_text


def _samrat_text(dims: ReferenceDimensions) -> str:
    return (
        "AstroYantra.ai - Generated Dimensions\n"
        "------------------------------------\n"
        "Instrument: Samrat Yantra\n"
        f"Location Latitude: {dims.angle_deg:.4f}°\n"
        "\n"
        "Dimensions:\n"
        f"- Angle of Incline: {format_dimension(dims.angle_deg)}°\n"
        f"- Gnomon Height: {format_dimension(dims.gnomon_height_m)}m\n"
        f"- Base Length: {format_dimension(dims.base_length_m)}m\n"
        f"- Dial Radius: {format_dimension(dims.dial_radius_m)}m\n"
    )


def _misra_text(dims: MisraDimensions) -> str:
    return (
        "AstroYantra.ai - Construction Principles\n"
        "----------------------------------------\n"
        "Instrument: Misra Yantra\n"
        f"Location Latitude: {dims.angle_deg:.4f}°\n"
        "\n"
        "Principles for Reconstruction:\n"
        f"- Inclination Angle: {format_dimension(dims.angle_deg)}° (For the sundial component)\n"
        f"- Structure Height: {format_dimension(dims.structure_height_m)}m (Fixed architectural dimension)\n"
        f"- Structure Width: {format_dimension(dims.structure_width_m)}m (Fixed architectural dimension)\n"
        f"- Orientation: {dims.orientation_note}\n"
        f"- Markings: {dims.markings_note}\n"
    )


def render_export_text(result: GeneratedResult) -> str:
    """Render a GeneratedResult as the export document body."""
    dims = result.dimensions
    if isinstance(dims, MisraDimensions):
        return _misra_text(dims)
    return _samrat_text(dims)


def build_export(session: GenerationSession) -> ExportDocument:
    """Build the download document from the session's current result.

    The session is only read; repeated exports return the same document.

    Raises:
        NothingGeneratedError: The session is empty.
    """
    result = session.current
    if result is None:
        raise NothingGeneratedError(
            "Please generate dimensions first before downloading."
        )
    return ExportDocument(
        filename=_FILENAMES[result.instrument],
        content=render_export_text(result),
    )


def write_export(session: GenerationSession, directory: Path) -> Path:
    """Write the export document into directory and return its path."""
    document = build_export(session)
    directory.mkdir(parents=True, exist_ok=True)
    output_path = directory / document.filename
    output_path.write_bytes(document.data)
    logger.info("Wrote %s", output_path)
    return output_path
