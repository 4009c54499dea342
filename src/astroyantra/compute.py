"""Dimension computation layer — latitude validation and gnomon trigonometry."""

import logging
import math

from astroyantra.models import (
    MISRA_SUNDIAL_HEIGHT_M,
    DimensionRecord,
    GeneratedResult,
    GenerationSession,
    InstrumentKind,
    MisraDimensions,
    ReferenceDimensions,
)

logger = logging.getLogger(__name__)

SAMRAT_GNOMON_HEIGHT_M = 2.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0


class AstroYantraError(Exception):
    """Base class for domain errors."""


class InvalidInputError(AstroYantraError):
    """Latitude text is empty, non-numeric, or out of range."""


class NothingGeneratedError(AstroYantraError):
    """Export requested before any successful generation."""


class UnsupportedInstrumentError(AstroYantraError):
    """Instrument outside InstrumentKind. Never offered by the UI."""


class NotBuildableError(AstroYantraError):
    """Geometry is non-finite (latitude 0) and cannot be drawn to scale."""


def parse_latitude(raw: str) -> float:
    """Trim and parse a latitude field.

    Args:
        raw: Text field content.

    Returns:
        Latitude in decimal degrees, within [-90, 90].

    Raises:
        InvalidInputError: Empty, non-numeric, non-finite, or out of range.
    """
    text = raw.strip()
    if not text:
        raise InvalidInputError("Latitude is empty.")
    try:
        latitude = float(text)
    except ValueError:
        raise InvalidInputError(f"Latitude is not a number: {text!r}") from None
    if not math.isfinite(latitude):
        raise InvalidInputError(f"Latitude is not a number: {text!r}")
    if not MIN_LATITUDE <= latitude <= MAX_LATITUDE:
        raise InvalidInputError(f"Latitude out of range [-90, 90]: {latitude}")
    return latitude


def compute_reference_dimensions(
    latitude: float, gnomon_height: float
) -> ReferenceDimensions:
    """Derive base length and dial radius for a gnomon of the given height.

    At latitude 0 the gnomon lies flat and base/radius are infinite.
    A latitude so close to 0 that the division overflows is treated as 0,
    so an infinite base always comes with a zero angle.
    Near ±90, tan() is huge but finite, so base is a tiny positive number.

    Args:
        latitude: Decimal degrees; sign is carried into angle_deg.
        gnomon_height: Vertical gnomon height in metres.

    Returns:
        Unrounded ReferenceDimensions.
    """
    flat = ReferenceDimensions(
        angle_deg=0.0,
        gnomon_height_m=gnomon_height,
        base_length_m=math.inf,
        dial_radius_m=math.inf,
    )
    angle_rad = math.radians(latitude)
    if angle_rad == 0:
        return flat
    base = abs(gnomon_height / math.tan(angle_rad))
    radius = abs(gnomon_height / math.sin(angle_rad))
    if not (math.isfinite(base) and math.isfinite(radius)):
        logger.debug("Latitude %r overflows the base length; treated as 0", latitude)
        return flat
    return ReferenceDimensions(
        angle_deg=latitude,
        gnomon_height_m=gnomon_height,
        base_length_m=base,
        dial_radius_m=radius,
    )


def compute_dimensions(instrument: InstrumentKind, latitude: float) -> DimensionRecord:
    """Compute the dimension record for an instrument at a latitude.

    Raises:
        UnsupportedInstrumentError: instrument is not an InstrumentKind member.
    """
    if instrument is InstrumentKind.SAMRAT:
        return compute_reference_dimensions(latitude, SAMRAT_GNOMON_HEIGHT_M)
    if instrument is InstrumentKind.MISRA:
        return MisraDimensions(
            sundial=compute_reference_dimensions(latitude, MISRA_SUNDIAL_HEIGHT_M)
        )
    raise UnsupportedInstrumentError(f"Unsupported instrument: {instrument!r}")


def generate(
    session: GenerationSession, instrument: InstrumentKind, raw_latitude: str
) -> GeneratedResult:
    """Top-level entry point: validate, compute, and store in the session.

    Args:
        session: Owned session slot; replaced only on success.
        instrument: Selected instrument.
        raw_latitude: Latitude text field content.

    Returns:
        The stored GeneratedResult.

    Raises:
        InvalidInputError: Latitude rejected; session left unchanged.
    """
    try:
        latitude = parse_latitude(raw_latitude)
    except InvalidInputError as e:
        logger.warning("Rejected latitude input: %s", e)
        raise
    result = GeneratedResult(
        instrument=instrument,
        dimensions=compute_dimensions(instrument, latitude),
    )
    session.store(result)
    logger.info(
        "Generated %s dimensions for latitude %.4f", instrument.value, latitude
    )
    return result
