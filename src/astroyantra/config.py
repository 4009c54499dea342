"""Environment-driven settings and logging setup."""

import logging
import os
from dataclasses import dataclass

from astroyantra.renderers.blueprint import DEFAULT_PADDING

_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Smallest drawing surface that leaves room inside the blueprint padding
MIN_CANVAS_PX = int(DEFAULT_PADDING * 2) + 1


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    canvas_width: int = 600
    canvas_height: int = 400
    nominatim_url: str = "https://nominatim.openstreetmap.org/search"
    user_agent: str = "AstroYantra/1.0"
    http_timeout: float = 10.0


def _env_number(name: str, default: float, cast: type) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _env_canvas(name: str, default: int) -> int:
    value = int(_env_number(name, default, int))
    if value < MIN_CANVAS_PX:
        raise ValueError(f"{name} must be at least {MIN_CANVAS_PX} px, got {value}")
    return value


def load_settings() -> Settings:
    """Read ASTROYANTRA_* variables. Call load_dotenv() first to pick up .env.

    Raises:
        ValueError: A numeric variable does not parse, or a canvas size is
            too small to draw into.
    """
    defaults = Settings()
    return Settings(
        log_level=os.environ.get("ASTROYANTRA_LOG_LEVEL", defaults.log_level).upper(),
        canvas_width=_env_canvas("ASTROYANTRA_CANVAS_WIDTH", defaults.canvas_width),
        canvas_height=_env_canvas("ASTROYANTRA_CANVAS_HEIGHT", defaults.canvas_height),
        nominatim_url=os.environ.get("ASTROYANTRA_NOMINATIM_URL", defaults.nominatim_url),
        user_agent=os.environ.get("ASTROYANTRA_USER_AGENT", defaults.user_agent),
        http_timeout=float(
            _env_number("ASTROYANTRA_HTTP_TIMEOUT", defaults.http_timeout, float)
        ),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=_LOG_FORMAT)
