"""CLI entry point for dimension generation and blueprint export.

    astroyantra-blueprint --instrument samrat --latitude 28.6139 --svg --png
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from astroyantra.compute import InvalidInputError, generate
from astroyantra.config import MIN_CANVAS_PX, configure_logging, load_settings
from astroyantra.export import write_export
from astroyantra.listing import dimension_rows
from astroyantra.models import GenerationSession, InstrumentKind
from astroyantra.renderers.blueprint import render_blueprint
from astroyantra.renderers.svg_2d import SvgScene

logger = logging.getLogger(__name__)

INVALID_LATITUDE_MESSAGE = (
    "Please enter a valid latitude (from -90 to 90) to generate dimensions."
)


def _canvas_px(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < MIN_CANVAS_PX:
        raise argparse.ArgumentTypeError(f"must be at least {MIN_CANVAS_PX} px")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Compute Samrat / Misra Yantra dimensions for a latitude."
    )
    ap.add_argument(
        "--instrument",
        choices=[k.value for k in InstrumentKind],
        default=InstrumentKind.SAMRAT.value,
    )
    ap.add_argument("--latitude", required=True, help="Decimal degrees, -90..90")
    ap.add_argument("--outdir", type=Path, default=Path("results"))
    ap.add_argument("--svg", action="store_true", help="Also write an SVG blueprint")
    ap.add_argument("--png", action="store_true", help="Also write a PNG blueprint")
    ap.add_argument("--width", type=_canvas_px, default=None, help="Blueprint width (px)")
    ap.add_argument("--height", type=_canvas_px, default=None, help="Blueprint height (px)")
    return ap


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    settings = load_settings()
    configure_logging(settings)
    args = build_parser().parse_args(argv)
    logger.debug("Arguments: %s", args)
    width = args.width or settings.canvas_width
    height = args.height or settings.canvas_height

    session = GenerationSession()
    instrument = InstrumentKind(args.instrument)
    try:
        result = generate(session, instrument, args.latitude)
    except InvalidInputError:
        print(INVALID_LATITUDE_MESSAGE, file=sys.stderr)
        return 2

    heading, rows = dimension_rows(result)
    print(heading)
    for row in rows:
        print(f"  {row.label}: {row.value}")

    path = write_export(session, args.outdir)
    print(f"Saved: {path}")

    if not (args.svg or args.png):
        return 0
    if not result.dimensions.is_buildable:
        print("Blueprint skipped: latitude 0 gives an infinite base (not buildable).")
        return 0

    stem = path.stem
    if args.svg:
        scene = SvgScene(width, height)
        render_blueprint(result.dimensions, scene, width, height)
        svg_path = args.outdir / f"{stem}.svg"
        svg_path.write_text(scene.markup, encoding="utf-8")
        print(f"Saved: {svg_path}")
    if args.png:
        # Imported lazily: matplotlib is only needed for PNG output
        from astroyantra.renderers.static import save_static_blueprint

        png_path = save_static_blueprint(
            result.dimensions, args.outdir / f"{stem}.png", width, height
        )
        print(f"Saved: {png_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
