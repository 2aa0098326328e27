"""
Command-line interface.

Usage:
    python -m pixelpi                 # open the GUI
    python -m pixelpi 10 50 500       # headless report for each radius
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from pixelpi.logging_config import setup_logging
from pixelpi.model.estimation import InvalidRadiusError, PiEstimate, estimate_pi, validate_radius

logger = logging.getLogger(__name__)


def _radius(text: str) -> int:
    try:
        return validate_radius(text)
    except InvalidRadiusError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixelpi",
        description="Approximate pi by counting the pixels of a rasterized circle.",
    )
    parser.add_argument("radii", nargs="*", type=_radius, metavar="RADIUS",
                        help="Circle radius in pixels. Without any, the GUI is opened.")
    parser.add_argument("--gui", action="store_true", help="Open the GUI even when radii are given.")
    parser.add_argument("--log-level", default="warning", help="Logging level (default: warning).")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    return parser


def format_report(estimate: PiEstimate) -> str:
    lines = [f"Radius: {estimate.radius} px"]
    for label, value in estimate.as_rows():
        text = f"{value:d}" if isinstance(value, int) else f"{value:.6f}"
        lines.append(f"  {label + ':':<24}{text:>16}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(level=args.log_level, log_file=args.log_file)
    except ValueError as e:
        parser.error(str(e))

    if args.gui or not args.radii:
        # Qt is only needed for the GUI
        from pixelpi.app.main import main as gui_main
        return gui_main()

    reports = []
    for radius in args.radii:
        reports.append(format_report(estimate_pi(radius)))
    print("\n\n".join(reports))
    return 0


if __name__ == "__main__":
    sys.exit(main())
