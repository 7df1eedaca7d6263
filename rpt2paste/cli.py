#!/usr/bin/env python3
"""
rpt2paste CLI

Turn a KiCad placement report into a solder paste dispensing program.

Usage:
    rpt2paste board.rpt > board.gcode
    rpt2paste -p board.rpt > board.ps
    rpt2paste --svg board.rpt > board.svg
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import DispenseConfig
from .errors import Rpt2PasteError
from .output import get_printer
from .plan import plan_from_report
from .svg import SVGGenerator

logger = logging.getLogger("rpt2paste")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rpt2paste",
        description="Create solder paste dispensing G-code from a KiCad .rpt file",
    )
    parser.add_argument("rpt_file", type=Path, help="Placement report (.rpt)")

    fmt = parser.add_mutually_exclusive_group()
    fmt.add_argument(
        "-p", "--postscript", dest="format", action="store_const", const="postscript",
        help="Output as PostScript",
    )
    fmt.add_argument(
        "--svg", dest="format", action="store_const", const="svg",
        help="Output as SVG",
    )
    parser.set_defaults(format="gcode")

    parser.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Write to this file instead of stdout",
    )
    parser.add_argument(
        "--scale", type=float, default=None,
        help="Report unit to mm factor (default: 25.4, reports in inches)",
    )
    parser.add_argument(
        "--no-optimize", dest="optimize", action="store_false",
        help="Dispense in report order",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def render(plan, fmt: str, config: DispenseConfig) -> str:
    """Render a plan in the requested output format."""
    if fmt == "svg":
        return SVGGenerator(plan).generate()
    return get_printer(fmt, config=config).render(plan)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    config = DispenseConfig.from_env().with_overrides(
        scale=args.scale,
        optimize_route=args.optimize,
    )

    try:
        plan = plan_from_report(args.rpt_file, config)
    except FileNotFoundError:
        logger.error("Report not found: %s", args.rpt_file)
        return 1
    except Rpt2PasteError as e:
        logger.error("%s: %s", args.rpt_file, e)
        return 1

    content = render(plan, args.format, config)
    if args.output is not None:
        args.output.write_text(content)
    else:
        sys.stdout.write(content)

    logger.info("Dispensed %d pads.", len(plan))
    return 0


if __name__ == "__main__":
    sys.exit(main())
