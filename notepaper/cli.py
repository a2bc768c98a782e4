"""Command-line entry point that renders one notebook page to a PDF file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence

from notepaper.drawing import DEFAULT_DIRECTORY, cursive_grid, draw_dots, draw_lines
from notepaper.options import Options, make_options

_STYLES: dict[int, Callable[[Options, Path], Path]] = {
    0: draw_lines,
    1: draw_dots,
    2: cursive_grid,
}


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the page generator."""
    parser = argparse.ArgumentParser(
        prog="notepaper",
        description="Generate printable ruled, dotted or cursive notebook pages.",
        formatter_class=argparse.RawTextHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-style",
        "--style",
        dest="style",
        type=int,
        default=0,
        help="page style\n  0 - lines\n  1 - dots\n  2 - cursive grid",
    )
    parser.add_argument(
        "-sp",
        "--sp",
        dest="spacing",
        type=float,
        default=7.0,
        help="spacing between dots or lines in mm",
    )
    parser.add_argument(
        "-c",
        "--c",
        dest="centermark",
        action="store_true",
        help="draw center dot or line",
    )
    parser.add_argument(
        "-o",
        "--o",
        dest="orientation",
        default="L",
        help="paper orientation. L for landscape, P for portrait",
    )
    parser.add_argument(
        "-ps",
        "--ps",
        dest="paper_size",
        default="Letter",
        help="paper size. Letter, A4, etc",
    )
    parser.add_argument(
        "-u",
        "--u",
        dest="cursive_units",
        type=float,
        default=5.0,
        help="units for cursive grid, overrides spacing",
    )
    parser.add_argument(
        "-a",
        "--a",
        dest="angle",
        type=float,
        default=0.0,
        help="angle in degrees offset of center mark",
    )
    parser.add_argument(
        "-l",
        "--l",
        dest="ladder",
        action="store_true",
        help="for blackletter 2/4/2/4",
    )
    parser.add_argument(
        "-dark",
        "--dark",
        dest="dark",
        action="store_true",
        help="dark lines",
    )
    parser.add_argument(
        "--dir",
        dest="directory",
        default=DEFAULT_DIRECTORY,
        help="directory the PDF file is written to",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, render the chosen page and return an exit status."""
    args = build_parser().parse_args(argv)

    try:
        options = make_options(
            spacing=args.spacing,
            centermark=args.centermark,
            orientation=args.orientation,
            paper_size=args.paper_size,
            cursive_units=args.cursive_units,
            angle=args.angle,
            ladder=args.ladder,
            dark=args.dark,
        )
    except ValueError as exc:
        print(exc)
        return 1

    print(options)

    render = _STYLES.get(args.style)
    if render is None:
        print("Invalid style")
        return 1

    try:
        render(options, Path(args.directory))
    except ValueError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())