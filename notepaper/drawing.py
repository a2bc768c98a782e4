"""Whole-page layouts: ruled lines, dot grids and cursive guides."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterator

from notepaper.canvas import PdfCanvas, new_canvas
from notepaper.ladder import draw_ladder_line_group
from notepaper.lines import draw_line
from notepaper.options import Color, Options, Point

DOT_RADIUS = 0.15
DEFAULT_DIRECTORY = "pdf"


def _steps(start: float, stop: float, step: float) -> Iterator[float]:
    """Yield start, start+step, ... while the value is at most stop."""
    if step <= 0:
        raise ValueError("spacing must be positive")
    value = start
    while value <= stop:
        yield value
        value += step


def _suffix(options: Options) -> str:
    return "-center" if options.centermark else ""


def lines_filename(options: Options) -> str:
    """File name for a ruled-lines page."""
    return (
        f"lines-{options.paper_size}-{options.orientation}-"
        f"{options.spacing:02.3f}{_suffix(options)}.pdf"
    )


def dots_filename(options: Options) -> str:
    """File name for a dot-grid page."""
    return (
        f"dots-{options.paper_size}-{options.orientation}-"
        f"{options.spacing:f}{_suffix(options)}.pdf"
    )


def cursive_filename(options: Options) -> str:
    """File name for a cursive-grid page."""
    return (
        f"cursive-{options.paper_size}-{options.orientation}-"
        f"{options.cursive_units:f}-center.pdf"
    )


def draw_dot(canvas: PdfCanvas, center: Point, radius: float, width: float, color: Color) -> None:
    """Draw a single filled dot."""
    canvas.circle(center, radius, width, color)


def _save(canvas: PdfCanvas, directory: str | Path, name: str) -> Path:
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / name
    canvas.save(path)
    return path


def draw_lines(options: Options, directory: str | Path = DEFAULT_DIRECTORY) -> Path:
    """Render a ruled-lines page and return the path of the written file."""
    canvas = new_canvas(options)
    if options.ladder:
        draw_ladder_line_group(canvas, options)
    if options.centermark:
        left, right = options.page_margin_left, options.page_margin_right
        for y in _steps(
            options.page_margin_top + options.center_spacing,
            options.page_margin_bottom,
            options.spacing,
        ):
            draw_line(canvas, Point(left, y), Point(right, y), options.line_width, options.light_gray)
    return _save(canvas, directory, lines_filename(options))


def draw_dots(options: Options, directory: str | Path = DEFAULT_DIRECTORY) -> Path:
    """Render a dot-grid page and return the path of the written file."""
    canvas = new_canvas(options)
    s = options.spacing
    for y in _steps(options.page_margin_top, options.page_margin_bottom, s):
        for x in _steps(options.page_margin_left, options.page_margin_right, s):
            draw_dot(canvas, Point(x, y), DOT_RADIUS, options.line_width, options.dark_black)

    if options.centermark:
        shift = math.sin(options.angle * math.pi / 180) * s
        cs = options.center_spacing
        for y in _steps(options.page_margin_top + cs, options.page_margin_bottom, s):
            for x in _steps(options.page_margin_left + cs, options.page_margin_right, s):
                draw_dot(
                    canvas, Point(x + shift, y), DOT_RADIUS, options.line_width, options.light_gray
                )
    return _save(canvas, directory, dots_filename(options))


def cursive_grid(options: Options, directory: str | Path = DEFAULT_DIRECTORY) -> Path:
    """Render a cursive handwriting grid and return the path of the written file."""
    s = options.cursive_units
    if s <= 0:
        raise ValueError("cursive units must be positive")
    canvas = new_canvas(options)
    left, right, top = options.page_margin_left, options.page_margin_right, options.page_margin_top
    dark, light = options.dark_black, options.light_gray
    # (offset in units, line width, colour): ascender, t-d, x-height, base, descender
    rules = ((0, 0.5, dark), (1, 0.2, light), (2, 0.2, light), (3, 0.5, dark), (5, 0.5, dark))
    limit = options.page_height - options.margins

    pos = 0.0
    while True:
        for units, width, color in rules:
            y = top + pos + s * units
            draw_line(canvas, Point(left, y), Point(right, y), width, color)
        pos += s * 6
        if pos > limit:
            break
    return _save(canvas, directory, cursive_filename(options))