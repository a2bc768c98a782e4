"""Blackletter ladder pages: ruled line groups with checkered pen-width marks."""

from __future__ import annotations

from notepaper.canvas import PdfCanvas
from notepaper.lines import draw_line
from notepaper.options import Color, Options, Point

LADDER_COLOR = Color(0x44, 0x44, 0x44)
LADDER_LINE_WIDTH = 0.1


def draw_ladder(canvas: PdfCanvas, options: Options, x: float, y: float) -> None:
    """Draw two filled squares, one spacing wide, stepping diagonally from (x, y)."""
    s = options.spacing
    for left, top in ((x, y), (x + s, y + s)):
        square = [
            Point(left, top),
            Point(left + s, top),
            Point(left + s, top + s),
            Point(left, top + s),
        ]
        canvas.polygon(square, LADDER_LINE_WIDTH, LADDER_COLOR, LADDER_COLOR)


def draw_ladder_lines(canvas: PdfCanvas, options: Options, y: float) -> None:
    """Draw one 2/4/2 group of ruled lines with ladders, starting at height y."""
    s = options.spacing
    left, right = options.page_margin_left, options.page_margin_right
    dark, light = options.dark_black, options.light_gray

    def rule(at: float, color: Color) -> None:
        draw_line(canvas, Point(left, at), Point(right, at), options.line_width, color)

    # ascender band
    rule(y, dark)
    rule(y + s, light)
    draw_ladder(canvas, options, left, y)
    y += s * 2

    # x-height band
    rule(y, dark)
    rule(y + s, light)
    rule(y + s * 2, light)
    draw_ladder(canvas, options, left, y)
    rule(y + s, light)
    y += s * 2

    rule(y + s, light)
    draw_ladder(canvas, options, left, y)
    y += s * 2

    # descender band
    rule(y, dark)
    rule(y + s, light)
    draw_ladder(canvas, options, left, y)
    y += s * 2

    rule(y, dark)


def draw_ladder_line_group(canvas: PdfCanvas, options: Options) -> None:
    """Fill the page with ladder line groups while whole groups still fit."""
    s = options.spacing
    if s <= 0:
        raise ValueError("spacing must be positive")
    bottom = options.page_margin_bottom
    y = options.page_margin_top
    while y <= bottom:
        if y + s * 8 > bottom:
            return
        draw_ladder_lines(canvas, options, y)
        y += s * 12