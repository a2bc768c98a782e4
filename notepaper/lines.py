"""Drawing of single ruled lines."""

from __future__ import annotations

import logging

from notepaper.canvas import PdfCanvas
from notepaper.options import Color, Point

log = logging.getLogger(__name__)


def draw_line(canvas: PdfCanvas, a: Point, b: Point, width: float, color: Color) -> None:
    """Stroke a line from a to b on the canvas."""
    log.debug("line %s -> %s", a, b)
    canvas.line(a, b, width, color)