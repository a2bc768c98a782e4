import re

from notepaper.canvas import PdfCanvas
from notepaper.lines import draw_line
from notepaper.options import DARK_BLACK, Point


def _content(canvas: PdfCanvas) -> str:
    match = re.search(rb"stream\n(.*?)\nendstream", canvas.to_bytes(), re.S)
    assert match is not None
    return match.group(1).decode("ascii")


def test_draw_line_adds_one_shape():
    canvas = PdfCanvas(100, 100)
    draw_line(canvas, Point(0, 0), Point(10, 0), 0.2, DARK_BLACK)
    assert len(canvas) == 1


def test_draw_line_matches_canvas_line():
    direct = PdfCanvas(80, 80)
    direct.line(Point(3, 4), Point(30, 4), 0.2, DARK_BLACK)
    via = PdfCanvas(80, 80)
    draw_line(via, Point(3, 4), Point(30, 4), 0.2, DARK_BLACK)
    assert via.to_bytes() == direct.to_bytes()


def test_draw_line_endpoints_in_points():
    canvas = PdfCanvas(25.4, 25.4)
    draw_line(canvas, Point(25.4, 0), Point(0, 25.4), 0.2, DARK_BLACK)
    content = _content(canvas)
    assert "72 72 m" in content
    assert "0 0 l" in content


def test_multiple_lines_accumulate():
    canvas = PdfCanvas(50, 50)
    for y in (5, 10, 15):
        draw_line(canvas, Point(0, y), Point(50, y), 0.2, DARK_BLACK)
    assert len(canvas) == 3
    assert _content(canvas).count(" m\n") == 3