import pytest

from notepaper.canvas import new_canvas
from notepaper.drawing import (
    DOT_RADIUS,
    cursive_filename,
    cursive_grid,
    dots_filename,
    draw_dot,
    draw_dots,
    draw_lines,
    lines_filename,
)
from notepaper.options import Color, Point, make_options


class Recorder:
    def __init__(self):
        self.circles = []

    def circle(self, center, radius, width, color):
        self.circles.append((center, radius, width, color))


def test_lines_filename_default():
    assert lines_filename(make_options()) == "lines-LETTER-L-7.000.pdf"


def test_lines_filename_centermark_suffix():
    name = lines_filename(make_options(centermark=True))
    assert name.startswith("lines-LETTER-L-")
    assert name.endswith("-center.pdf")


def test_dots_filename():
    assert dots_filename(make_options(spacing=5.5, paper_size="a4", orientation="P")) == (
        "dots-A4-P-5.500000.pdf"
    )


def test_cursive_filename_uses_units_not_spacing():
    name = cursive_filename(make_options(spacing=9.0, cursive_units=5.0))
    assert name == "cursive-LETTER-L-5.000000-center.pdf"


def test_draw_dot_passes_geometry_through():
    rec = Recorder()
    color = Color(1, 2, 3)
    draw_dot(rec, Point(4.0, 5.0), 0.5, 0.2, color)
    assert rec.circles == [(Point(4.0, 5.0), 0.5, 0.2, color)]


def test_draw_dot_with_default_radius():
    rec = Recorder()
    color = Color(0, 0, 0)
    draw_dot(rec, Point(1.0, 2.0), DOT_RADIUS, 0.2, color)
    assert rec.circles[0][1] == 0.15


def test_plain_lines_page_is_blank(tmp_path):
    options = make_options()
    path = draw_lines(options, tmp_path)
    assert path == tmp_path / lines_filename(options)
    assert path.read_bytes() == new_canvas(options).to_bytes()


def test_centermark_lines_page_has_content(tmp_path):
    options = make_options(centermark=True)
    data = draw_lines(options, tmp_path).read_bytes()
    assert data.startswith(b"%PDF-1.4")
    assert len(data) > len(new_canvas(options).to_bytes())


def test_ladder_lines_page_has_content(tmp_path):
    options = make_options(ladder=True, spacing=3.0)
    data = draw_lines(options, tmp_path).read_bytes()
    assert len(data) > len(new_canvas(options).to_bytes())


def test_draw_dots_creates_directory(tmp_path):
    target = tmp_path / "nested" / "out"
    options = make_options(spacing=10.0)
    path = draw_dots(options, target)
    assert path.parent == target
    assert path.read_bytes().startswith(b"%PDF-1.4")


def test_centermark_adds_dots(tmp_path):
    plain = draw_dots(make_options(spacing=10.0), tmp_path / "a").read_bytes()
    marked = draw_dots(make_options(spacing=10.0, centermark=True), tmp_path / "b").read_bytes()
    assert len(marked) > len(plain)


def test_angle_shifts_center_dots(tmp_path):
    straight = draw_dots(make_options(spacing=10.0, centermark=True), tmp_path / "a")
    slanted = draw_dots(make_options(spacing=10.0, centermark=True, angle=10.0), tmp_path / "b")
    assert straight.name == slanted.name
    assert straight.read_bytes() != slanted.read_bytes()


def test_draw_dots_rejects_zero_spacing(tmp_path):
    with pytest.raises(ValueError):
        draw_dots(make_options(spacing=0.0), tmp_path)


def test_cursive_grid_smaller_units_draw_more(tmp_path):
    coarse = cursive_grid(make_options(cursive_units=5.0), tmp_path / "a").read_bytes()
    fine = cursive_grid(make_options(cursive_units=3.0), tmp_path / "b").read_bytes()
    assert len(fine) > len(coarse)


def test_cursive_grid_file_name(tmp_path):
    options = make_options(cursive_units=4.0)
    path = cursive_grid(options, tmp_path)
    assert path == tmp_path / cursive_filename(options)
    assert path.read_bytes().startswith(b"%PDF-1.4")


def test_cursive_grid_rejects_non_positive_units(tmp_path):
    with pytest.raises(ValueError):
        cursive_grid(make_options(cursive_units=-1.0), tmp_path)