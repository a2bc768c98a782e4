"""Page geometry and drawing options for ruled notebook pages."""

from __future__ import annotations

from dataclasses import dataclass, field

LR_MARGIN = 12.7
DEFAULT_LINE_WIDTH = 0.2

# (width, height) in millimetres for portrait orientation.
_PAPER_SIZES: dict[str, tuple[float, float]] = {
    "LETTER": (215.9, 279.4),
    "A4": (210.0, 297.0),
    "B5": (176.0, 250.0),
}


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour component {name}={value} outside 0..255")


DARK_BLACK = Color(0x00, 0x00, 0x00)
LIGHT_GRAY = Color(0xAA, 0xAA, 0xAA)


@dataclass(frozen=True)
class Point:
    """A position on the page in millimetres, origin at the top left."""

    x: float
    y: float


@dataclass(frozen=True, kw_only=True)
class Options:
    """Everything needed to lay out one page."""

    spacing: float
    centermark: bool
    center_spacing: float
    orientation: str
    paper_size: str
    page_width: float
    page_height: float
    margins: float
    cursive_units: float
    angle: float
    ladder: bool
    dark: bool
    line_width: float = DEFAULT_LINE_WIDTH
    lr_margin: float = LR_MARGIN
    dark_black: Color = DARK_BLACK
    light_gray: Color = field(default=LIGHT_GRAY)

    @property
    def page_margin_left(self) -> float:
        return self.margins

    @property
    def page_margin_right(self) -> float:
        return self.page_width - self.margins

    @property
    def page_margin_top(self) -> float:
        return self.margins

    @property
    def page_margin_bottom(self) -> float:
        return self.page_height - self.margins


def page_dimensions(paper_size: str, orientation: str) -> tuple[float, float, float]:
    """Return (width, height, margins) in mm for a paper size and orientation.

    The paper size is case-insensitive; the orientation must be "L" or "P".
    """
    if not paper_size:
        raise ValueError("Invalid paper size")
    size = paper_size.upper()
    try:
        short, long = _PAPER_SIZES[size]
    except KeyError:
        raise ValueError("Invalid paper size") from None

    if orientation == "L":
        width, height = long, short
        margins = LR_MARGIN / 2 if size == "LETTER" else LR_MARGIN
    elif orientation == "P":
        width, height = short, long
        margins = LR_MARGIN
    else:
        raise ValueError("Invalid paper orientation")
    return width, height, margins


def make_options(
    spacing: float = 7.0,
    centermark: bool = False,
    orientation: str = "L",
    paper_size: str = "Letter",
    cursive_units: float = 5.0,
    angle: float = 0.0,
    ladder: bool = False,
    dark: bool = False,
) -> Options:
    """Build a complete set of page options from user choices."""
    width, height, margins = page_dimensions(paper_size, orientation)
    return Options(
        spacing=spacing,
        centermark=centermark,
        center_spacing=spacing / 2.0 if centermark else 0.0,
        orientation=orientation,
        paper_size=paper_size.upper(),
        page_width=width,
        page_height=height,
        margins=margins,
        cursive_units=cursive_units,
        angle=angle,
        ladder=ladder,
        dark=dark,
        light_gray=DARK_BLACK if dark else LIGHT_GRAY,
    )