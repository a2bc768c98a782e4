"""A minimal single-page PDF drawing surface measured in millimetres."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable, Sequence

from notepaper.options import Color, Options, Point

_PT_PER_MM = 72.0 / 25.4
# Control-point distance for approximating a quarter circle with a cubic Bezier.
_KAPPA = 4.0 * (math.sqrt(2.0) - 1.0) / 3.0


def _num(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _color_args(color: Color) -> str:
    return " ".join(_num(c / 255) for c in (color.r, color.g, color.b))


class PdfCanvas:
    """One PDF page; coordinates are in mm with the origin at the top left."""

    def __init__(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("page dimensions must be positive")
        self.width = width
        self.height = height
        self._shapes: list[str] = []

    def __len__(self) -> int:
        return len(self._shapes)

    def _xy(self, point: Point) -> str:
        return f"{_num(point.x * _PT_PER_MM)} {_num((self.height - point.y) * _PT_PER_MM)}"

    def _style(self, width: float, stroke: Color | None, fill: Color | None) -> list[str]:
        ops = [f"{_num(width * _PT_PER_MM)} w"]
        if stroke is not None:
            ops.append(f"{_color_args(stroke)} RG")
        if fill is not None:
            ops.append(f"{_color_args(fill)} rg")
        return ops

    def _add(self, ops: Iterable[str]) -> None:
        self._shapes.append("\n".join(["q", *ops, "Q"]))

    def line(self, a: Point, b: Point, width: float, color: Color) -> None:
        """Stroke a straight line from a to b."""
        self._add(
            [*self._style(width, color, None), f"{self._xy(a)} m", f"{self._xy(b)} l", "h S"]
        )

    def circle(self, center: Point, radius: float, width: float, color: Color) -> None:
        """Draw a filled and stroked circle."""
        if radius < 0:
            raise ValueError("radius must not be negative")
        k = radius * _KAPPA
        cx, cy = center.x, center.y
        start = Point(cx + radius, cy)
        segments = [
            (Point(cx + radius, cy + k), Point(cx + k, cy + radius), Point(cx, cy + radius)),
            (Point(cx - k, cy + radius), Point(cx - radius, cy + k), Point(cx - radius, cy)),
            (Point(cx - radius, cy - k), Point(cx - k, cy - radius), Point(cx, cy - radius)),
            (Point(cx + k, cy - radius), Point(cx + radius, cy - k), start),
        ]
        ops = [*self._style(width, color, color), f"{self._xy(start)} m"]
        ops.extend(" ".join(self._xy(p) for p in seg) + " c" for seg in segments)
        ops.append("h B")
        self._add(ops)

    def polygon(
        self,
        points: Sequence[Point],
        width: float,
        stroke: Color | None,
        fill: Color | None,
    ) -> None:
        """Draw a closed polygon, stroked and/or filled."""
        if len(points) < 2:
            raise ValueError("a polygon needs at least two points")
        if stroke is None and fill is None:
            raise ValueError("a polygon needs a stroke or a fill colour")
        first, *rest = points
        ops = [*self._style(width, stroke, fill), f"{self._xy(first)} m"]
        ops.extend(f"{self._xy(p)} l" for p in rest)
        paint = "B" if stroke is not None and fill is not None else ("S" if stroke else "f")
        ops.append(f"h {paint}")
        self._add(ops)

    def to_bytes(self) -> bytes:
        """Render the page as a complete PDF document."""
        content = "\n".join(self._shapes).encode("ascii")
        media = f"[0 0 {_num(self.width * _PT_PER_MM)} {_num(self.height * _PT_PER_MM)}]"
        objects = [
            b"<< /Type /Catalog /Pages 2 0 R >>",
            b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
            (
                f"<< /Type /Page /Parent 2 0 R /MediaBox {media} "
                "/Contents 4 0 R /Resources << >> >>"
            ).encode("ascii"),
            f"<< /Length {len(content)} >>\nstream\n".encode("ascii")
            + content
            + b"\nendstream",
        ]
        out = bytearray(b"%PDF-1.4\n")
        offsets = []
        for number, body in enumerate(objects, start=1):
            offsets.append(len(out))
            out += f"{number} 0 obj\n".encode("ascii") + body + b"\nendobj\n"
        xref_at = len(out)
        out += f"xref\n0 {len(objects) + 1}\n".encode("ascii")
        out += b"0000000000 65535 f \n"
        for offset in offsets:
            out += f"{offset:010d} 00000 n \n".encode("ascii")
        out += (
            f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
            f"startxref\n{xref_at}\n%%EOF\n"
        ).encode("ascii")
        return bytes(out)

    def save(self, path: str | Path) -> None:
        """Write the PDF document to path."""
        Path(path).write_bytes(self.to_bytes())


def new_canvas(options: Options) -> PdfCanvas:
    """Create a blank page sized for the given options."""
    return PdfCanvas(options.page_width, options.page_height)