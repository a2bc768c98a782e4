"""Printable notebook pages (lines, dots, cursive and ladder guides) as PDF."""

__version__ = "0.1.0"
__all__ = ["options", "canvas", "lines", "ladder", "drawing", "cli"]