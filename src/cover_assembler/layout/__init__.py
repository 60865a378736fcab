"""Text layout for absolutely positioned cover page fields."""

from .sanitize import sanitize_text
from .text_layout import (
    PositionedLine,
    WidthFunction,
    WordPosition,
    WrapResult,
    break_lines,
    layout_text,
    wrap_and_justify,
)

__all__ = [
    "PositionedLine",
    "WidthFunction",
    "WordPosition",
    "WrapResult",
    "break_lines",
    "layout_text",
    "sanitize_text",
    "wrap_and_justify",
]
