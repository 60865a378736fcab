"""Greedy line wrapping and justification driven by glyph widths.

Text is laid out without a layout engine: words are measured with the font's
width function and packed greedily into lines no wider than ``max_width``.
A second pass computes the x offset of every word, stretching the gaps of
interior lines when justification is requested.

All offsets are relative to the left edge of the text box; line offsets are
relative to the first baseline and grow downwards (negative in PDF space).
"""

from dataclasses import dataclass, field
from typing import Callable

# measure(text, font_size) -> width in points
WidthFunction = Callable[[str, float], float]


@dataclass
class WordPosition:
    """A word and its horizontal offset within its line."""

    line_index: int
    word: str
    x: float


@dataclass
class WrapResult:
    """Wrapped lines and the position of every word.

    Attributes:
        lines: Line texts, words joined by single spaces
        word_positions: Word offsets, ordered by line then by word
    """

    lines: list[str] = field(default_factory=list)
    word_positions: list[WordPosition] = field(default_factory=list)

    def words_on_line(self, line_index: int) -> list[WordPosition]:
        return [wp for wp in self.word_positions if wp.line_index == line_index]


@dataclass
class PositionedLine:
    """A drawable line of text.

    Attributes:
        index: Line number, starting at 0
        text: Full line text
        y_offset: Baseline offset from the first line (0, -lh, -2*lh, ...)
        words: Word offsets; stretched gaps when the line is justified
        justified: True when word offsets differ from natural spacing
    """

    index: int
    text: str
    y_offset: float
    words: list[WordPosition]
    justified: bool = False


def break_lines(
    text: str,
    measure: WidthFunction,
    font_size: float,
    max_width: float,
) -> list[list[str]]:
    """Greedily pack words into lines no wider than ``max_width``.

    A word wider than ``max_width`` is never split; it occupies a line of
    its own.
    """
    space_width = measure(" ", font_size)
    lines: list[list[str]] = []
    current: list[str] = []
    current_width = 0.0

    for word in text.split():
        word_width = measure(word, font_size)
        gap = space_width if current else 0.0
        if current and current_width + gap + word_width > max_width:
            lines.append(current)
            current = [word]
            current_width = word_width
        else:
            current.append(word)
            current_width += gap + word_width

    if current:
        lines.append(current)
    return lines


def wrap_and_justify(
    text: str,
    measure: WidthFunction,
    font_size: float,
    max_width: float,
    justify: bool = False,
) -> WrapResult:
    """Wrap text to ``max_width`` and compute word offsets.

    The last line and single-word lines keep natural spacing. When
    ``justify`` is set every other line spreads its slack evenly over its
    gaps, so the last word ends exactly at ``max_width``.

    Args:
        text: Plain text; runs of whitespace separate words
        measure: Width function of the font, ``measure(text, font_size)``
        font_size: Font size in points
        max_width: Width of the text box in points
        justify: Stretch interior lines to the full width

    Returns:
        WrapResult with the line texts and per-word offsets
    """
    result = WrapResult()
    if not text or not text.strip():
        return result

    word_lines = break_lines(text, measure, font_size, max_width)
    space_width = measure(" ", font_size)
    last_index = len(word_lines) - 1

    for line_index, words in enumerate(word_lines):
        result.lines.append(" ".join(words))
        widths = [measure(word, font_size) for word in words]

        if not justify or line_index == last_index or len(words) == 1:
            gap = space_width
        else:
            gap = (max_width - sum(widths)) / (len(words) - 1)

        x = 0.0
        for word, width in zip(words, widths):
            result.word_positions.append(WordPosition(line_index, word, x))
            x += width + gap

    return result


def layout_text(
    text: str,
    measure: WidthFunction,
    font_size: float,
    max_width: float,
    line_height: float,
    justify: bool = False,
    max_lines: int | None = None,
) -> list[PositionedLine]:
    """Lay out text into drawable lines, truncated to ``max_lines``.

    Lines past the cap are computed but not returned; truncation is silent.
    """
    if max_lines is not None and max_lines < 1:
        raise ValueError(f"max_lines must be at least 1, got {max_lines}")

    wrapped = wrap_and_justify(text, measure, font_size, max_width, justify)
    last_index = len(wrapped.lines) - 1
    visible = wrapped.lines if max_lines is None else wrapped.lines[:max_lines]

    positioned = []
    for index, line in enumerate(visible):
        words = wrapped.words_on_line(index)
        positioned.append(
            PositionedLine(
                index=index,
                text=line,
                y_offset=-index * line_height,
                words=words,
                justified=justify and index != last_index and len(words) > 1,
            )
        )
    return positioned
