"""Field definitions for field-based cover page templates.

A field-based template is a stored single-page PDF plus a map of field id to
TemplateField. Each field places one metadata value at absolute coordinates.

Coordinates are top-down: ``y`` is measured from the top edge of the page.
The renderer flips them into the PDF's bottom-left origin.
"""

from typing import Literal

from pydantic import BaseModel, Field


class TemplateField(BaseModel):
    """Absolute placement and styling of one metadata value.

    Attributes:
        id: Field identifier, matching a key of the value map
        x: Left edge of the field box, in points
        y: Baseline distance from the top of the page, in points
        width: Width of the field box, in points
        font_size: Font size in points
        font_name: Font family ("Times", "Helvetica", "Courier")
        bold: Use the bold variant
        italic: Use the italic variant
        justified: Justify wrapped lines to the field width
        max_lines: Maximum number of lines drawn
        align: Horizontal alignment of single-line text
        color: RGB color, components in 0..1
    """

    id: str
    x: float
    y: float
    width: float = Field(gt=0)
    font_size: float = Field(gt=0, alias="fontSize")
    font_name: str | None = Field(default=None, alias="fontName")
    bold: bool = False
    italic: bool = False
    justified: bool = False
    max_lines: int | None = Field(default=None, alias="maxLines")
    align: Literal["left", "center", "right"] = "left"
    color: tuple[float, float, float] = (0.0, 0.0, 0.0)

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def is_single_line(self) -> bool:
        """True when the value is drawn once, without wrapping."""
        return (self.max_lines is None or self.max_lines <= 1) and not self.justified
