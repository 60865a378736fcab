"""Physical page geometry schema.

Dimensions are PDF points (1/72 inch). The ``format`` name is derived from
the dimensions by the page size detector and is never authoritative: a
PageSize without a format is a custom size.
"""

from typing import Literal

from pydantic import BaseModel, Field


class PageSize(BaseModel):
    """Width and height of a page, optionally classified as a standard size.

    Attributes:
        width: Page width in points
        height: Page height in points
        format: Standard size name ("A4", "Letter", ...) or None for custom sizes
    """

    width: float = Field(gt=0)
    height: float = Field(gt=0)
    format: str | None = None

    model_config = {"frozen": True}

    @property
    def is_portrait(self) -> bool:
        return self.height > self.width

    @property
    def orientation(self) -> Literal["portrait", "landscape"]:
        return "portrait" if self.is_portrait else "landscape"

    @property
    def display_name(self) -> str:
        """Human-readable name such as "A4 (Portrait)".

        Examples:
            >>> PageSize(width=500, height=500).display_name
            'Custom 500 × 500 points (Landscape)'
        """
        orientation = self.orientation.capitalize()
        if self.format:
            return f"{self.format} ({orientation})"
        return (
            f"Custom {round(self.width)} × {round(self.height)} points "
            f"({orientation})"
        )
