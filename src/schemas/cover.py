"""Cover generation schemas.

CoverTemplateData is the closed set of placeholders a cover template may
reference. Dumped by alias it becomes the data map handed to the template
engine, so template keys use the camelCase names (``seriesName``,
``abstractDisplay``, ...).
"""

from typing import Literal

from pydantic import BaseModel, Field

Display = Literal["block", "none"]
TemplateValue = str | list[str]


class CoverTemplateData(BaseModel):
    """Values substituted into a cover page template.

    The ``*_display`` switches are CSS display values synthesized from the
    presence of the corresponding optional field and the series include
    settings. They suppress presentation only; the markup element stays.
    """

    title: TemplateValue = ""
    authors: TemplateValue = ""
    abstract: TemplateValue = ""
    institution: TemplateValue = ""
    series_name: TemplateValue = Field(default="", alias="seriesName")
    date: TemplateValue = ""
    keywords: TemplateValue = ""
    jel: TemplateValue = ""
    header_text: TemplateValue = Field(default="", alias="headerText")
    affiliation: TemplateValue = ""

    abstract_display: Display = Field(default="none", alias="abstractDisplay")
    jel_display: Display = Field(default="none", alias="jelDisplay")
    keywords_display: Display = Field(default="none", alias="keywordsDisplay")
    institution_display: Display = Field(default="none", alias="institutionDisplay")
    series_name_display: Display = Field(default="none", alias="seriesNameDisplay")
    date_display: Display = Field(default="block", alias="dateDisplay")
    affiliation_display: Display = Field(default="none", alias="affiliationDisplay")

    page_width: float | None = Field(default=None, alias="pageWidth")
    page_height: float | None = Field(default=None, alias="pageHeight")

    model_config = {"populate_by_name": True, "extra": "forbid"}

    def to_template_map(self) -> dict:
        """Return the data map keyed by template placeholder names."""
        return self.model_dump(by_alias=True)


class AssembledDocument(BaseModel):
    """A manuscript with its cover page prepended.

    Attributes:
        filename: Output file name (``<stem>_with_cover.pdf``)
        content: Serialized PDF bytes
        page_count: Total page count (cover + manuscript pages)
        cover_page_count: Pages contributed by the cover (always 1)
    """

    filename: str
    content: bytes
    page_count: int
    cover_page_count: int = 1

    @property
    def manuscript_page_count(self) -> int:
        return self.page_count - self.cover_page_count
