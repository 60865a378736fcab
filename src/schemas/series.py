"""Series-level cover page settings.

A Series is a named collection of working papers sharing an institution and
cover page presentation. Its settings are copied by value into every cover
generation call and never mutated by the pipeline.
"""

from pydantic import BaseModel, Field

from .page_size import PageSize


class CoverPageSettings(BaseModel):
    """Cover page presentation settings owned by a series.

    Attributes:
        html_template: Custom markup template (takes precedence over presets)
        default_template: Name of a preset template ("academic", "minimal", ...)
        include_abstract: Show the abstract block
        include_jel: Show the JEL classification line
        include_keywords: Show the keywords line
        include_institution: Show the institution line
        include_series_name: Show the series name line
        include_date: Show the date line
        header_text: Header line (defaults to "Working Paper" when unset)
        base_pdf_id: Identifier of a stored base PDF for field-based templates
        default_page_size: Page size used when detection fails
    """

    html_template: str | None = Field(default=None, alias="htmlTemplate")
    default_template: str | None = Field(default=None, alias="defaultTemplate")
    include_abstract: bool = Field(default=True, alias="includeAbstract")
    include_jel: bool = Field(default=True, alias="includeJEL")
    include_keywords: bool = Field(default=True, alias="includeKeywords")
    include_institution: bool = Field(default=True, alias="includeInstitution")
    include_series_name: bool = Field(default=True, alias="includeSeriesName")
    include_date: bool = Field(default=True, alias="includeDate")
    header_text: str | None = Field(default=None, alias="headerText")
    base_pdf_id: str | None = Field(default=None, alias="basePdfId")
    default_page_size: PageSize | None = Field(default=None, alias="defaultPageSize")

    model_config = {"populate_by_name": True, "frozen": True}


class SeriesSettings(BaseModel):
    """The parts of a series the cover pipeline reads.

    Attributes:
        name: Series name
        institution: Publishing institution
        cover_page_settings: Cover page presentation settings
    """

    name: str = ""
    institution: str = ""
    cover_page_settings: CoverPageSettings = Field(
        default_factory=CoverPageSettings, alias="coverPageSettings"
    )

    model_config = {"populate_by_name": True, "frozen": True, "extra": "allow"}
