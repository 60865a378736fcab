"""Cover page pipeline for one paper submission.

Wires the stages together: detect the manuscript's page size, fill the cover
template, render it, and merge it in front of the manuscript. Every stage
works on request-scoped buffers only, so pipelines for concurrent submissions
share nothing but the read-only template registry.
"""

import logging
from datetime import date
from pathlib import Path

from schemas.cover import AssembledDocument, CoverTemplateData
from schemas.page_size import PageSize
from schemas.paper import PaperMetadata
from schemas.series import SeriesSettings
from schemas.template_field import TemplateField

from ..assemblers.document_assembler import (
    DocumentAssembler,
    ManuscriptSource,
    count_pages,
    read_manuscript,
    with_cover_filename,
)
from ..detectors.page_size_detector import DEFAULT_PAGE_SIZE, PageSizeDetector
from ..exceptions import TemplateValidationError
from ..renderers.field_renderer import FieldRenderer
from ..renderers.html_renderer import MarkupRenderer
from ..templates.engine import TemplateEngine
from ..templates.registry import TemplateRegistry

logger = logging.getLogger(__name__)

DEFAULT_HEADER_TEXT = "Working Paper"


def _display(present: bool) -> str:
    return "block" if present else "none"


def build_template_data(
    paper: PaperMetadata,
    series: SeriesSettings,
    page_size: PageSize,
    today: date | None = None,
) -> CoverTemplateData:
    """Build the placeholder values for a paper's cover page.

    Each optional block is displayed only when its value is present and the
    series includes it. Affiliation is never displayed.

    Args:
        paper: Paper metadata
        series: Series settings
        page_size: Size of the cover page
        today: Date printed on the cover (default: today)

    Returns:
        CoverTemplateData ready for template population
    """
    settings = series.cover_page_settings
    keywords = paper.keyword_list
    jel = paper.jel_list

    return CoverTemplateData(
        title=paper.title,
        authors=paper.authors,
        abstract=paper.abstract,
        institution=series.institution,
        affiliation="",
        date=(today or date.today()).isoformat(),
        series_name=series.name,
        keywords=", ".join(keywords),
        jel=", ".join(jel),
        header_text=settings.header_text or DEFAULT_HEADER_TEXT,
        abstract_display=_display(bool(paper.abstract) and settings.include_abstract),
        jel_display=_display(bool(jel) and settings.include_jel),
        keywords_display=_display(bool(keywords) and settings.include_keywords),
        institution_display=_display(
            bool(series.institution) and settings.include_institution
        ),
        series_name_display=_display(bool(series.name) and settings.include_series_name),
        date_display=_display(settings.include_date),
        affiliation_display="none",
        page_width=page_size.width,
        page_height=page_size.height,
    )


def build_field_values(
    paper: PaperMetadata,
    series: SeriesSettings,
    today: date | None = None,
) -> dict[str, str | list[str]]:
    """Build the value map for a field-based cover page.

    Values excluded by the series settings are left out, so their fields
    are skipped by the renderer.
    """
    data = build_template_data(paper, series, DEFAULT_PAGE_SIZE, today=today)
    values: dict[str, str | list[str]] = {
        "title": paper.title,
        "authors": paper.author_list,
    }
    optional = {
        "abstract": (data.abstract, data.abstract_display),
        "institution": (data.institution, data.institution_display),
        "seriesName": (data.series_name, data.series_name_display),
        "date": (data.date, data.date_display),
        "keywords": (paper.keyword_list, data.keywords_display),
        "jel": (paper.jel_list, data.jel_display),
    }
    for key, (value, display) in optional.items():
        if display == "block":
            values[key] = value
    return values


class CoverPipeline:
    """Run a manuscript through detection, cover rendering and merging.

    Attributes:
        registry: Preset template registry
        engine: Template validation and population
        renderer: Markup-to-PDF renderer
        field_renderer: Field-positioned renderer for base-PDF templates
        assembler: Cover and manuscript merger
        detector: Page size detector
    """

    def __init__(
        self,
        registry: TemplateRegistry | None = None,
        engine: TemplateEngine | None = None,
        renderer: MarkupRenderer | None = None,
        field_renderer: FieldRenderer | None = None,
        assembler: DocumentAssembler | None = None,
        detector: PageSizeDetector | None = None,
    ):
        self.registry = registry or TemplateRegistry.load()
        self.engine = engine or TemplateEngine()
        self.renderer = renderer or MarkupRenderer()
        self.field_renderer = field_renderer or FieldRenderer()
        self.assembler = assembler or DocumentAssembler()
        self.detector = detector or PageSizeDetector()

    def create_cover_page(
        self,
        markup: str,
        paper: PaperMetadata,
        series: SeriesSettings,
        page_size: PageSize,
    ) -> bytes:
        """Validate, populate and render a markup cover page.

        Raises:
            TemplateValidationError: If the template is structurally invalid
            RenderError: If rendering fails
        """
        result = self.engine.validate(markup)
        if not result.valid:
            raise TemplateValidationError(
                f"Invalid cover template: {'; '.join(result.errors)}",
                errors=result.errors,
            )

        data = build_template_data(paper, series, page_size)
        populated = self.engine.populate(markup, data)
        logger.debug(f"Populated cover template for {paper.title!r}")
        return self.renderer.render(populated, page_size)

    def create_field_cover_page(
        self,
        base_pdf: bytes | str,
        fields: dict[str, TemplateField],
        paper: PaperMetadata,
        series: SeriesSettings,
    ) -> bytes:
        """Render a cover page by drawing fields onto a base PDF."""
        values = build_field_values(paper, series)
        return self.field_renderer.render(base_pdf, fields, values)

    def detect_page_size(
        self,
        manuscript: bytes | Path,
        series: SeriesSettings,
        content_type: str | None = None,
    ) -> PageSize:
        """Detect the manuscript's page size, falling back to the series default."""
        default = series.cover_page_settings.default_page_size or DEFAULT_PAGE_SIZE
        page_size = self.detector.detect(manuscript, content_type=content_type, default=default)
        logger.info(f"Manuscript page size: {page_size.display_name}")
        return page_size

    def process(
        self,
        manuscript: bytes | Path,
        filename: str,
        paper: PaperMetadata,
        series: SeriesSettings,
        page_size: PageSize | None = None,
        template: str | None = None,
        content_type: str | None = None,
    ) -> AssembledDocument:
        """Produce the manuscript with a markup cover page prepended.

        Args:
            manuscript: Manuscript PDF bytes or path
            filename: Original manuscript file name
            paper: Paper metadata
            series: Series settings
            page_size: Cover page size (default: detected from the manuscript)
            template: Template markup (default: resolved from series settings)
            content_type: MIME type reported by the upload, if known

        Returns:
            AssembledDocument with the merged PDF
        """
        manuscript_bytes = read_manuscript(manuscript)
        if page_size is None:
            page_size = self.detect_page_size(manuscript_bytes, series, content_type)

        markup = template or self.registry.resolve(series.cover_page_settings)
        cover = self.create_cover_page(markup, paper, series, page_size)
        return self._assemble(cover, manuscript_bytes, filename)

    def process_with_fields(
        self,
        manuscript: bytes | Path,
        filename: str,
        paper: PaperMetadata,
        series: SeriesSettings,
        base_pdf: bytes | str,
        fields: dict[str, TemplateField],
    ) -> AssembledDocument:
        """Produce the manuscript with a field-based cover page prepended."""
        manuscript_bytes = read_manuscript(manuscript)
        cover = self.create_field_cover_page(base_pdf, fields, paper, series)
        return self._assemble(cover, manuscript_bytes, filename)

    def _assemble(
        self,
        cover: bytes,
        manuscript: ManuscriptSource,
        filename: str,
    ) -> AssembledDocument:
        merged = self.assembler.merge(cover, manuscript)
        document = AssembledDocument(
            filename=with_cover_filename(filename),
            content=merged,
            page_count=count_pages(merged),
        )
        logger.info(f"Assembled {document.filename} with {document.page_count} pages")
        return document
