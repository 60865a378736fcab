"""Page size detection for uploaded manuscripts.

Reads the first page of a PDF with PyMuPDF and classifies its dimensions
against a fixed table of standard paper sizes. Detection is best-effort: any
failure yields the caller's default size instead of an exception, so a
malformed upload never blocks a submission.
"""

import logging
from pathlib import Path
from typing import BinaryIO

import fitz  # PyMuPDF

from schemas.page_size import PageSize

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"

# Order matters: the first entry within tolerance wins, not the closest one.
STANDARD_PAGE_SIZES: list[tuple[str, float, float]] = [
    ("A4", 595, 842),
    ("Letter", 612, 792),
    ("A5", 420, 595),
    ("Legal", 612, 1008),
    ("Executive", 522, 756),
    ("B5", 499, 709),
]

# Points; a dimension matches when it differs by strictly less than this.
SIZE_TOLERANCE = 5

DEFAULT_PAGE_SIZE = PageSize(width=595, height=842, format="A4")

PdfSource = Path | str | bytes | BinaryIO


def classify_page_size(width: float, height: float) -> str | None:
    """Return the name of the first standard size matching the dimensions.

    Examples:
        >>> classify_page_size(595.28, 841.89)
        'A4'
        >>> classify_page_size(500, 500) is None
        True
    """
    for name, std_width, std_height in STANDARD_PAGE_SIZES:
        if (
            abs(width - std_width) < SIZE_TOLERANCE
            and abs(height - std_height) < SIZE_TOLERANCE
        ):
            return name
    return None


def get_standard_page_size(name: str) -> PageSize:
    """Look up a standard page size by name, case-insensitively.

    Unknown names resolve to A4.
    """
    for std_name, width, height in STANDARD_PAGE_SIZES:
        if std_name.lower() == name.lower():
            return PageSize(width=width, height=height, format=std_name)
    return DEFAULT_PAGE_SIZE


def detect_pdf_page_size(
    source: PdfSource,
    default: PageSize = DEFAULT_PAGE_SIZE,
    content_type: str | None = None,
) -> PageSize:
    """Detect the page size of a PDF's first page.

    Args:
        source: Path to the PDF, its raw bytes, or a binary file object
        default: Size returned when the input is not a PDF or cannot be read
        content_type: MIME type reported by the upload, if known

    Returns:
        The detected PageSize; ``format`` is None for non-standard sizes
    """
    if content_type is not None and content_type != PDF_CONTENT_TYPE:
        logger.warning(
            f"Not a PDF upload (content type {content_type}), using {default.display_name}"
        )
        return default

    try:
        data = _read_source(source)
    except OSError as e:
        logger.warning(f"Could not read PDF for page size detection: {e}")
        return default

    try:
        doc = fitz.open(stream=data, filetype="pdf")
        try:
            mediabox = doc[0].mediabox
            width, height = mediabox.width, mediabox.height
        finally:
            doc.close()
    except Exception as e:
        logger.warning(f"Input is not a readable PDF, using {default.display_name}: {e}")
        return default

    page_size = PageSize(
        width=width,
        height=height,
        format=classify_page_size(width, height),
    )
    logger.debug(f"Detected page size {page_size.display_name}")
    return page_size


def _read_source(source: PdfSource) -> bytes:
    """Load the bytes of a PDF source."""
    if isinstance(source, bytes):
        return source
    if isinstance(source, (str, Path)):
        return Path(source).read_bytes()
    return source.read()


class PageSizeDetector:
    """Page size detector with a configurable fallback size.

    Attributes:
        default: PageSize returned when detection fails
    """

    def __init__(self, default: PageSize | None = None):
        self.default = default or DEFAULT_PAGE_SIZE

    def detect(
        self,
        source: PdfSource,
        content_type: str | None = None,
        default: PageSize | None = None,
    ) -> PageSize:
        """Detect the page size of ``source``, falling back to the default."""
        return detect_pdf_page_size(
            source,
            default=default or self.default,
            content_type=content_type,
        )
