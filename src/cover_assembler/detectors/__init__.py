"""Detectors for manuscript properties."""

from .page_size_detector import (
    DEFAULT_PAGE_SIZE,
    STANDARD_PAGE_SIZES,
    PageSizeDetector,
    classify_page_size,
    detect_pdf_page_size,
    get_standard_page_size,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "STANDARD_PAGE_SIZES",
    "PageSizeDetector",
    "classify_page_size",
    "detect_pdf_page_size",
    "get_standard_page_size",
]
