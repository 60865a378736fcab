"""Renderers producing cover page PDFs."""

from .default_fields import (
    DEFAULT_A4_TEMPLATE_FIELDS,
    DEFAULT_LETTER_TEMPLATE_FIELDS,
    get_default_template_fields,
)
from .field_renderer import FieldRenderer, create_template_preview, select_font
from .html_renderer import MarkupRenderer, RenderingEngine, RenderSurface, WeasyPrintEngine

__all__ = [
    "DEFAULT_A4_TEMPLATE_FIELDS",
    "DEFAULT_LETTER_TEMPLATE_FIELDS",
    "FieldRenderer",
    "MarkupRenderer",
    "RenderSurface",
    "RenderingEngine",
    "WeasyPrintEngine",
    "create_template_preview",
    "get_default_template_fields",
    "select_font",
]
