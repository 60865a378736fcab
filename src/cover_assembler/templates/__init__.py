"""Markup templates for cover pages."""

from .engine import (
    TemplateEngine,
    TemplateValidationResult,
    generate_template_preview,
    populate_template,
    validate_template,
)
from .preview import generate_sample_data
from .registry import DEFAULT_TEMPLATE_NAME, TemplateRegistry
from .styles import add_default_styles

__all__ = [
    "DEFAULT_TEMPLATE_NAME",
    "TemplateEngine",
    "TemplateRegistry",
    "TemplateValidationResult",
    "add_default_styles",
    "generate_sample_data",
    "generate_template_preview",
    "populate_template",
    "validate_template",
]
