"""Schema definitions for Cover Assembler."""

from .cover import AssembledDocument, CoverTemplateData
from .page_size import PageSize
from .paper import PaperMetadata, split_list
from .series import CoverPageSettings, SeriesSettings
from .template_field import TemplateField

__all__ = [
    "AssembledDocument",
    "CoverPageSettings",
    "CoverTemplateData",
    "PageSize",
    "PaperMetadata",
    "SeriesSettings",
    "TemplateField",
    "split_list",
]
