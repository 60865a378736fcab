"""Assemblers combining cover pages and manuscripts."""

from .document_assembler import (
    DocumentAssembler,
    count_pages,
    read_manuscript,
    with_cover_filename,
)

__all__ = [
    "DocumentAssembler",
    "count_pages",
    "read_manuscript",
    "with_cover_filename",
]
