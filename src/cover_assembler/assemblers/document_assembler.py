"""Assembly of the final document: cover page followed by the manuscript.

Only the first page of the cover document is kept, so the merged output
always has exactly ``1 + manuscript pages`` pages. Pages are copied into a
fresh PyMuPDF document; neither input is modified.
"""

import logging
import re
from pathlib import Path
from typing import BinaryIO

import fitz  # PyMuPDF

from ..exceptions import MergeError

logger = logging.getLogger(__name__)

COVER_SUFFIX = "_with_cover"
PDF_SUFFIX_PATTERN = re.compile(r"\.pdf$", re.IGNORECASE)

ManuscriptSource = bytes | Path | str | BinaryIO


def with_cover_filename(filename: str) -> str:
    """Name of the merged output for a manuscript file name.

    Examples:
        >>> with_cover_filename("paper.PDF")
        'paper_with_cover.pdf'
        >>> with_cover_filename("paper")
        'paper_with_cover.pdf'
    """
    if PDF_SUFFIX_PATTERN.search(filename):
        return PDF_SUFFIX_PATTERN.sub(f"{COVER_SUFFIX}.pdf", filename)
    return f"{filename}{COVER_SUFFIX}.pdf"


def count_pages(data: bytes) -> int:
    """Count the pages of a PDF held in memory."""
    doc = fitz.open(stream=data, filetype="pdf")
    page_count = len(doc)
    doc.close()
    return page_count


def read_manuscript(manuscript: ManuscriptSource) -> bytes:
    """Load manuscript bytes from bytes, a path, or a binary file object.

    Raises:
        MergeError: If the manuscript cannot be read
    """
    if isinstance(manuscript, bytes):
        return manuscript
    try:
        if isinstance(manuscript, (str, Path)):
            return Path(manuscript).read_bytes()
        return manuscript.read()
    except OSError as e:
        raise MergeError(f"Failed to read manuscript: {e}") from e


class DocumentAssembler:
    """Merge a cover page with a manuscript.

    Attributes:
        garbage: PyMuPDF garbage collection level used when serializing
    """

    def __init__(self, garbage: int = 3):
        self.garbage = garbage

    def merge(self, cover: bytes, manuscript: ManuscriptSource) -> bytes:
        """Prepend page 1 of ``cover`` to every page of ``manuscript``.

        Args:
            cover: Cover document PDF bytes; pages after the first are dropped
            manuscript: Manuscript PDF as bytes, a path, or a binary file object

        Returns:
            The merged PDF as bytes

        Raises:
            MergeError: If either document cannot be opened or has no pages
        """
        manuscript_bytes = read_manuscript(manuscript)

        cover_doc = self._open(cover, "cover page")
        try:
            manuscript_doc = self._open(manuscript_bytes, "manuscript")
        except MergeError:
            cover_doc.close()
            raise

        merged = fitz.open()
        try:
            if len(cover_doc) == 0:
                raise MergeError("Cover page document has no pages")
            if len(manuscript_doc) == 0:
                raise MergeError("Manuscript has no pages")

            logger.debug(
                f"Merging cover ({len(cover_doc)} pages) with manuscript "
                f"({len(manuscript_doc)} pages)"
            )

            merged.insert_pdf(cover_doc, from_page=0, to_page=0)
            merged.insert_pdf(manuscript_doc)

            expected = 1 + len(manuscript_doc)
            if len(merged) != expected:
                raise MergeError(
                    f"Merged document has {len(merged)} pages, expected {expected}"
                )

            data = merged.tobytes(garbage=self.garbage, deflate=True)
            logger.info(f"Merged PDF created with {len(merged)} pages")
            return data
        except MergeError:
            raise
        except Exception as e:
            raise MergeError(f"Failed to merge PDFs: {e}") from e
        finally:
            merged.close()
            manuscript_doc.close()
            cover_doc.close()

    def _open(self, data: bytes, label: str) -> fitz.Document:
        try:
            return fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            raise MergeError(f"Failed to open {label}: {e}") from e
