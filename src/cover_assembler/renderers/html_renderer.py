"""Markup-to-PDF rendering of cover pages.

The populated template is rendered by a RenderingEngine collaborator behind
``render(markup, page_size) -> bytes``. The default engine uses WeasyPrint.
This module owns three things only:

- forcing the page size, zero margins and a white background into the markup
- sizing the render surface so content is never clipped
- tearing the render surface down whether rendering succeeds or fails

Exactly one page is produced; overflow pages are dropped.
"""

import logging
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from weasyprint import HTML

from schemas.page_size import PageSize

from ..exceptions import RenderError
from ..templates.styles import add_default_styles

logger = logging.getLogger(__name__)


class RenderingEngine(ABC):
    """Converts markup into a single-page PDF of the requested size."""

    @abstractmethod
    def render(self, markup: str, page_size: PageSize) -> bytes:
        """Render ``markup`` to PDF bytes.

        Implementations return only once layout is complete.

        Args:
            markup: Complete HTML document
            page_size: Size of the output page

        Returns:
            PDF bytes containing exactly one page
        """
        pass


class RenderSurface:
    """Transient working area for one render call.

    Holds the markup in a private temporary directory for the duration of a
    ``with`` block. The directory is removed on exit, on success and failure
    alike, and a surface is never reused.

    Attributes:
        markup: HTML document to render
        page_size: Page size the surface is laid out for
        html_path: Location of the markup while the surface is open
    """

    def __init__(self, markup: str, page_size: PageSize):
        self.markup = markup
        self.page_size = page_size
        self.html_path: Path | None = None
        self._workdir: tempfile.TemporaryDirectory | None = None

    def __enter__(self) -> "RenderSurface":
        if self._workdir is not None:
            raise RuntimeError("Render surface is already open")
        self._workdir = tempfile.TemporaryDirectory(prefix="cover-render-")
        self.html_path = Path(self._workdir.name) / "cover.html"
        self.html_path.write_text(self.markup, encoding="utf-8")
        logger.debug(f"Created render surface {self._workdir.name}")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._workdir is None:
            return
        name = self._workdir.name
        self._workdir.cleanup()
        self._workdir = None
        self.html_path = None
        logger.debug(f"Tore down render surface {name}")


class WeasyPrintEngine(RenderingEngine):
    """Render markup to PDF with WeasyPrint.

    ``HTML.render()`` is synchronous and returns only once layout is
    complete. The forced ``@page`` size and body min-height make the first
    page at least as tall as the page size. Content taller than the page
    flows onto extra pages, which are not written.

    Attributes:
        base_url: Base URL for resolving relative paths in the markup (optional)
    """

    def __init__(self, base_url: str | None = None):
        self.base_url = base_url

    def render(self, markup: str, page_size: PageSize) -> bytes:
        with RenderSurface(markup, page_size) as surface:
            html = HTML(filename=str(surface.html_path), base_url=self.base_url)
            document = html.render()

            if not document.pages:
                return b""
            if len(document.pages) > 1:
                logger.debug(
                    f"Cover content overflowed to {len(document.pages)} pages, "
                    f"keeping the first"
                )

            return document.copy(document.pages[:1]).write_pdf()


class MarkupRenderer:
    """Render populated cover markup into a one-page PDF.

    Attributes:
        engine: RenderingEngine performing the conversion
    """

    def __init__(self, engine: RenderingEngine | None = None):
        self.engine = engine or WeasyPrintEngine()

    def render(self, markup: str, page_size: PageSize) -> bytes:
        """Render ``markup`` at ``page_size``.

        Args:
            markup: Populated template markup
            page_size: Size of the cover page

        Returns:
            PDF bytes of the cover page

        Raises:
            RenderError: If the engine fails or produces no output
        """
        styled = add_default_styles(markup, page_size)
        logger.debug(
            f"Rendering cover page at {page_size.width}x{page_size.height} "
            f"({page_size.format or 'custom'})"
        )

        try:
            pdf_bytes = self.engine.render(styled, page_size)
        except RenderError:
            raise
        except Exception as e:
            raise RenderError(f"Failed to render cover page: {e}") from e

        if not pdf_bytes:
            raise RenderError("Cover page rendering produced empty output")

        logger.info(f"Rendered cover page ({len(pdf_bytes)} bytes)")
        return pdf_bytes
