"""Pytest fixtures for Cover Assembler tests."""

import fitz
import pytest

from cover_assembler.renderers.html_renderer import RenderingEngine
from cover_assembler.templates.registry import TemplateRegistry
from schemas.page_size import PageSize
from schemas.paper import PaperMetadata
from schemas.series import CoverPageSettings, SeriesSettings


def make_pdf(
    pages: int = 1,
    width: float = 595,
    height: float = 842,
    text: str | None = None,
) -> bytes:
    """Build an in-memory PDF with ``pages`` pages of the given size.

    Each page carries ``"<text> <n>"`` (1-based page number) when ``text`` is
    given.
    """
    doc = fitz.open()
    for number in range(1, pages + 1):
        page = doc.new_page(width=width, height=height)
        if text:
            page.insert_text((72, 72), f"{text} {number}", fontsize=12)
    data = doc.tobytes()
    doc.close()
    return data


def page_texts(data: bytes) -> list[str]:
    """Extract the text of every page of a PDF."""
    doc = fitz.open(stream=data, filetype="pdf")
    texts = [page.get_text().strip() for page in doc]
    doc.close()
    return texts


def page_sizes(data: bytes) -> list[tuple[float, float]]:
    """Return the (width, height) of every page of a PDF, rounded."""
    doc = fitz.open(stream=data, filetype="pdf")
    sizes = [(round(page.rect.width), round(page.rect.height)) for page in doc]
    doc.close()
    return sizes


class FakeRenderingEngine(RenderingEngine):
    """Rendering engine that records its input and emits a plain PDF."""

    def __init__(self, pages: int = 1, text: str = "Cover"):
        self.pages = pages
        self.text = text
        self.calls: list[tuple[str, PageSize]] = []

    def render(self, markup: str, page_size: PageSize) -> bytes:
        self.calls.append((markup, page_size))
        return make_pdf(
            pages=self.pages,
            width=page_size.width,
            height=page_size.height,
            text=self.text,
        )


@pytest.fixture
def a4_pdf():
    """Single-page A4 PDF."""
    return make_pdf(width=595, height=842, text="A4")


@pytest.fixture
def letter_pdf():
    """Single-page US Letter PDF."""
    return make_pdf(width=612, height=792, text="Letter")


@pytest.fixture
def manuscript_pdf():
    """Three-page A4 manuscript."""
    return make_pdf(pages=3, width=595, height=842, text="Manuscript page")


@pytest.fixture
def manuscript_file(tmp_path, manuscript_pdf):
    """Three-page A4 manuscript written to disk."""
    path = tmp_path / "paper.pdf"
    path.write_bytes(manuscript_pdf)
    return path


@pytest.fixture
def sample_paper():
    """Paper metadata with no abstract, keywords or JEL codes."""
    return PaperMetadata(title="Test Paper", authors="A. Author, B. Author")


@pytest.fixture
def full_paper():
    """Paper metadata with every optional field filled in."""
    return PaperMetadata(
        title="Capital Allocation and Productivity",
        authors="Jane Smith, John Doe",
        abstract="We study how capital is allocated across firms.",
        keywords="capital, productivity, firms",
        jel="D24, E22",
    )


@pytest.fixture
def sample_series():
    """Series with an institution and default cover page settings."""
    return SeriesSettings(
        name="Economics Working Papers",
        institution="Test University",
        cover_page_settings=CoverPageSettings(default_template="academic"),
    )


@pytest.fixture
def registry():
    """Registry of the bundled preset templates."""
    return TemplateRegistry.load()


@pytest.fixture
def fake_engine():
    """Rendering engine producing a one-page cover."""
    return FakeRenderingEngine()
