"""Tests for markup cover rendering."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from cover_assembler.exceptions import RenderError
from cover_assembler.renderers import (
    MarkupRenderer,
    RenderingEngine,
    RenderSurface,
    WeasyPrintEngine,
)
from schemas.page_size import PageSize

from conftest import FakeRenderingEngine, page_sizes, page_texts

A4 = PageSize(width=595, height=842, format="A4")
LETTER = PageSize(width=612, height=792, format="Letter")

COVER_MARKUP = """<html>
<head><style>.title { font-size: 20pt; }</style></head>
<body><div class="title">Rendered Cover Title</div></body>
</html>"""


class SurfaceRecordingEngine(RenderingEngine):
    """Engine that opens a render surface and optionally fails inside it."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.workdir: Path | None = None

    def render(self, markup: str, page_size: PageSize) -> bytes:
        with RenderSurface(markup, page_size) as surface:
            self.workdir = surface.html_path.parent
            assert surface.html_path.read_text() == markup
            if self.fail:
                raise ValueError("layout exploded")
            return b"%PDF-fake"


class TestRenderSurface:
    """Tests for RenderSurface."""

    def test_torn_down_on_success(self):
        """The working directory is removed after a successful render."""
        engine = SurfaceRecordingEngine()

        MarkupRenderer(engine).render(COVER_MARKUP, A4)

        assert engine.workdir is not None
        assert not engine.workdir.exists()

    def test_torn_down_on_failure(self):
        """The working directory is removed when rendering fails."""
        engine = SurfaceRecordingEngine(fail=True)

        with pytest.raises(RenderError):
            MarkupRenderer(engine).render(COVER_MARKUP, A4)

        assert engine.workdir is not None
        assert not engine.workdir.exists()

    def test_not_reopened(self):
        """An open surface cannot be entered again."""
        surface = RenderSurface("<html></html>", A4)

        with surface:
            with pytest.raises(RuntimeError):
                surface.__enter__()

        assert surface.html_path is None

    def test_close_is_idempotent(self):
        """Closing twice is harmless."""
        surface = RenderSurface("<html></html>", A4)
        surface.__enter__()

        surface.close()
        surface.close()

        assert surface.html_path is None


class TestMarkupRenderer:
    """Tests for MarkupRenderer."""

    def test_forces_page_styles(self):
        """The engine receives markup with forced page rules."""
        engine = FakeRenderingEngine()

        MarkupRenderer(engine).render(COVER_MARKUP, LETTER)

        markup, page_size = engine.calls[0]
        assert "size: 612pt 792pt;" in markup
        assert page_size == LETTER

    def test_returns_engine_output(self):
        """The engine's PDF is returned."""
        result = MarkupRenderer(FakeRenderingEngine(text="Engine")).render(COVER_MARKUP, A4)

        assert page_texts(result) == ["Engine 1"]

    def test_empty_output_raises(self):
        """Empty engine output is an error."""
        engine = MagicMock(spec=RenderingEngine)
        engine.render.return_value = b""

        with pytest.raises(RenderError, match="empty output"):
            MarkupRenderer(engine).render(COVER_MARKUP, A4)

    def test_engine_exception_wrapped(self):
        """Engine exceptions are wrapped in RenderError."""
        engine = MagicMock(spec=RenderingEngine)
        engine.render.side_effect = OSError("no fonts")

        with pytest.raises(RenderError, match="no fonts") as exc_info:
            MarkupRenderer(engine).render(COVER_MARKUP, A4)

        assert isinstance(exc_info.value.__cause__, OSError)

    def test_render_error_propagates(self):
        """RenderError from the engine is not re-wrapped."""
        engine = MagicMock(spec=RenderingEngine)
        error = RenderError("engine gave up")
        engine.render.side_effect = error

        with pytest.raises(RenderError) as exc_info:
            MarkupRenderer(engine).render(COVER_MARKUP, A4)

        assert exc_info.value is error

    def test_default_engine(self):
        """WeasyPrint is the default engine."""
        assert isinstance(MarkupRenderer().engine, WeasyPrintEngine)


class TestWeasyPrintEngine:
    """Tests for rendering with WeasyPrint."""

    def test_renders_one_page_at_size(self):
        """The cover is a single page of the requested size."""
        result = MarkupRenderer(WeasyPrintEngine()).render(COVER_MARKUP, LETTER)

        assert page_sizes(result) == [(612, 792)]
        assert "Rendered Cover Title" in page_texts(result)[0]

    def test_overflow_is_dropped(self):
        """Content taller than the page is cut to the first page."""
        paragraphs = "".join(f"<p>Paragraph {i}</p>" for i in range(300))
        markup = f"<html><head><style>p {{ font-size: 14pt; }}</style></head><body>{paragraphs}</body></html>"

        result = MarkupRenderer(WeasyPrintEngine()).render(markup, A4)

        assert page_sizes(result) == [(595, 842)]
