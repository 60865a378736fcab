"""Field-positioned rendering of cover pages onto a stored base PDF.

Draws paper metadata at absolute coordinates on the first page of an existing
single-page PDF using PyMuPDF and the standard Times, Helvetica or Courier
fonts. Field coordinates are top-down; they are flipped into the PDF's native
bottom-left origin (``page_height - y``) and then mapped into PyMuPDF's page
space through the page's transformation matrix.
"""

import base64
import binascii
import logging
from collections.abc import Mapping
from datetime import date

import fitz  # PyMuPDF

from schemas.template_field import TemplateField

from ..exceptions import RenderError
from ..layout.sanitize import sanitize_text
from ..layout.text_layout import layout_text

logger = logging.getLogger(__name__)

LINE_HEIGHT_FACTOR = 1.2

# Base-14 font names per family: (regular, bold, italic)
FONT_FAMILIES: dict[str, tuple[str, str, str]] = {
    "times": ("tiro", "tibo", "tiit"),
    "helvetica": ("helv", "hebo", "heit"),
    "courier": ("cour", "cobo", "coit"),
}
DEFAULT_FONT_FAMILY = "times"

FieldValue = str | list[str]


def select_font(field: TemplateField) -> str:
    """Pick the base-14 font for a field.

    Bold+italic has no variant of its own and renders in the regular font.
    """
    family = (field.font_name or DEFAULT_FONT_FAMILY).lower()
    if family not in FONT_FAMILIES:
        logger.warning(f"Unknown font {field.font_name!r} for field {field.id}, using Times")
        family = DEFAULT_FONT_FAMILY

    regular, bold, italic = FONT_FAMILIES[family]
    if field.bold and not field.italic:
        return bold
    if field.italic and not field.bold:
        return italic
    return regular


def text_width(text: str, fontname: str, font_size: float) -> float:
    return fitz.get_text_length(text, fontname=fontname, fontsize=font_size)


def aligned_x(field: TemplateField, width: float) -> float:
    """Horizontal start of single-line text of the given width."""
    if field.align == "center":
        return field.x + (field.width - width) / 2
    if field.align == "right":
        return field.x + field.width - width
    return field.x


def decode_pdf(base_pdf: bytes | str) -> bytes:
    """Accept raw PDF bytes or base64 text, as stored base pages may be either."""
    if isinstance(base_pdf, bytes):
        return base_pdf
    try:
        return base64.b64decode(base_pdf, validate=True)
    except (binascii.Error, ValueError) as e:
        raise RenderError(f"Base PDF is not valid base64: {e}") from e


class FieldRenderer:
    """Draw metadata values onto the first page of a base PDF.

    Attributes:
        line_height_factor: Line height as a multiple of the font size
    """

    def __init__(self, line_height_factor: float = LINE_HEIGHT_FACTOR):
        self.line_height_factor = line_height_factor

    def render(
        self,
        base_pdf: bytes | str,
        fields: Mapping[str, TemplateField],
        values: Mapping[str, FieldValue],
    ) -> bytes:
        """Fill a field-based template.

        Fields without a value are skipped; partial metadata never fails.

        Args:
            base_pdf: Base page PDF, raw bytes or base64 text
            fields: Field id to TemplateField
            values: Field id to value; list values are comma-joined

        Returns:
            The filled PDF as bytes

        Raises:
            RenderError: If the base PDF cannot be opened or has no pages
        """
        data = decode_pdf(base_pdf)
        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            raise RenderError(f"Failed to open base PDF: {e}") from e

        try:
            if len(doc) == 0:
                raise RenderError("Base PDF has no pages")

            page = doc[0]
            page_height = page.mediabox.height
            drawn = 0

            for field_id, field in fields.items():
                value = values.get(field_id)
                if not value:
                    continue
                text = ", ".join(value) if isinstance(value, list) else value
                text = sanitize_text(text)
                if not text.strip():
                    continue

                self._draw_field(page, field, text, page_height)
                drawn += 1

            logger.debug(f"Drew {drawn} of {len(fields)} fields")
            return doc.tobytes(deflate=True)
        finally:
            doc.close()

    def _draw_field(
        self,
        page: fitz.Page,
        field: TemplateField,
        text: str,
        page_height: float,
    ) -> None:
        fontname = select_font(field)
        baseline = page_height - field.y

        if field.is_single_line:
            x = aligned_x(field, text_width(text, fontname, field.font_size))
            self._draw_text(page, text, x, baseline, fontname, field)
            return

        lines = layout_text(
            text,
            measure=lambda s, size: text_width(s, fontname, size),
            font_size=field.font_size,
            max_width=field.width,
            line_height=field.font_size * self.line_height_factor,
            justify=field.justified,
            max_lines=field.max_lines if field.max_lines and field.max_lines > 0 else None,
        )
        for line in lines:
            y = baseline + line.y_offset
            if line.justified:
                for word in line.words:
                    self._draw_text(page, word.word, field.x + word.x, y, fontname, field)
            else:
                self._draw_text(page, line.text, field.x, y, fontname, field)

    def _draw_text(
        self,
        page: fitz.Page,
        text: str,
        x: float,
        y: float,
        fontname: str,
        field: TemplateField,
    ) -> None:
        """Draw text with its baseline at native PDF coordinates (x, y)."""
        point = fitz.Point(x, y) * page.transformation_matrix
        page.insert_text(
            point,
            text,
            fontname=fontname,
            fontsize=field.font_size,
            color=field.color,
        )


def create_template_preview(
    base_pdf: bytes | str,
    fields: Mapping[str, TemplateField],
    renderer: FieldRenderer | None = None,
) -> bytes:
    """Fill a field-based template with sample values."""
    sample_values = {
        "title": "Sample Paper Title for Preview",
        "authors": "John Doe, Jane Smith",
        "abstract": (
            "This is a sample abstract for the preview. It demonstrates how the "
            "abstract will appear in the final cover page with typical formatting "
            "and layout. The text will wrap according to the settings specified "
            "in the template."
        ),
        "date": date.today().isoformat(),
        "institution": "Sample University",
        "seriesName": "Working Paper Series",
        "keywords": "Sample, Preview, Economics",
        "jel": "A10, B20, C30",
    }
    return (renderer or FieldRenderer()).render(base_pdf, fields, sample_values)
