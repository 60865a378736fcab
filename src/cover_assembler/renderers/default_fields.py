"""Default field layouts for field-based cover templates.

Two layouts are provided, for A4 (595 × 842) and US Letter (612 × 792) base
pages, both with one-inch side margins.
"""

from schemas.template_field import TemplateField

# Points; looser than the detector's tolerance on purpose, any near-A4 page
# gets the A4 layout.
A4_LAYOUT_TOLERANCE = 10


def _layout(text_width: float, y: dict[str, float]) -> dict[str, TemplateField]:
    return {
        "title": TemplateField(
            id="title", x=72, y=y["title"], width=text_width, font_size=16,
            bold=True, align="center",
        ),
        "authors": TemplateField(
            id="authors", x=72, y=y["authors"], width=text_width, font_size=12,
            italic=True, align="center",
        ),
        "institution": TemplateField(
            id="institution", x=72, y=y["institution"], width=text_width,
            font_size=12, align="center",
        ),
        "seriesName": TemplateField(
            id="seriesName", x=72, y=y["seriesName"], width=text_width, font_size=10,
        ),
        "date": TemplateField(
            id="date", x=72, y=y["date"], width=text_width, font_size=10,
            align="right",
        ),
        "abstract": TemplateField(
            id="abstract", x=72, y=y["abstract"], width=text_width, font_size=10,
            justified=True, max_lines=15,
        ),
        "keywords": TemplateField(
            id="keywords", x=72, y=y["keywords"], width=text_width, font_size=10,
        ),
        "jel": TemplateField(
            id="jel", x=72, y=y["jel"], width=text_width, font_size=10,
        ),
    }


DEFAULT_A4_TEMPLATE_FIELDS = _layout(
    451,
    {
        "title": 200, "authors": 240, "institution": 270, "seriesName": 100,
        "date": 300, "abstract": 350, "keywords": 500, "jel": 520,
    },
)

DEFAULT_LETTER_TEMPLATE_FIELDS = _layout(
    468,
    {
        "title": 180, "authors": 220, "institution": 250, "seriesName": 100,
        "date": 270, "abstract": 320, "keywords": 480, "jel": 500,
    },
)


def get_default_template_fields(width: float, height: float) -> dict[str, TemplateField]:
    """Return the default layout for a base page of the given size.

    Pages within 10 points of A4 get the A4 layout; everything else gets the
    US Letter layout.
    """
    if abs(width - 595) < A4_LAYOUT_TOLERANCE and abs(height - 842) < A4_LAYOUT_TOLERANCE:
        return dict(DEFAULT_A4_TEMPLATE_FIELDS)
    return dict(DEFAULT_LETTER_TEMPLATE_FIELDS)
