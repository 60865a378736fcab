"""Sample data for previewing cover templates before they are used."""

from datetime import date

from schemas.cover import CoverTemplateData

PREVIEW_TEMPLATE_NAME = "custom"


def generate_sample_data() -> CoverTemplateData:
    """Placeholder values exercising every part of a cover template."""
    return CoverTemplateData(
        title="Example Paper Title: The Effect of Sample Size on Statistical Power",
        authors="Jane Smith, John Doe, Robert Johnson",
        abstract=(
            "This is a sample abstract for the template preview. It demonstrates "
            "how the text will flow in the final cover page. The abstract typically "
            "includes a brief description of the research methodology, findings, "
            "and implications."
        ),
        institution="University Research Center",
        date=date.today().isoformat(),
        series_name="Economics Working Paper Series",
        keywords="Sample, Example, Template, Preview",
        jel="A10, B20, C30, D40",
        header_text="Working Paper",
        affiliation="Department of Economics",
        abstract_display="block",
        jel_display="block",
        keywords_display="block",
        institution_display="block",
        series_name_display="block",
        date_display="block",
        affiliation_display="block",
    )
