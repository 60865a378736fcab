"""Forced page styles for markup cover templates.

The rendered cover must match the manuscript's page size exactly, with no
margin and a white background, whatever the template's own CSS says.
"""

import re

from schemas.page_size import PageSize

IMPORTANT_PATTERN = re.compile(r"\s*!important")
HTML_OPEN_PATTERN = re.compile(r"<html[^>]*>", re.IGNORECASE)


def forced_rules(page_size: PageSize) -> str:
    """CSS rules fixing page size, margins and background."""
    width, height = page_size.width, page_size.height
    return f"""
      @page {{
        size: {width:g}pt {height:g}pt;
        margin: 0;
      }}
      html, body {{
        margin: 0 !important;
        padding: 0 !important;
        width: {width:g}pt !important;
        min-height: {height:g}pt !important;
        background-color: #ffffff !important;
      }}"""


def default_rules(page_size: PageSize) -> str:
    """Complete stylesheet for templates that carry no styling of their own."""
    return forced_rules(page_size) + f"""
      html, body {{
        font-family: 'Times New Roman', Times, serif;
        color: #000000 !important;
      }}
      .cover-page {{
        padding: 72pt;
        box-sizing: border-box;
        min-height: {page_size.height:g}pt;
        position: relative;
      }}
      h1, .title {{
        font-size: 24pt;
        margin-bottom: 24pt;
        font-weight: bold;
      }}
      .authors {{
        font-size: 12pt;
        font-style: italic;
        margin-bottom: 18pt;
      }}
      .abstract {{
        font-size: 10pt;
        text-align: justify;
        margin-top: 36pt;
      }}"""


def has_styling(markup: str) -> bool:
    return "<style" in markup or 'rel="stylesheet"' in markup


def add_default_styles(markup: str, page_size: PageSize) -> str:
    """Inject the forced page rules into a template.

    ``!important`` flags in the template are removed first so the forced
    rules cannot be overridden. Templates without styling get a complete
    default stylesheet; styled templates get the forced rules appended after
    their own styles so they take precedence.

    Args:
        markup: Template or populated markup
        page_size: Page size of the rendered cover

    Returns:
        Markup with a style block fixing size, margins and background
    """
    markup = IMPORTANT_PATTERN.sub("", markup)

    if not has_styling(markup):
        style_block = f"<style>{default_rules(page_size)}\n    </style>"
        if "<head>" in markup:
            return markup.replace("<head>", f"<head>{style_block}", 1)
        if "<html" in markup:
            return HTML_OPEN_PATTERN.sub(
                lambda m: f"{m.group(0)}<head>{style_block}</head>", markup, count=1
            )
        body = markup if "<body" in markup else f"<body>{markup}</body>"
        return f"<html><head>{style_block}</head>{body}</html>"

    style_block = f"<style>{forced_rules(page_size)}\n    </style>"
    last_style = max(markup.rfind("<style"), markup.rfind('rel="stylesheet"'))
    head_end = markup.find("</head>")
    if head_end > last_style:
        return markup[:head_end] + style_block + markup[head_end:]
    body_end = markup.rfind("</body>")
    if body_end > last_style:
        return markup[:body_end] + style_block + markup[body_end:]
    return markup + style_block
