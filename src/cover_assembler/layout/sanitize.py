"""Text sanitization for the standard PDF fonts.

The base-14 fonts are WinAnsi encoded; typographic punctuation pasted from word
processors falls outside that range and would render as missing glyphs.
"""

import re

REPLACEMENTS: list[tuple[re.Pattern, str]] = [
    (re.compile("[\u2010-\u2015]"), "-"),  # hyphens and dashes
    (re.compile("[\u2018\u2019]"), "'"),
    (re.compile("[\u201c\u201d]"), '"'),
    (re.compile("\u2022"), "*"),  # bullet
    (re.compile("\u2026"), "..."),  # ellipsis
    (re.compile("\u00a0"), " "),  # non-breaking space
    (re.compile("\u00ad"), "-"),  # soft hyphen
]


def sanitize_text(text: str | None) -> str:
    """Replace characters outside WinAnsi with ASCII equivalents.

    Examples:
        >>> sanitize_text("\u201cNet\u2010zero\u201d \u2026")
        '"Net-zero" ...'
    """
    if not text:
        return ""
    for pattern, replacement in REPLACEMENTS:
        text = pattern.sub(replacement, text)
    return text
