"""Template validation and population for markup cover pages.

Cover templates are HTML documents with ``{{ name }}`` placeholders. Each
placeholder is compiled into a Jinja2 subscript chain and rendered with an
environment configured for plain substitution:

- missing names, and missing segments of dotted paths, render as ""
- list values are joined with ", "
- values are inserted verbatim (no HTML escaping)

Everything outside a placeholder is literal text. Jinja2 block and comment
syntax is unreachable, so CSS such as ``{#header{...}}`` passes through intact.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from jinja2 import ChainableUndefined, Environment

from schemas.cover import CoverTemplateData

from ..layout.sanitize import sanitize_text
from .preview import PREVIEW_TEMPLATE_NAME, generate_sample_data
from .registry import TemplateRegistry

logger = logging.getLogger(__name__)

EMPTY_TEMPLATE = "Template cannot be empty"
MISSING_STRUCTURE = "Template should include basic HTML structure (html, body tags)"
MISSING_STYLING = "Template should include styling (a head tag, style tag or stylesheet link)"
MISSING_PLACEHOLDER = (
    "Template should include at least one placeholder using {{ variable }} syntax"
)

PLACEHOLDER_PATTERN = re.compile(r"\{\{([^}]+)\}\}")

# Control characters never occur in HTML text, so these delimiters only ever
# match the expressions emitted by _compile_markup.
_VARIABLE_START = "\x02"
_VARIABLE_END = "\x03"
_DELIMITERS = re.compile("[\x02\x03]")
_ROOT = "data"


@dataclass
class TemplateValidationResult:
    """Outcome of template validation.

    Attributes:
        valid: True when every check passed
        errors: One message per failed check
    """

    valid: bool
    errors: list[str] = field(default_factory=list)


class SubstitutionEnvironment(Environment):
    """Jinja2 environment whose subscripts never fall back to attributes.

    A missing key renders as undefined instead of resolving to a method of
    the container, so ``{{ items }}`` never prints ``dict.items``.
    """

    def getitem(self, obj, argument):
        try:
            return obj[argument]
        except (TypeError, LookupError):
            return self.undefined(obj=obj, name=argument)


def _finalize(value):
    """Render None as "" and lists as comma-joined text."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return value


def _compile_markup(markup: str) -> str:
    """Translate every ``{{ a.b }}`` placeholder into a Jinja2 subscript chain.

    The placeholder body is split on dots without further parsing, so
    ``{{ paper-title }}`` looks up the key ``"paper-title"``.
    """
    parts = []
    position = 0
    for match in PLACEHOLDER_PATTERN.finditer(markup):
        parts.append(_DELIMITERS.sub("", markup[position:match.start()]))
        path = "".join(f"[{segment!r}]" for segment in match.group(1).strip().split("."))
        parts.append(f"{_VARIABLE_START} {_ROOT}{path} {_VARIABLE_END}")
        position = match.end()
    parts.append(_DELIMITERS.sub("", markup[position:]))
    return "".join(parts)


def _prepare_data(data: CoverTemplateData | Mapping) -> dict:
    """Convert template data to a plain map, sanitizing string values."""
    if isinstance(data, CoverTemplateData):
        data = data.to_template_map()

    prepared = {}
    for key, value in data.items():
        if isinstance(value, str):
            prepared[key] = sanitize_text(value)
        else:
            prepared[key] = value
    return prepared


class TemplateEngine:
    """Validates and fills cover page markup templates.

    Attributes:
        env: Jinja2 environment configured for verbatim substitution
    """

    def __init__(self):
        self.env = SubstitutionEnvironment(
            variable_start_string=_VARIABLE_START,
            variable_end_string=_VARIABLE_END,
            block_start_string=_VARIABLE_START + "%",
            block_end_string="%" + _VARIABLE_END,
            comment_start_string=_VARIABLE_START + "#",
            comment_end_string="#" + _VARIABLE_END,
            autoescape=False,
            undefined=ChainableUndefined,
            finalize=_finalize,
            keep_trailing_newline=True,
        )

    def validate(self, markup: str | None) -> TemplateValidationResult:
        """Check that a template has the structure needed for rendering.

        An empty template fails immediately. Otherwise every check runs and
        each failure adds its own message.
        """
        if not markup or not markup.strip():
            return TemplateValidationResult(valid=False, errors=[EMPTY_TEMPLATE])

        errors = []

        if "<html" not in markup and "<body" not in markup:
            errors.append(MISSING_STRUCTURE)

        if (
            "<head" not in markup
            and "<style" not in markup
            and 'rel="stylesheet"' not in markup
        ):
            errors.append(MISSING_STYLING)

        if "{{" not in markup or "}}" not in markup:
            errors.append(MISSING_PLACEHOLDER)

        return TemplateValidationResult(valid=not errors, errors=errors)

    def populate(self, markup: str, data: CoverTemplateData | Mapping) -> str:
        """Substitute every placeholder in ``markup`` from ``data``.

        Args:
            markup: Template markup with ``{{ name }}`` placeholders
            data: CoverTemplateData or a mapping of placeholder values

        Returns:
            The populated markup
        """
        if not markup:
            return ""

        template = self.env.from_string(_compile_markup(markup))
        populated = template.render({_ROOT: _prepare_data(data)})
        logger.debug(f"Populated template ({len(markup)} -> {len(populated)} chars)")
        return populated

    def preview(self, markup: str, overrides: Mapping | None = None) -> str:
        """Populate ``markup`` with sample data.

        Args:
            markup: Template to preview
            overrides: Placeholder values replacing the sample ones, keyed by
                placeholder name

        Returns:
            The populated markup
        """
        data = generate_sample_data().to_template_map()
        if overrides:
            data.update(overrides)
        return self.populate(markup, data)


def validate_template(markup: str | None) -> TemplateValidationResult:
    """Validate ``markup`` with a fresh TemplateEngine."""
    return TemplateEngine().validate(markup)


def populate_template(markup: str, data: CoverTemplateData | Mapping) -> str:
    """Populate ``markup`` from ``data`` with a fresh TemplateEngine."""
    return TemplateEngine().populate(markup, data)


def generate_template_preview(
    markup: str | None = None,
    overrides: Mapping | None = None,
    registry: TemplateRegistry | None = None,
) -> str:
    """Preview a template, defaulting to the "custom" preset."""
    if markup is None:
        markup = (registry or TemplateRegistry.load()).get(PREVIEW_TEMPLATE_NAME)
    return TemplateEngine().preview(markup, overrides)
