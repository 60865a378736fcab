"""Registry of preset cover page templates.

Preset bodies live as ``<name>.html`` files under resources/templates and are
read once when the registry is loaded. The registry is immutable afterwards
and is passed by reference to whatever needs a template body.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from schemas.series import CoverPageSettings

logger = logging.getLogger(__name__)

# Resolve the project root (4 levels up from this file):
#   registry.py → templates/ → cover_assembler/ → src/ → project root
# If this file is ever moved, the chain of .parent calls must be updated.
PACKAGE_ROOT = Path(__file__).parent.parent.parent.parent
TEMPLATES_DIR = PACKAGE_ROOT / "resources" / "templates"

DEFAULT_TEMPLATE_NAME = "academic"
TEMPLATE_SUFFIX = ".html"


class TemplateRegistry:
    """Read-only mapping of template identifier to template markup.

    Attributes:
        default_name: Template returned for unknown identifiers
    """

    def __init__(
        self,
        templates: Mapping[str, str],
        default_name: str = DEFAULT_TEMPLATE_NAME,
    ):
        if default_name not in templates:
            raise KeyError(f"Default template {default_name!r} is not registered")
        self._templates = MappingProxyType(dict(templates))
        self.default_name = default_name

    @classmethod
    def load(
        cls,
        templates_dir: Path | None = None,
        default_name: str = DEFAULT_TEMPLATE_NAME,
    ) -> "TemplateRegistry":
        """Load every ``*.html`` preset from ``templates_dir``.

        Args:
            templates_dir: Directory of preset templates (default: resources/templates)
            default_name: Identifier used for unknown template names

        Returns:
            A TemplateRegistry keyed by file stem
        """
        templates_dir = templates_dir or TEMPLATES_DIR
        templates = {
            path.stem: path.read_text(encoding="utf-8")
            for path in sorted(templates_dir.glob(f"*{TEMPLATE_SUFFIX}"))
        }
        logger.debug(f"Loaded {len(templates)} templates from {templates_dir}")
        return cls(templates, default_name=default_name)

    def names(self) -> list[str]:
        return sorted(self._templates)

    def __contains__(self, name: str) -> bool:
        return name in self._templates

    def get(self, name: str | None) -> str:
        """Return the markup for ``name``, or the default template."""
        if name and name in self._templates:
            return self._templates[name]
        logger.debug(f"Unknown template {name!r}, using {self.default_name!r}")
        return self._templates[self.default_name]

    def resolve(self, settings: CoverPageSettings) -> str:
        """Pick the template for a series.

        A non-blank custom ``html_template`` wins; otherwise the preset named
        by ``default_template`` is used.
        """
        if settings.html_template and settings.html_template.strip():
            logger.debug("Using the series' custom HTML template")
            return settings.html_template
        return self.get(settings.default_template)
