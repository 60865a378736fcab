"""Tests for the preset template registry."""

import pytest

from cover_assembler.templates import DEFAULT_TEMPLATE_NAME, TemplateRegistry, validate_template
from schemas.series import CoverPageSettings


class TestTemplateRegistry:
    """Tests for TemplateRegistry."""

    def test_loads_bundled_presets(self, registry):
        """Every bundled preset is registered."""
        assert registry.names() == ["academic", "custom", "formal", "minimal"]
        assert registry.default_name == DEFAULT_TEMPLATE_NAME

    @pytest.mark.parametrize("name", ["academic", "custom", "formal", "minimal"])
    def test_bundled_presets_are_valid(self, registry, name):
        """Bundled presets pass template validation."""
        assert validate_template(registry.get(name)).valid

    def test_academic_covers_every_placeholder(self, registry):
        """The default preset references every cover placeholder."""
        markup = registry.get("academic")

        for placeholder in [
            "headerText", "title", "authors", "institution", "seriesName",
            "date", "abstract", "keywords", "jel",
        ]:
            assert f"{{{{ {placeholder} }}}}" in markup

    def test_unknown_name_falls_back(self, registry):
        """Unknown names resolve to the default preset."""
        assert registry.get("does-not-exist") == registry.get("academic")
        assert registry.get(None) == registry.get("academic")

    def test_contains(self, registry):
        """Membership reflects registered names."""
        assert "minimal" in registry
        assert "nope" not in registry

    def test_custom_html_takes_precedence(self, registry):
        """A custom template beats the named preset."""
        settings = CoverPageSettings(
            html_template="<html><body>{{ title }}</body></html>",
            default_template="minimal",
        )

        assert registry.resolve(settings) == settings.html_template

    def test_blank_custom_html_ignored(self, registry):
        """A blank custom template falls through to the preset."""
        settings = CoverPageSettings(html_template="   ", default_template="minimal")

        assert registry.resolve(settings) == registry.get("minimal")

    def test_resolve_without_settings(self, registry):
        """Default settings resolve to the default preset."""
        assert registry.resolve(CoverPageSettings()) == registry.get("academic")

    def test_load_from_directory(self, tmp_path):
        """Presets are loaded from any directory."""
        (tmp_path / "plain.html").write_text("<html><body>{{ title }}</body></html>")
        (tmp_path / "notes.txt").write_text("ignored")

        registry = TemplateRegistry.load(tmp_path, default_name="plain")

        assert registry.names() == ["plain"]

    def test_missing_default_rejected(self):
        """The default template must be registered."""
        with pytest.raises(KeyError):
            TemplateRegistry({"minimal": "<html></html>"})

    def test_registry_is_read_only(self, registry):
        """The stored templates cannot be modified."""
        with pytest.raises(TypeError):
            registry._templates["academic"] = "changed"
