"""Tests for forced cover page styles."""

from cover_assembler.templates.styles import add_default_styles, forced_rules, has_styling
from schemas.page_size import PageSize

A4 = PageSize(width=595, height=842, format="A4")
LETTER = PageSize(width=612, height=792, format="Letter")


class TestForcedRules:
    """Tests for forced_rules."""

    def test_page_size_and_margin(self):
        """The page rule fixes size and margin."""
        rules = forced_rules(LETTER)

        assert "size: 612pt 792pt;" in rules
        assert "margin: 0;" in rules
        assert "min-height: 792pt !important;" in rules
        assert "background-color: #ffffff !important;" in rules


class TestAddDefaultStyles:
    """Tests for add_default_styles."""

    def test_strips_template_important(self):
        """Template !important flags are removed."""
        markup = "<html><head><style>body { margin: 2in !important; }</style></head><body></body></html>"

        styled = add_default_styles(markup, A4)

        assert "margin: 2in;" in styled
        assert "2in !important" not in styled

    def test_styled_template_gets_forced_rules_last(self):
        """Forced rules follow the template's own styles in the head."""
        markup = "<html><head><style>.title {}</style></head><body></body></html>"

        styled = add_default_styles(markup, A4)

        assert styled.index(".title") < styled.index("size: 595pt 842pt")
        assert styled.index("size: 595pt 842pt") < styled.index("</head>")
        assert "font-family" not in styled

    def test_styled_template_without_head(self):
        """Without a head the forced rules close the body."""
        markup = '<link rel="stylesheet" href="a.css"><body>x</body>'

        styled = add_default_styles(markup, A4)

        assert styled.startswith('<link rel="stylesheet" href="a.css"><body>x<style>')
        assert styled.endswith("</style></body>")

    def test_forced_rules_follow_body_styles(self):
        """A page rule in the body cannot override the forced page size."""
        markup = "<body><style>@page{size:A4 landscape}</style>{{title}}</body>"

        styled = add_default_styles(markup, A4)

        assert styled.rindex("<style") > styled.index("A4 landscape")
        assert styled.index("size: 595pt 842pt") > styled.index("A4 landscape")
        assert styled.endswith("</style></body>")

    def test_forced_rules_follow_style_after_head(self):
        """Styles placed after the head still come before the forced rules."""
        markup = "<html><head></head><body><style>.t {}</style>x</body></html>"

        styled = add_default_styles(markup, A4)

        assert styled.index(".t {}") < styled.index("size: 595pt 842pt")
        assert styled.startswith("<html><head></head><body>")

    def test_forced_rules_appended_without_body_end(self):
        """A fragment with only a style gets the forced rules at the end."""
        styled = add_default_styles("<style>p {}</style><p>x</p>", A4)

        assert styled.startswith("<style>p {}</style><p>x</p><style>")

    def test_unstyled_template_with_head(self):
        """Unstyled templates get the full default stylesheet in their head."""
        markup = "<html><head><title>Cover</title></head><body>x</body></html>"

        styled = add_default_styles(markup, A4)

        assert styled.startswith("<html><head><style>")
        assert "font-family" in styled
        assert "<title>Cover</title>" in styled

    def test_unstyled_template_without_head(self):
        """A head is created after the html tag."""
        markup = '<html lang="en"><body>x</body></html>'

        styled = add_default_styles(markup, A4)

        assert styled.startswith('<html lang="en"><head><style>')
        assert styled.count("<html") == 1
        assert styled.endswith("</head><body>x</body></html>")

    def test_fragment_is_wrapped(self):
        """A bare fragment is wrapped into a full document."""
        styled = add_default_styles("<p>x</p>", A4)

        assert styled.startswith("<html><head><style>")
        assert styled.endswith("<body><p>x</p></body></html>")

    def test_has_styling(self):
        """Style tags and stylesheet links count as styling."""
        assert has_styling("<style></style>")
        assert has_styling('<link rel="stylesheet" href="x.css">')
        assert not has_styling("<head></head>")
