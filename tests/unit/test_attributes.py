"""
Unit tests for block attribute list parsing.
"""

from deprecation_admonition.core import parse_block_attributes


class TestParseBlockAttributes:
    """Tests for parse_block_attributes."""

    def test_style_only(self):
        """Test a bare style."""
        assert parse_block_attributes("DEPRECATED") == {"1": "DEPRECATED", "style": "DEPRECATED"}

    def test_named_attributes(self):
        """Test key=value entries."""
        attrs = parse_block_attributes("DEPRECATED, id=dep-1, reftext=Old")

        assert attrs["style"] == "DEPRECATED"
        assert attrs["id"] == "dep-1"
        assert attrs["reftext"] == "Old"

    def test_positional_attributes(self):
        """Test positional entries are numbered."""
        attrs = parse_block_attributes("quote, Author, Source")

        assert attrs["1"] == "quote"
        assert attrs["2"] == "Author"
        assert attrs["3"] == "Source"

    def test_quoted_value_with_comma(self):
        """Test quoted values keep their commas and lose their quotes."""
        attrs = parse_block_attributes('DEPRECATED, title="Use v2, not v1"')

        assert attrs["title"] == "Use v2, not v1"
        assert "2" not in attrs

    def test_shorthand(self):
        """Test #id, .role and %option shorthand on the style."""
        attrs = parse_block_attributes("DEPRECATED#dep-1.custom.wide%collapsible")

        assert attrs["style"] == "DEPRECATED"
        assert attrs["id"] == "dep-1"
        assert attrs["role"] == "custom wide"
        assert attrs["collapsible-option"] == ""
        assert attrs["options"] == "collapsible"

    def test_shorthand_without_style(self):
        """Test shorthand alone sets no style."""
        attrs = parse_block_attributes("#anchor")

        assert "style" not in attrs
        assert attrs["id"] == "anchor"

    def test_named_id_wins_over_shorthand(self):
        """Test an explicit id is kept."""
        attrs = parse_block_attributes("DEPRECATED#short, id=explicit")

        assert attrs["id"] == "explicit"

    def test_named_role_merged_with_shorthand(self):
        """Test explicit and shorthand roles are combined."""
        attrs = parse_block_attributes("DEPRECATED.extra, role=custom")

        assert attrs["role"] == "custom extra"

    def test_unbalanced_quote_falls_back(self):
        """Test an unbalanced quote falls back to a plain split."""
        attrs = parse_block_attributes("DEPRECATED, title=Don't use")

        assert attrs["style"] == "DEPRECATED"
        assert attrs["title"] == "Don't use"

    def test_hash_is_not_a_comment(self):
        """Test # inside the list is kept."""
        attrs = parse_block_attributes("DEPRECATED, link=page#section")

        assert attrs["link"] == "page#section"

    def test_backslashes_are_kept(self):
        """Test backslashes in values are not treated as escapes."""
        attrs = parse_block_attributes(r'DEPRECATED, title=C:\dir\new, path="a\b, c"')

        assert attrs["title"] == r"C:\dir\new"
        assert attrs["path"] == r"a\b, c"

    def test_empty(self):
        """Test an empty list gives no attributes."""
        assert parse_block_attributes("") == {}
