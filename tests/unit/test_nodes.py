"""
Unit tests for the block node model and line reader.
"""

import pytest

from deprecation_admonition.core import CONTENT_MODELS, Block, Reader, create_block


class TestCreateBlock:
    """Tests for create_block."""

    def test_copies_lines_and_attributes(self):
        """Test the node does not share the caller's containers."""
        lines = ["a"]
        attrs = {"id": "x"}

        block = create_block(None, "example", lines, attrs, content_model="compound")
        lines.append("b")
        attrs["id"] = "y"

        assert block.lines == ["a"]
        assert block.id == "x"
        assert block.content_model == "compound"

    def test_default_content_model(self):
        """Test blocks default to the simple content model."""
        assert create_block(None, "paragraph", [], {}).content_model == "simple"

    def test_unknown_content_model(self):
        """Test an unknown content model is rejected."""
        with pytest.raises(ValueError, match="Unknown content model"):
            create_block(None, "paragraph", [], {}, content_model="inline")

    def test_content_models(self):
        """Test the supported content models."""
        assert CONTENT_MODELS == {"compound", "simple", "verbatim", "raw", "empty"}

    def test_equality_ignores_parent(self):
        """Test nodes compare by kind, attributes, lines and content model."""
        first = create_block(create_block(None, "document", [], {}), "open", ["x"], {})
        second = create_block(None, "open", ["x"], {})

        assert first == second


class TestBlockAccessors:
    """Tests for Block attribute accessors."""

    def test_accessors(self):
        """Test named accessors read from the attribute map."""
        block = Block(
            context="admonition",
            attributes={"name": "caution", "caption": "Deprecated", "role": "deprecated", "id": "d"},
        )

        assert block.name == "caution"
        assert block.caption == "Deprecated"
        assert block.role == "deprecated"
        assert block.id == "d"

    def test_attr_default(self):
        """Test missing attributes fall back to the default."""
        block = Block(context="paragraph")

        assert block.attr("title") is None
        assert block.attr("title", "Untitled") == "Untitled"
        assert block.role is None


class TestReader:
    """Tests for Reader."""

    def test_lines_returns_copy(self):
        """Test lines can be read repeatedly without consuming the reader."""
        reader = Reader(["a", "b"])
        lines = reader.lines
        lines.append("c")

        assert reader.lines == ["a", "b"]
        assert reader.has_more_lines()

    def test_read_line(self):
        """Test lines are consumed one at a time."""
        reader = Reader(["a", "b"])

        assert reader.read_line() == "a"
        assert reader.lines == ["b"]
        assert reader.read_line() == "b"
        assert reader.read_line() is None
        assert not reader.has_more_lines()

    def test_read_lines(self):
        """Test all remaining lines are consumed at once."""
        reader = Reader(iter(["a", "b", "c"]))
        reader.read_line()

        assert reader.read_lines() == ["b", "c"]
        assert reader.lines == []

    def test_empty(self):
        """Test an empty reader."""
        reader = Reader([])

        assert reader.lines == []
        assert not reader.has_more_lines()
