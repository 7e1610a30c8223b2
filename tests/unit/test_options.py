#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_options.py
"""Tests for parser and console option dataclasses."""

import dataclasses

import pytest

from richmark.constants import DEFAULT_HEADING_STYLES
from richmark.options import ConsoleRendererOptions, MarkdownParserOptions


@pytest.mark.unit
class TestMarkdownParserOptions:
    """Tests for MarkdownParserOptions."""

    def test_defaults(self):
        """Test default parser options."""
        options = MarkdownParserOptions()
        assert options.parse_tables is True
        assert options.parse_strikethrough is True
        assert options.parse_footnotes is True
        assert options.fade_out_last_paragraph is False

    def test_create_updated(self):
        """Test create_updated returns a modified copy."""
        options = MarkdownParserOptions()
        updated = options.create_updated(parse_tables=False)
        assert updated.parse_tables is False
        assert options.parse_tables is True

    def test_frozen(self):
        """Test options cannot be mutated."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            MarkdownParserOptions().parse_tables = False  # type: ignore[misc]

    def test_from_mapping_normalizes_hyphens(self):
        """Test mapping keys may use hyphens."""
        options = MarkdownParserOptions.from_mapping({"parse-footnotes": False})
        assert options.parse_footnotes is False

    def test_from_mapping_rejects_unknown_keys(self):
        """Test unknown keys raise ValueError."""
        with pytest.raises(ValueError, match="Unknown MarkdownParserOptions field"):
            MarkdownParserOptions.from_mapping({"parse_everything": True})


@pytest.mark.unit
class TestConsoleRendererOptions:
    """Tests for ConsoleRendererOptions."""

    def test_defaults(self):
        """Test default console options."""
        options = ConsoleRendererOptions()
        assert options.code_theme == "monokai"
        assert options.heading_styles == DEFAULT_HEADING_STYLES
        assert options.bullet == "•"
        assert options.show_link_urls is False

    def test_heading_styles_list_becomes_tuple(self):
        """Test list values are stored as tuples."""
        options = ConsoleRendererOptions.from_mapping({"heading_styles": ["red"] * 6})
        assert options.heading_styles == ("red",) * 6

    def test_heading_styles_count(self):
        """Test exactly six heading styles are required."""
        with pytest.raises(ValueError, match="6 styles"):
            ConsoleRendererOptions(heading_styles=("bold",))

    def test_empty_bullet(self):
        """Test an empty bullet is rejected."""
        with pytest.raises(ValueError, match="bullet"):
            ConsoleRendererOptions(bullet="")

    def test_field_names(self):
        """Test field names are exposed for config validation."""
        assert "code_theme" in ConsoleRendererOptions.field_names()
        assert "parse_tables" not in ConsoleRendererOptions.field_names()
