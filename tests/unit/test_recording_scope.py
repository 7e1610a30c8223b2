#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_recording_scope.py
"""Tests for RecordingScope."""

import json

import pytest

from richmark.scope import ListType, RichTextScope, Semantics, TableCellData
from richmark.scopes import RecordingScope, RenderedBlock
from richmark.string import InlineContent, LinkStyle, RichTextString, Span, SpanStyle, rich_text_string


@pytest.mark.unit
class TestRecordingScope:
    """Tests for recording scope calls."""

    def test_is_a_scope(self):
        """Test RecordingScope implements the scope contract."""
        assert isinstance(RecordingScope(), RichTextScope)

    def test_containers_nest_content(self):
        """Test content emitted inside containers is nested."""
        scope = RecordingScope()
        scope.block_quote(lambda: scope.heading(1, lambda: scope.basic_text("t")))
        quote = scope.blocks[0]
        assert quote.kind == "block_quote"
        assert quote.children[0].kind == "heading"
        assert quote.children[0].children[0].attrs["text"] == "t"

    def test_list_items(self):
        """Test each list item is drawn inside its own record."""
        scope = RecordingScope()
        scope.formatted_list(ListType.ORDERED, ["a", "b"], scope.basic_text, start_index=4)
        block = scope.blocks[0]
        assert block.attrs == {"list_type": "ordered", "start_index": 4}
        assert [item.attrs["index"] for item in block.children] == [4, 5]
        assert scope.texts() == ["a", "b"]

    def test_text_attributes(self):
        """Test text records carry spans, semantics and the fade-out hint."""
        scope = RecordingScope()
        string = RichTextString("go here", (Span(3, 7, LinkStyle("https://example.com")),))
        scope.text(string, semantics=Semantics.HEADING, fade_out_effect=True)
        assert scope.blocks[0].attrs == {
            "text": "go here",
            "spans": [(3, 7, {"link": "https://example.com", "title": ""})],
            "semantics": "heading",
            "fade_out_effect": True,
        }

    def test_inline_content_nested_in_text(self):
        """Test inline content is rendered inside the owning text record."""
        scope = RecordingScope()
        content = InlineContent(content=lambda inner: inner.image("cat.png", "cat"), alternate_text="cat")
        scope.text(rich_text_string(lambda builder: builder.append("a").append_inline_content(content)))
        block = scope.blocks[0]
        assert block.attrs["text"] == "a"
        assert block.children == [RenderedBlock("image", {"destination": "cat.png", "description": "cat"})]

    def test_spans_follow_visible_text(self):
        """Test recorded spans index the recorded text when an image comes first."""
        content = InlineContent(content=lambda inner: inner.image("u", "i"), alternate_text="i")

        def build(builder):
            builder.append_inline_content(content)
            builder.append(" ")
            with builder.with_style(SpanStyle.BOLD):
                builder.append("bold")

        scope = RecordingScope()
        scope.text(rich_text_string(build))
        attrs = scope.blocks[0].attrs
        assert attrs["text"] == " bold"
        assert attrs["spans"] == [(1, 5, "bold")]
        start, end, _ = attrs["spans"][0]
        assert attrs["text"][start:end] == "bold"

    def test_table(self):
        """Test tables record header and rows as plain data."""
        scope = RecordingScope()
        scope.table(
            [TableCellData(RichTextString.plain("h"), "center")],
            [[TableCellData(RichTextString.plain("v"))]],
        )
        assert scope.blocks[0].attrs == {
            "header": [{"text": "h", "alignment": "center"}],
            "rows": [[{"text": "v", "alignment": None}]],
        }

    def test_default_image_falls_back_to_text(self):
        """Test the base scope renders images as their description."""

        class TextOnlyScope(RecordingScope):
            image = RichTextScope.image

        scope = TextOnlyScope()
        scope.image("pic.png", "")
        scope.image("pic.png", "a picture")
        assert scope.texts() == ["pic.png", "a picture"]

    def test_to_list_is_json_serializable(self):
        """Test the recording dumps to JSON."""
        scope = RecordingScope()
        scope.horizontal_rule()
        scope.code_block("print()")
        data = scope.to_list()
        assert data == [{"kind": "horizontal_rule"}, {"kind": "code_block", "attrs": {"text": "print()"}}]
        json.dumps(data)

    def test_walk_is_pre_order(self):
        """Test walk yields containers before their content."""
        scope = RecordingScope()
        scope.block_quote(lambda: scope.basic_text("inner"))
        scope.basic_text("outer")
        assert [block.kind for block in scope.walk()] == ["block_quote", "text", "text"]
