#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_parser.py
"""Tests for converting Markdown into richmark trees."""

import io

import pytest

pytest.importorskip("mistune")

from richmark.ast import (  # noqa: E402
    AstBlockQuote,
    AstCode,
    AstDocument,
    AstEmphasis,
    AstFencedCodeBlock,
    AstFootnoteReference,
    AstFootReferenceDefinition,
    AstHardLineBreak,
    AstHeading,
    AstHtmlBlock,
    AstHtmlInline,
    AstImage,
    AstIndentedCodeBlock,
    AstLink,
    AstLinkReferenceDefinition,
    AstListItem,
    AstOrderedList,
    AstParagraph,
    AstSoftLineBreak,
    AstStrikethrough,
    AstStrongEmphasis,
    AstTableBody,
    AstTableCell,
    AstTableHeader,
    AstTableRoot,
    AstTableRow,
    AstText,
    AstThematicBreak,
    AstUnorderedList,
    children_sequence,
    walk,
)
from richmark.exceptions import InvalidOptionsError, ParsingError  # noqa: E402
from richmark.options import ConsoleRendererOptions, MarkdownParserOptions  # noqa: E402
from richmark.parsers import MarkdownAstParser  # noqa: E402


def _parse(text, **options):
    return MarkdownAstParser(MarkdownParserOptions(**options)).parse(text)


def _blocks(doc):
    return list(children_sequence(doc))


def _types(node):
    return [type(child.type) for child in children_sequence(node)]


def _find(doc, node_type):
    return [node for node in walk(doc) if isinstance(node.type, node_type)]


@pytest.mark.unit
class TestBlockTokens:
    """Tests for block-level conversion."""

    def test_heading_and_paragraph(self):
        """Test headings and paragraphs with their inline children."""
        doc = _parse("## Title\n\nSome *text*.\n")
        assert isinstance(doc.type, AstDocument)
        heading, paragraph = _blocks(doc)
        assert heading.type == AstHeading(level=2)
        assert heading.links.first_child.type == AstText("Title")
        assert _types(paragraph) == [AstText, AstEmphasis, AstText]

    def test_fenced_code(self):
        """Test fenced code keeps its info string and literal."""
        (code,) = _blocks(_parse("```python\nx = 1\n```\n"))
        assert isinstance(code.type, AstFencedCodeBlock)
        assert code.type.info == "python"
        assert code.type.literal == "x = 1\n"
        assert code.type.fence_char == "`"
        assert code.type.fence_length == 3

    def test_indented_code(self):
        """Test indented code becomes an indented code block."""
        (code,) = _blocks(_parse("    indented\n"))
        assert isinstance(code.type, AstIndentedCodeBlock)
        assert code.type.literal.strip() == "indented"

    def test_block_quote(self):
        """Test quotes contain their paragraphs."""
        (quote,) = _blocks(_parse("> quoted\n"))
        assert isinstance(quote.type, AstBlockQuote)
        assert _types(quote) == [AstParagraph]

    def test_thematic_break(self):
        """Test thematic breaks."""
        doc = _parse("before\n\n***\n\nafter\n")
        assert _types(doc) == [AstParagraph, AstThematicBreak, AstParagraph]

    def test_unordered_list(self):
        """Test bullet lists and their items."""
        (lst,) = _blocks(_parse("- a\n- b\n"))
        assert lst.type == AstUnorderedList(bullet_marker="-")
        assert _types(lst) == [AstListItem, AstListItem]
        first_item = lst.links.first_child
        assert _types(first_item) == [AstParagraph]

    def test_ordered_list_start(self):
        """Test ordered lists keep their start number."""
        (lst,) = _blocks(_parse("3. c\n4. d\n"))
        assert isinstance(lst.type, AstOrderedList)
        assert lst.type.start_number == 3
        assert len(_types(lst)) == 2

    def test_html_block(self):
        """Test block HTML is kept as a literal."""
        (html,) = _blocks(_parse("<div>\n<p>hi</p>\n</div>\n"))
        assert isinstance(html.type, AstHtmlBlock)
        assert "<p>hi</p>" in html.type.literal

    def test_table(self):
        """Test tables with header, body and alignment."""
        (table,) = _blocks(_parse("| a | b |\n|:--|--:|\n| 1 | 2 |\n"))
        assert isinstance(table.type, AstTableRoot)
        header, body = _blocks(table)
        assert isinstance(header.type, AstTableHeader)
        assert isinstance(body.type, AstTableBody)

        header_row = header.links.first_child
        assert isinstance(header_row.type, AstTableRow)
        header_cells = _blocks(header_row)
        assert header_cells[0].type == AstTableCell(header=True, alignment="left")
        assert header_cells[1].type == AstTableCell(header=True, alignment="right")

        body_cells = _blocks(body.links.first_child)
        assert body_cells[0].links.first_child.type == AstText("1")
        assert body_cells[1].type.header is False

    def test_tables_disabled(self):
        """Test pipe tables stay paragraphs when the table plugin is off."""
        doc = _parse("| a | b |\n|---|---|\n| 1 | 2 |\n", parse_tables=False)
        assert not _find(doc, AstTableRoot)

    def test_link_reference_definition(self):
        """Test link reference definitions are appended after the content."""
        doc = _parse('[site][ref]\n\n[ref]: https://example.com "Example"\n')
        blocks = _blocks(doc)
        assert isinstance(blocks[-1].type, AstLinkReferenceDefinition)
        assert blocks[-1].type.destination == "https://example.com"
        assert blocks[-1].type.title == "Example"
        (link,) = _find(doc, AstLink)
        assert link.type.destination == "https://example.com"


@pytest.mark.unit
class TestInlineTokens:
    """Tests for inline conversion."""

    def test_emphasis_strong_code(self):
        """Test emphasis, strong and code spans."""
        doc = _parse("*a* **b** `c`\n")
        (paragraph,) = _blocks(doc)
        types = _types(paragraph)
        assert AstEmphasis in types
        assert AstStrongEmphasis in types
        assert AstCode in types
        (code,) = _find(doc, AstCode)
        assert code.type.literal == "c"

    def test_strikethrough(self):
        """Test strikethrough spans."""
        assert _find(_parse("~~gone~~\n"), AstStrikethrough)
        assert not _find(_parse("~~gone~~\n", parse_strikethrough=False), AstStrikethrough)

    def test_link_and_image(self):
        """Test links and images keep their destinations."""
        doc = _parse('[text](https://example.com "T") ![alt](img.png)\n')
        (link,) = _find(doc, AstLink)
        assert link.type == AstLink("https://example.com", "T")
        (image,) = _find(doc, AstImage)
        assert image.type.destination == "img.png"
        assert image.links.first_child.type == AstText("alt")

    def test_line_breaks(self):
        """Test soft and hard line breaks."""
        assert _find(_parse("a\nb\n"), AstSoftLineBreak)
        assert _find(_parse("a  \nb\n"), AstHardLineBreak)

    def test_inline_html(self):
        """Test inline HTML stays literal."""
        assert _find(_parse("a <b>bold</b> c\n"), AstHtmlInline)

    def test_footnotes(self):
        """Test footnote references and definitions."""
        doc = _parse("Text[^1]\n\n[^1]: The note.\n")
        (reference,) = _find(doc, AstFootnoteReference)
        assert reference.type.label == "1"
        definition = _blocks(doc)[-1]
        assert definition.type == AstFootReferenceDefinition(label="1")
        assert _types(definition) == [AstParagraph]

    def test_footnotes_disabled(self):
        """Test footnotes are not parsed when disabled."""
        doc = _parse("Text[^1]\n\n[^1]: The note.\n", parse_footnotes=False)
        assert not _find(doc, AstFootnoteReference)
        assert not _find(doc, AstFootReferenceDefinition)


@pytest.mark.unit
class TestParserInputAndOptions:
    """Tests for input handling and options."""

    def test_fade_out_last_paragraph(self):
        """Test only the final top-level paragraph is marked."""
        doc = _parse("first\n\nsecond\n\n- item\n", fade_out_last_paragraph=True)
        paragraphs = [block for block in _blocks(doc) if isinstance(block.type, AstParagraph)]
        assert [p.type.fade_out_effect for p in paragraphs] == [False, True]

    def test_empty_input(self):
        """Test empty input yields an empty document."""
        doc = _parse("")
        assert isinstance(doc.type, AstDocument)
        assert _blocks(doc) == []

    def test_bytes_path_and_stream(self, tmp_path):
        """Test bytes, paths and streams are accepted."""
        path = tmp_path / "doc.md"
        path.write_text("# From file\n", encoding="utf-8")
        parser = MarkdownAstParser()
        for source in (b"# From file\n", path, io.StringIO("# From file\n"), io.BytesIO(b"# From file\n")):
            (heading,) = _blocks(parser.parse(source))
            assert heading.links.first_child.type == AstText("From file")

    def test_missing_file(self, tmp_path):
        """Test an unreadable path raises ParsingError."""
        with pytest.raises(ParsingError):
            MarkdownAstParser().parse(tmp_path / "missing.md")

    def test_unsupported_input(self):
        """Test unsupported input types raise ParsingError."""
        with pytest.raises(ParsingError):
            MarkdownAstParser().parse(42)  # type: ignore[arg-type]

    def test_wrong_options_type(self):
        """Test the wrong options class raises InvalidOptionsError."""
        with pytest.raises(InvalidOptionsError):
            MarkdownAstParser(ConsoleRendererOptions())  # type: ignore[arg-type]

    def test_plugin_names(self):
        """Test options map onto mistune plugins."""
        assert MarkdownParserOptions().plugin_names() == ["strikethrough", "table", "footnotes"]
        assert MarkdownParserOptions(parse_tables=False, parse_footnotes=False).plugin_names() == ["strikethrough"]
