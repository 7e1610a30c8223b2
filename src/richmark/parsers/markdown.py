#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/parsers/markdown.py
"""Markdown to AST converter.

This module parses Markdown with mistune and converts its token stream into
a linked richmark tree, ready to be handed to the renderer.

Token mapping
-------------
- heading -> AstHeading, paragraph / block_text -> AstParagraph
- block_code -> AstFencedCodeBlock or AstIndentedCodeBlock (by ``style``)
- block_quote -> AstBlockQuote, thematic_break -> AstThematicBreak
- list -> AstOrderedList / AstUnorderedList, list_item -> AstListItem
- block_html -> AstHtmlBlock
- table -> AstTableRoot / AstTableHeader / AstTableBody / AstTableRow / AstTableCell
- footnotes -> one AstFootReferenceDefinition per definition, body as children
- link reference definitions -> AstLinkReferenceDefinition, appended last

"""

from __future__ import annotations

import logging
from typing import Any, Optional

from richmark.ast.builder import append_child, ast_node
from richmark.ast.nodes import (
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
    AstNode,
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
)
from richmark.ast.utils import children_sequence
from richmark.constants import DEPS_MARKDOWN
from richmark.options.markdown import MarkdownParserOptions
from richmark.parsers.base import BaseParser, ParserInput
from richmark.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)

_ALIGNMENTS = ("left", "center", "right")


class MarkdownAstParser(BaseParser):
    r"""Convert Markdown text to a richmark AST.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> parser = MarkdownAstParser()
        >>> doc = parser.parse("# Hello\\n\\nThis is **bold**.")

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    @requires_dependencies("markdown parser", DEPS_MARKDOWN)
    def parse(self, input_data: ParserInput) -> AstNode:
        """Parse Markdown input into a tree rooted at ``AstDocument``."""
        import mistune

        markdown_content = self._load_text_content(input_data)
        markdown = mistune.create_markdown(renderer=None, plugins=self.options.plugin_names())

        with debug_timer(logger, "Parsing (markdown)"):
            tokens, state = markdown.parse(markdown_content)

        document = AstNode(AstDocument())
        if isinstance(tokens, list):
            self._append_blocks(document, tokens)

        for label, definition in state.env.get("ref_links", {}).items():
            append_child(
                document,
                AstNode(
                    AstLinkReferenceDefinition(
                        label=definition.get("label", label),
                        destination=definition.get("url", ""),
                        title=definition.get("title") or "",
                    )
                ),
            )

        if self.options.fade_out_last_paragraph:
            self._mark_last_paragraph(document)

        return document

    def _append_blocks(self, parent: AstNode, tokens: list[dict[str, Any]]) -> None:
        for token in tokens:
            if not isinstance(token, dict):
                continue
            if token.get("type") == "footnotes":
                self._append_blocks(parent, token.get("children", []))
                continue
            node = self._process_block(token)
            if node is not None:
                append_child(parent, node)

    def _process_block(self, token: dict[str, Any]) -> Optional[AstNode]:
        """Convert one block token. Returns None for tokens with no node."""
        token_type = token.get("type", "")
        attrs = token.get("attrs") or {}

        if token_type == "heading":
            level = attrs.get("level", 1)
            if not isinstance(level, int) or not 1 <= level <= 6:
                level = 1
            return self._inline_container(AstHeading(level=level), token)
        elif token_type in ("paragraph", "block_text"):
            return self._inline_container(AstParagraph(), token)
        elif token_type == "block_code":
            literal = token.get("raw", "")
            if token.get("style") == "indent":
                return AstNode(AstIndentedCodeBlock(literal=literal))
            marker = token.get("marker") or "```"
            return AstNode(
                AstFencedCodeBlock(
                    literal=literal,
                    info=(attrs.get("info") or "").strip(),
                    fence_char=marker[0],
                    fence_length=len(marker),
                )
            )
        elif token_type == "block_quote":
            return self._block_container(AstBlockQuote(), token)
        elif token_type == "list":
            if attrs.get("ordered", False):
                list_type: Any = AstOrderedList(start_number=attrs.get("start", 1), delimiter=token.get("bullet", "."))
            else:
                list_type = AstUnorderedList(bullet_marker=token.get("bullet", "-"))
            return self._block_container(list_type, token)
        elif token_type == "list_item":
            return self._block_container(AstListItem(), token)
        elif token_type == "thematic_break":
            return AstNode(AstThematicBreak())
        elif token_type == "block_html":
            return AstNode(AstHtmlBlock(literal=token.get("raw", "")))
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "footnote_item":
            label = str(attrs.get("key", attrs.get("index", "")))
            return self._block_container(AstFootReferenceDefinition(label=label), token)
        elif token_type == "blank_line":
            return None

        logger.debug("Ignoring unsupported markdown token %r", token_type)
        return None

    def _block_container(self, node_type: Any, token: dict[str, Any]) -> AstNode:
        node = AstNode(node_type)
        self._append_blocks(node, token.get("children", []))
        return node

    def _inline_container(self, node_type: Any, token: dict[str, Any]) -> AstNode:
        node = AstNode(node_type)
        self._append_inlines(node, token.get("children", []))
        return node

    def _process_table(self, token: dict[str, Any]) -> AstNode:
        table = AstNode(AstTableRoot())
        for section_token in token.get("children", []):
            section_type = section_token.get("type", "")
            if section_type == "table_head":
                # mistune puts header cells directly under table_head
                row = self._table_row(section_token.get("children", []), header=True)
                append_child(table, ast_node(AstTableHeader(), row))
            elif section_type == "table_body":
                body = AstNode(AstTableBody())
                for row_token in section_token.get("children", []):
                    append_child(body, self._table_row(row_token.get("children", []), header=False))
                append_child(table, body)
        return table

    def _table_row(self, cell_tokens: list[dict[str, Any]], header: bool) -> AstNode:
        row = AstNode(AstTableRow())
        for cell_token in cell_tokens:
            if cell_token.get("type") != "table_cell":
                continue
            align = (cell_token.get("attrs") or {}).get("align")
            cell = AstTableCell(header=header, alignment=align if align in _ALIGNMENTS else None)
            append_child(row, self._inline_container(cell, cell_token))
        return row

    def _append_inlines(self, parent: AstNode, tokens: list[dict[str, Any]]) -> None:
        for token in tokens:
            node = self._process_inline(token)
            if node is not None:
                append_child(parent, node)

    def _process_inline(self, token: dict[str, Any]) -> Optional[AstNode]:
        token_type = token.get("type", "")
        attrs = token.get("attrs") or {}

        if token_type == "text":
            return AstNode(AstText(literal=token.get("raw", "")))
        elif token_type == "codespan":
            return AstNode(AstCode(literal=token.get("raw", "")))
        elif token_type == "emphasis":
            return self._inline_container(AstEmphasis(), token)
        elif token_type == "strong":
            return self._inline_container(AstStrongEmphasis(), token)
        elif token_type == "strikethrough":
            return self._inline_container(AstStrikethrough(), token)
        elif token_type == "link":
            link = AstLink(destination=attrs.get("url", ""), title=attrs.get("title") or "")
            return self._inline_container(link, token)
        elif token_type == "image":
            image = AstImage(destination=attrs.get("url", ""), title=attrs.get("title") or "")
            return self._inline_container(image, token)
        elif token_type == "inline_html":
            return AstNode(AstHtmlInline(literal=token.get("raw", "")))
        elif token_type == "softbreak":
            return AstNode(AstSoftLineBreak())
        elif token_type == "linebreak":
            return AstNode(AstHardLineBreak())
        elif token_type == "footnote_ref":
            return AstNode(AstFootnoteReference(label=str(token.get("raw", attrs.get("index", "")))))

        logger.debug("Ignoring unsupported inline token %r", token_type)
        return None

    @staticmethod
    def _mark_last_paragraph(document: AstNode) -> None:
        for child in children_sequence(document, reverse=True):
            if isinstance(child.type, AstParagraph):
                child.type = AstParagraph(fade_out_effect=True)
                return
