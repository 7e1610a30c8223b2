#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/ast/__init__.py
"""Abstract Syntax Tree (AST) module for Markdown documents.

The module consists of:

- nodes: node types and the linked ``AstNode`` tree structure
- utils: child iteration, filtering and pre-order walking
- builder: helpers for linking nodes into trees

Examples
--------
    >>> from richmark.ast import AstDocument, AstParagraph, AstText, ast_node
    >>> doc = ast_node(AstDocument(), ast_node(AstParagraph(), ast_node(AstText("Hello"))))

"""

from __future__ import annotations

from richmark.ast.builder import TreeBuilder, append_child, ast_node
from richmark.ast.nodes import (
    Alignment,
    AstBlockNodeType,
    AstBlockQuote,
    AstCode,
    AstDocument,
    AstEmphasis,
    AstFencedCodeBlock,
    AstFootDefinition,
    AstFootnoteReference,
    AstFootReferenceDefinition,
    AstHardLineBreak,
    AstHeading,
    AstHtmlBlock,
    AstHtmlInline,
    AstImage,
    AstIndentedCodeBlock,
    AstInlineNodeType,
    AstLink,
    AstLinkReferenceDefinition,
    AstListItem,
    AstNode,
    AstNodeLinks,
    AstNodeType,
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
from richmark.ast.utils import children_sequence, filter_children, filter_children_type, find_child_type, walk

__all__ = [
    "Alignment",
    "AstBlockNodeType",
    "AstBlockQuote",
    "AstCode",
    "AstDocument",
    "AstEmphasis",
    "AstFencedCodeBlock",
    "AstFootDefinition",
    "AstFootnoteReference",
    "AstFootReferenceDefinition",
    "AstHardLineBreak",
    "AstHeading",
    "AstHtmlBlock",
    "AstHtmlInline",
    "AstImage",
    "AstIndentedCodeBlock",
    "AstInlineNodeType",
    "AstLink",
    "AstLinkReferenceDefinition",
    "AstListItem",
    "AstNode",
    "AstNodeLinks",
    "AstNodeType",
    "AstOrderedList",
    "AstParagraph",
    "AstSoftLineBreak",
    "AstStrikethrough",
    "AstStrongEmphasis",
    "AstTableBody",
    "AstTableCell",
    "AstTableHeader",
    "AstTableRoot",
    "AstTableRow",
    "AstText",
    "AstThematicBreak",
    "AstUnorderedList",
    "TreeBuilder",
    "append_child",
    "ast_node",
    "children_sequence",
    "filter_children",
    "filter_children_type",
    "find_child_type",
    "walk",
]
