"""richmark - an interceptable Markdown AST renderer.

richmark walks a Markdown syntax tree and turns it into calls on an output
sink (a ``RichTextScope``). Every block node can be intercepted by a
composer before the default rendering applies, and malformed trees degrade
gracefully: anomalies are logged and skipped instead of raising.

Key Features
------------
- Linked AST with typed block and inline node tags
- Default rendering for every node type, replaceable per node
- Rich text strings with spans and embedded inline content
- Recording scope for inspection and testing
- Terminal output through rich
- Markdown parsing through mistune

Basic usage:
    >>> from richmark import render_markdown
    >>> scope = render_markdown("# Title\\n\\nHello *world*")
    >>> [block.kind for block in scope.blocks]
    ['heading', 'text']

Intercepting headings:
    >>> from richmark import AstHeading, composer_for, render_markdown
    >>> def shout(scope, node, visit_children):
    ...     scope.basic_text("HEADING")
    >>> scope = render_markdown("# Title", composer=composer_for(AstHeading, compose=shout))
    >>> scope.texts()
    ['HEADING']

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "richmark requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from richmark.api import parse_markdown, render_markdown, render_to_console
from richmark.ast import (
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
    TreeBuilder,
    ast_node,
)
from richmark.composer import AstBlockNodeComposer, block_node_composer, composer_for
from richmark.exceptions import (
    ConfigError,
    DependencyError,
    InvalidOptionsError,
    ParsingError,
    RenderingError,
    RichmarkError,
    ValidationError,
)
from richmark.options import ConsoleRendererOptions, MarkdownParserOptions
from richmark.renderer import DefaultAstNodeComposer, MarkdownAstRenderer, basic_markdown, render_children
from richmark.scope import ListType, RichTextScope, Semantics, TableCellData
from richmark.scopes import ConsoleScope, RecordingScope, RenderedBlock
from richmark.string import RichTextString, RichTextStringBuilder, rich_text_string

__all__ = [
    "__version__",
    # Entry points
    "basic_markdown",
    "render_children",
    "parse_markdown",
    "render_markdown",
    "render_to_console",
    "MarkdownAstRenderer",
    "DefaultAstNodeComposer",
    # Interception
    "AstBlockNodeComposer",
    "block_node_composer",
    "composer_for",
    # Output
    "RichTextScope",
    "ListType",
    "Semantics",
    "TableCellData",
    "RichTextString",
    "RichTextStringBuilder",
    "rich_text_string",
    "ConsoleScope",
    "RecordingScope",
    "RenderedBlock",
    # Options
    "ConsoleRendererOptions",
    "MarkdownParserOptions",
    # Exceptions
    "RichmarkError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigError",
    "ParsingError",
    "RenderingError",
    "DependencyError",
    # Tree
    "AstNode",
    "TreeBuilder",
    "ast_node",
    "AstDocument",
    "AstBlockQuote",
    "AstUnorderedList",
    "AstOrderedList",
    "AstListItem",
    "AstThematicBreak",
    "AstHeading",
    "AstIndentedCodeBlock",
    "AstFencedCodeBlock",
    "AstHtmlBlock",
    "AstLinkReferenceDefinition",
    "AstParagraph",
    "AstTableRoot",
    "AstTableHeader",
    "AstTableBody",
    "AstTableRow",
    "AstTableCell",
    "AstFootDefinition",
    "AstFootReferenceDefinition",
    "AstText",
    "AstCode",
    "AstEmphasis",
    "AstStrongEmphasis",
    "AstStrikethrough",
    "AstLink",
    "AstImage",
    "AstHtmlInline",
    "AstHardLineBreak",
    "AstSoftLineBreak",
    "AstFootnoteReference",
]
