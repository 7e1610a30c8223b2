#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/renderer.py
"""Recursive Markdown AST rendering.

This module walks a parsed Markdown tree and turns every node into calls on
a ``RichTextScope``. The walk is depth-first and in document order. At each
node the renderer decides who renders it:

- if a composer is active, the node is a block node, and
  ``composer.predicate(node.type)`` is True, the composer renders it;
- otherwise ``DefaultAstNodeComposer`` does.

Either way the renderer passes a ``visit_children`` callback bound to itself,
so children visited from a composer go through the same decision again.

The default rules make a few structural assumptions a generic tree does not
enforce:

- Headings and paragraphs are text containers. Their inline children are
  rendered as one block of styled text and are not walked as nodes.
- Unordered lists only render ``AstListItem`` children; anything else is
  dropped. Ordered lists render every child (kept for compatibility with
  existing output).
- Tables are handed to the table renderer as a whole.

Nodes found where they should not be (raw text in block position, list items
outside a list, table parts outside a table, inline nodes) are logged and
either rendered as plain text or skipped. A malformed tree never raises.

"""

from __future__ import annotations

import logging
import sys
from typing import Optional

if sys.version_info >= (3, 11):
    from typing import Never
else:
    from typing_extensions import Never

from richmark.ast.nodes import (
    AstBlockNodeType,
    AstBlockQuote,
    AstDocument,
    AstFencedCodeBlock,
    AstFootDefinition,
    AstFootReferenceDefinition,
    AstHeading,
    AstHtmlBlock,
    AstIndentedCodeBlock,
    AstInlineNodeType,
    AstLinkReferenceDefinition,
    AstListItem,
    AstNode,
    AstOrderedList,
    AstParagraph,
    AstTableBody,
    AstTableCell,
    AstTableHeader,
    AstTableRoot,
    AstTableRow,
    AstText,
    AstThematicBreak,
    AstUnorderedList,
)
from richmark.ast.utils import children_sequence, filter_children_type
from richmark.composer import AstBlockNodeComposer, VisitChildren
from richmark.html import html_block
from richmark.inline import markdown_rich_text
from richmark.scope import ListType, RichTextScope, Semantics
from richmark.string import InlineContent, RichTextString, rich_text_string
from richmark.table import render_table
from richmark.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


class DefaultAstNodeComposer:
    """Fallback composer with one rendering rule per block node type.

    Parameters
    ----------
    log : logging.Logger, optional
        Diagnostic sink for nodes in unexpected positions. Defaults to this
        module's logger.

    """

    def __init__(self, log: Optional[logging.Logger] = None):
        """Initialize the composer with its diagnostic sink."""
        self.log = log or logger

    def predicate(self, ast_block_node_type: AstBlockNodeType) -> bool:
        return True

    def compose(self, scope: RichTextScope, ast_node: AstNode, visit_children: VisitChildren) -> None:
        """Render ``ast_node`` with the default rule for its type."""
        node_type = ast_node.type

        if isinstance(node_type, AstDocument):
            visit_children(ast_node)

        elif isinstance(node_type, AstBlockQuote):
            scope.block_quote(lambda: visit_children(ast_node))

        elif isinstance(node_type, AstUnorderedList):
            scope.formatted_list(
                ListType.UNORDERED,
                list(filter_children_type(ast_node, AstListItem)),
                lambda item: self._draw_list_item(scope, item, visit_children),
            )

        elif isinstance(node_type, AstOrderedList):
            # TODO: filter to AstListItem like unordered lists once callers no
            # longer depend on stray children being rendered as items.
            scope.formatted_list(
                ListType.ORDERED,
                list(children_sequence(ast_node)),
                lambda item: self._draw_list_item(scope, item, visit_children),
                start_index=node_type.start_number - 1,
            )

        elif isinstance(node_type, AstThematicBreak):
            scope.horizontal_rule()

        elif isinstance(node_type, AstHeading):
            scope.heading(
                node_type.level,
                lambda: markdown_rich_text(scope, ast_node, semantics=Semantics.HEADING, log=self.log),
            )

        elif isinstance(node_type, (AstIndentedCodeBlock, AstFencedCodeBlock)):
            scope.code_block(node_type.literal.strip())

        elif isinstance(node_type, AstHtmlBlock):
            literal = node_type.literal
            scope.text(
                rich_text_string(
                    lambda builder: builder.append_inline_content(
                        InlineContent(content=lambda inner: html_block(inner, literal))
                    )
                )
            )

        elif isinstance(node_type, AstLinkReferenceDefinition):
            pass

        elif isinstance(node_type, AstParagraph):
            markdown_rich_text(scope, ast_node, fade_out_effect=node_type.fade_out_effect, log=self.log)

        elif isinstance(node_type, AstTableRoot):
            render_table(scope, ast_node, self.log)

        elif isinstance(node_type, AstText):
            # Text belongs under a heading, paragraph or table cell. Render it
            # anyway rather than lose content.
            self.log.warning("Unexpected raw text while traversing the Abstract Syntax Tree.")
            scope.text(RichTextString.plain(node_type.literal))

        elif isinstance(node_type, AstListItem):
            self.log.warning("Unexpected AstListItem while traversing the Abstract Syntax Tree.")

        elif isinstance(node_type, AstInlineNodeType):
            self.log.warning(
                "Unexpected inline node %s while traversing the Abstract Syntax Tree.", type(node_type).__name__
            )

        elif isinstance(node_type, (AstTableBody, AstTableHeader, AstTableRow, AstTableCell)):
            self.log.warning("Unexpected Table node while traversing the Abstract Syntax Tree.")

        elif isinstance(node_type, AstFootDefinition):
            scope.text(RichTextString.plain(node_type.label))

        elif isinstance(node_type, AstFootReferenceDefinition):
            scope.text(RichTextString.plain(node_type.label))
            visit_children(ast_node)

        else:
            self._unhandled(node_type)

    def _draw_list_item(self, scope: RichTextScope, item: AstNode, visit_children: VisitChildren) -> None:
        # An empty item still emits a zero-content block so it keeps its line.
        if item.links.first_child is None:
            scope.basic_text("")
        else:
            visit_children(item)

    def _unhandled(self, node_type: Never) -> None:
        # Statically unreachable; types outside AstNodeType can still arrive at runtime.
        self.log.warning("No rendering rule for node type %s, skipping it.", type(node_type).__name__)


class MarkdownAstRenderer:
    """Render a Markdown tree into a scope, with optional interception.

    Parameters
    ----------
    scope : RichTextScope
        Sink receiving the output
    composer : AstBlockNodeComposer, optional
        Interceptor that may claim block node types
    log : logging.Logger, optional
        Diagnostic sink for structural anomalies. Defaults to this module's
        logger.

    Examples
    --------
        >>> scope = RecordingScope()
        >>> MarkdownAstRenderer(scope).render(document)
        >>> scope.blocks

    """

    def __init__(
        self,
        scope: RichTextScope,
        composer: Optional[AstBlockNodeComposer] = None,
        log: Optional[logging.Logger] = None,
    ):
        """Initialize the renderer for one scope and composer."""
        self.scope = scope
        self.composer = composer
        self.log = log or logger
        self.default_composer = DefaultAstNodeComposer(self.log)

    def render(self, ast_node: Optional[AstNode]) -> None:
        """Render ``ast_node`` and, as its rule decides, its descendants.

        ``None`` renders nothing.
        """
        if ast_node is None:
            return

        composer = self.composer
        if (
            composer is not None
            and isinstance(ast_node.type, AstBlockNodeType)
            and composer.predicate(ast_node.type)
        ):
            composer.compose(self.scope, ast_node, self.render_children)
        else:
            self.default_composer.compose(self.scope, ast_node, self.render_children)

    def render_children(self, node: Optional[AstNode]) -> None:
        """Render the direct children of ``node`` from first to last."""
        for child in children_sequence(node):
            self.render(child)


def basic_markdown(
    scope: RichTextScope,
    ast_node: Optional[AstNode],
    ast_block_node_composer: Optional[AstBlockNodeComposer] = None,
    log: Optional[logging.Logger] = None,
) -> None:
    """Render a Markdown tree into ``scope``.

    Parameters
    ----------
    scope : RichTextScope
        Sink receiving the output
    ast_node : AstNode or None
        Root of the tree, usually an ``AstDocument`` node from a parser
    ast_block_node_composer : AstBlockNodeComposer, optional
        Interceptor taking over rendering of the block types it claims
    log : logging.Logger, optional
        Diagnostic sink for structural anomalies

    """
    renderer = MarkdownAstRenderer(scope, ast_block_node_composer, log)
    with debug_timer(renderer.log, "Rendering"):
        renderer.render(ast_node)


def render_children(
    scope: RichTextScope,
    node: Optional[AstNode],
    ast_block_node_composer: Optional[AstBlockNodeComposer] = None,
    log: Optional[logging.Logger] = None,
) -> None:
    """Render only the direct children of ``node`` (and their subtrees)."""
    MarkdownAstRenderer(scope, ast_block_node_composer, log).render_children(node)
