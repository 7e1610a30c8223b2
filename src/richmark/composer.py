#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/composer.py
"""Interception protocol for block node rendering.

A composer lets callers take over rendering of chosen block node types.
For each block node, the renderer asks ``predicate(node.type)``; when it
answers True the renderer hands the node to ``compose`` together with a
``visit_children`` callback. Calling ``visit_children(some_node)`` renders
the children of ``some_node`` through the same renderer and composer, so a
composer can wrap default rendering, replace it, or skip a subtree.

Not calling ``visit_children`` drops the subtree from the output.

Examples
--------
Render every block quote as a heading-like callout, keeping its content:

    >>> def callout(scope, node, visit_children):
    ...     scope.basic_text("Note:")
    ...     visit_children(node)
    >>> composer = composer_for(AstBlockQuote, compose=callout)
    >>> basic_markdown(scope, document, composer)

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

from richmark.ast.nodes import AstBlockNodeType, AstNode
from richmark.scope import RichTextScope

VisitChildren = Callable[[AstNode], None]
ComposeFunction = Callable[[RichTextScope, AstNode, VisitChildren], None]


@runtime_checkable
class AstBlockNodeComposer(Protocol):
    """Protocol for objects intercepting block node rendering."""

    def predicate(self, ast_block_node_type: AstBlockNodeType) -> bool:
        """Return True if ``compose`` handles nodes of this type."""
        ...

    def compose(self, scope: RichTextScope, ast_node: AstNode, visit_children: VisitChildren) -> None:
        """Render ``ast_node`` into ``scope``.

        Parameters
        ----------
        scope : RichTextScope
            Sink to emit into
        ast_node : AstNode
            Node whose type satisfied ``predicate``
        visit_children : callable
            Renders the children of the node it is given, re-entering the
            renderer with this composer still active

        """
        ...


@dataclass(frozen=True)
class FunctionComposer:
    """Composer assembled from a predicate function and a compose function."""

    predicate_function: Callable[[AstBlockNodeType], bool]
    compose_function: ComposeFunction

    def predicate(self, ast_block_node_type: AstBlockNodeType) -> bool:
        return self.predicate_function(ast_block_node_type)

    def compose(self, scope: RichTextScope, ast_node: AstNode, visit_children: VisitChildren) -> None:
        self.compose_function(scope, ast_node, visit_children)


def block_node_composer(
    predicate: Callable[[AstBlockNodeType], bool],
    compose: ComposeFunction,
) -> AstBlockNodeComposer:
    """Build a composer from two functions."""
    return FunctionComposer(predicate, compose)


def composer_for(*block_types: type[AstBlockNodeType], compose: ComposeFunction) -> AstBlockNodeComposer:
    """Build a composer claiming the given block type classes.

    Parameters
    ----------
    *block_types : type
        Block node type classes to claim (e.g., ``AstTableRoot``)
    compose : callable
        Rendering function for claimed nodes

    Raises
    ------
    ValueError
        If no block types are given

    """
    if not block_types:
        raise ValueError("composer_for requires at least one block type")
    return FunctionComposer(lambda node_type: isinstance(node_type, block_types), compose)
