#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/ast/builder.py
"""Builder helpers for constructing linked AST trees.

Linking nodes by hand means keeping five pointers consistent per child.
These helpers do that bookkeeping so parsers and tests can describe a tree
in one nested expression or incrementally.

"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from richmark.ast.nodes import AstDocument, AstNode, AstNodeType


def append_child(parent: AstNode, child: AstNode) -> AstNode:
    """Link ``child`` as the last child of ``parent``.

    Parameters
    ----------
    parent : AstNode
        Node receiving the child
    child : AstNode
        Detached node to attach

    Returns
    -------
    AstNode
        The attached child

    Raises
    ------
    ValueError
        If ``child`` is already attached somewhere, or is ``parent`` itself

    """
    if child is parent:
        raise ValueError("A node cannot be its own child")
    if child.links.parent is not None or child.links.previous is not None or child.links.next is not None:
        raise ValueError("Node is already attached to a tree")

    child.links.parent = parent
    tail = parent.links.last_child
    if tail is None:
        parent.links.first_child = child
    else:
        tail.links.next = child
        child.links.previous = tail
    parent.links.last_child = child
    return child


def ast_node(node_type: AstNodeType, *children: AstNode) -> AstNode:
    """Create a node and attach ``children`` to it in order.

    Examples
    --------
    >>> doc = ast_node(
    ...     AstDocument(),
    ...     ast_node(AstParagraph(), ast_node(AstText("Hello"))),
    ... )

    """
    node = AstNode(node_type)
    for child in children:
        append_child(node, child)
    return node


class TreeBuilder:
    """Incremental tree construction with a container stack.

    Parameters
    ----------
    root_type : AstNodeType, default = AstDocument()
        Type of the root node

    Examples
    --------
    >>> builder = TreeBuilder()
    >>> with builder.container(AstBlockQuote()):
    ...     with builder.container(AstParagraph()):
    ...         builder.leaf(AstText("quoted"))
    >>> doc = builder.root

    """

    def __init__(self, root_type: AstNodeType | None = None):
        """Initialize the builder with a fresh root node."""
        self.root = AstNode(root_type if root_type is not None else AstDocument())
        self._stack: list[AstNode] = [self.root]

    @property
    def current(self) -> AstNode:
        """Node that new children are appended to."""
        return self._stack[-1]

    def leaf(self, node_type: AstNodeType) -> AstNode:
        """Append a childless node to the current container."""
        return append_child(self.current, AstNode(node_type))

    def add(self, node: AstNode) -> AstNode:
        """Append an already built subtree to the current container."""
        return append_child(self.current, node)

    @contextmanager
    def container(self, node_type: AstNodeType) -> Iterator[AstNode]:
        """Append a node and make it the current container inside the block."""
        node = append_child(self.current, AstNode(node_type))
        self._stack.append(node)
        try:
            yield node
        finally:
            self._stack.pop()
