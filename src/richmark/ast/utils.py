#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/ast/utils.py
"""Traversal and filtering helpers for linked AST nodes."""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from richmark.ast.nodes import AstNode


def children_sequence(node: Optional[AstNode], reverse: bool = False) -> Iterator[AstNode]:
    """Yield the direct children of a node in document order.

    Parameters
    ----------
    node : AstNode or None
        Parent node. ``None`` yields nothing.
    reverse : bool, default = False
        Walk from the last child to the first instead

    Yields
    ------
    AstNode
        Each direct child

    """
    if node is None:
        return
    child = node.links.last_child if reverse else node.links.first_child
    while child is not None:
        yield child
        child = child.links.previous if reverse else child.links.next


def filter_children(node: Optional[AstNode], predicate: Callable[[AstNode], bool]) -> Iterator[AstNode]:
    """Yield the direct children of a node that satisfy ``predicate``."""
    return (child for child in children_sequence(node) if predicate(child))


def filter_children_type(node: Optional[AstNode], *node_types: type) -> Iterator[AstNode]:
    """Yield the direct children whose node type is one of ``node_types``.

    Examples
    --------
    >>> items = list(filter_children_type(list_node, AstListItem))

    """
    return filter_children(node, lambda child: isinstance(child.type, node_types))


def find_child_type(node: Optional[AstNode], *node_types: type) -> Optional[AstNode]:
    """Return the first direct child of one of ``node_types``, or None."""
    return next(filter_children_type(node, *node_types), None)


def walk(node: Optional[AstNode]) -> Iterator[AstNode]:
    """Yield a subtree in pre-order (document order).

    Uses an explicit stack, so arbitrarily deep trees are safe to walk.

    Parameters
    ----------
    node : AstNode or None
        Subtree root, yielded first

    Yields
    ------
    AstNode
        Every node reachable through first-child / next-sibling links

    """
    if node is None:
        return
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(children_sequence(current, reverse=True))
