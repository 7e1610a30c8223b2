#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_traversal.py
"""Tests for AST traversal and filtering helpers."""

import pytest

from richmark.ast import (
    AstBlockQuote,
    AstDocument,
    AstListItem,
    AstParagraph,
    AstText,
    AstThematicBreak,
    AstUnorderedList,
    append_child,
    ast_node,
    children_sequence,
    filter_children,
    filter_children_type,
    find_child_type,
    walk,
)


def _list_with_stray_paragraph():
    return ast_node(
        AstUnorderedList(),
        ast_node(AstListItem()),
        ast_node(AstParagraph()),
        ast_node(AstListItem()),
    )


@pytest.mark.unit
class TestChildrenSequence:
    """Tests for children_sequence."""

    def test_document_order(self):
        """Test children are yielded first to last."""
        doc = ast_node(AstDocument(), ast_node(AstText("a")), ast_node(AstText("b")), ast_node(AstText("c")))
        assert [child.type.literal for child in children_sequence(doc)] == ["a", "b", "c"]

    def test_reverse_order(self):
        """Test reverse iteration walks from the last child."""
        doc = ast_node(AstDocument(), ast_node(AstText("a")), ast_node(AstText("b")))
        assert [child.type.literal for child in children_sequence(doc, reverse=True)] == ["b", "a"]

    def test_none_and_leaf(self):
        """Test None and childless nodes yield nothing."""
        assert list(children_sequence(None)) == []
        assert list(children_sequence(ast_node(AstThematicBreak()))) == []


@pytest.mark.unit
class TestFiltering:
    """Tests for child filtering helpers."""

    def test_filter_children_type(self):
        """Test only matching types are yielded."""
        items = list(filter_children_type(_list_with_stray_paragraph(), AstListItem))
        assert len(items) == 2
        assert all(isinstance(item.type, AstListItem) for item in items)

    def test_filter_children_predicate(self):
        """Test arbitrary predicates."""
        node = _list_with_stray_paragraph()
        assert len(list(filter_children(node, lambda child: isinstance(child.type, AstParagraph)))) == 1

    def test_find_child_type(self):
        """Test the first match is returned, or None."""
        node = _list_with_stray_paragraph()
        assert find_child_type(node, AstParagraph) is node.links.first_child.links.next
        assert find_child_type(node, AstBlockQuote) is None


@pytest.mark.unit
class TestWalk:
    """Tests for walk."""

    def test_pre_order(self):
        """Test nodes are yielded parent first, then children in order."""
        doc = ast_node(
            AstDocument(),
            ast_node(AstBlockQuote(), ast_node(AstParagraph(), ast_node(AstText("q")))),
            ast_node(AstParagraph(), ast_node(AstText("p"))),
        )
        names = [type(node.type).__name__ for node in walk(doc)]
        assert names == ["AstDocument", "AstBlockQuote", "AstParagraph", "AstText", "AstParagraph", "AstText"]

    def test_deep_tree(self):
        """Test a tree deeper than the recursion limit can be walked."""
        root = ast_node(AstDocument())
        current = root
        for _ in range(5000):
            current = append_child(current, ast_node(AstBlockQuote()))
        assert sum(1 for _ in walk(root)) == 5001
