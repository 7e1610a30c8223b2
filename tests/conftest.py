"""Pytest configuration and shared fixtures for the richmark test suite."""

import pytest

from richmark.ast import AstDocument, AstNode, AstParagraph, AstText, ast_node
from richmark.scopes import RecordingScope


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def recording_scope() -> RecordingScope:
    """Provide an empty recording scope."""
    return RecordingScope()


@pytest.fixture
def simple_document() -> AstNode:
    """Provide a document with two paragraphs."""
    return ast_node(
        AstDocument(),
        ast_node(AstParagraph(), ast_node(AstText("first"))),
        ast_node(AstParagraph(), ast_node(AstText("second"))),
    )
