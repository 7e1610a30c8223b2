#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/parsers/__init__.py
"""Parsers producing richmark AST trees."""

from richmark.parsers.base import BaseParser
from richmark.parsers.markdown import MarkdownAstParser

__all__ = ["BaseParser", "MarkdownAstParser"]
