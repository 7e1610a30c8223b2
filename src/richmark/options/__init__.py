#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the richmark parser and output scopes.

Each component has its own frozen options dataclass. Use
``create_updated`` to derive modified copies.
"""

from __future__ import annotations

from richmark.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from richmark.options.console import ConsoleRendererOptions
from richmark.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "ConsoleRendererOptions",
    "MarkdownParserOptions",
]
