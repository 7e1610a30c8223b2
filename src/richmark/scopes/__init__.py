#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/scopes/__init__.py
"""Concrete output scopes.

- RecordingScope: records output as a tree of data blocks
- ConsoleScope: builds rich renderables for terminal display (requires rich)
"""

from richmark.scopes.console import ConsoleScope
from richmark.scopes.recording import RecordingScope, RenderedBlock

__all__ = ["ConsoleScope", "RecordingScope", "RenderedBlock"]
