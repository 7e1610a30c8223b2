#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing."""
# src/richmark/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from richmark.constants import (
    DEFAULT_FADE_OUT_LAST_PARAGRAPH,
    DEFAULT_PARSE_FOOTNOTES,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TABLES,
)
from richmark.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_footnotes : bool, default True
        Whether to parse footnote references and definitions.
    fade_out_last_paragraph : bool, default False
        Mark the final top-level paragraph with the fade-out rendering hint.
        Useful when rendering text that is still being streamed in.

    """

    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse GFM pipe tables", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse ~~strikethrough~~ spans", "importance": "core"},
    )
    parse_footnotes: bool = field(
        default=DEFAULT_PARSE_FOOTNOTES,
        metadata={"help": "Parse footnote references and definitions", "importance": "core"},
    )
    fade_out_last_paragraph: bool = field(
        default=DEFAULT_FADE_OUT_LAST_PARAGRAPH,
        metadata={"help": "Apply the fade-out hint to the final paragraph (streaming output)", "importance": "advanced"},
    )

    def plugin_names(self) -> list[str]:
        """Return the mistune plugin names enabled by these options."""
        plugins = []
        if self.parse_strikethrough:
            plugins.append("strikethrough")
        if self.parse_tables:
            plugins.append("table")
        if self.parse_footnotes:
            plugins.append("footnotes")
        return plugins
