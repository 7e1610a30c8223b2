#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the terminal (rich) scope."""
# src/richmark/options/console.py


from __future__ import annotations

from dataclasses import dataclass, field

from richmark.constants import (
    DEFAULT_BULLET,
    DEFAULT_CODE_STYLE,
    DEFAULT_CODE_THEME,
    DEFAULT_FADE_OUT_STYLE,
    DEFAULT_HEADING_STYLES,
    DEFAULT_LINK_STYLE,
    DEFAULT_QUOTE_BORDER_STYLE,
    DEFAULT_SHOW_LINK_URLS,
)
from richmark.options.base import BaseRendererOptions


@dataclass(frozen=True)
class ConsoleRendererOptions(BaseRendererOptions):
    """Options controlling how the console scope styles its output.

    Style values are rich style definitions (e.g., ``"bold red"``).

    Parameters
    ----------
    code_theme : str, default "monokai"
        Pygments theme used for code blocks.
    heading_styles : tuple of str
        One style per heading level, 1 through 6.
    quote_border_style : str, default "dim"
        Border style of block quote panels.
    bullet : str, default "•"
        Marker for unordered list items.
    code_style : str, default "bold cyan"
        Style of inline code spans.
    link_style : str, default "underline blue"
        Style of link text.
    fade_out_style : str, default "dim"
        Style applied to text carrying the fade-out hint.
    show_link_urls : bool, default False
        Append the destination after link text, for terminals without
        hyperlink support.

    """

    code_theme: str = field(
        default=DEFAULT_CODE_THEME,
        metadata={"help": "Pygments theme for code blocks", "importance": "core"},
    )
    heading_styles: tuple[str, ...] = field(
        default=DEFAULT_HEADING_STYLES,
        metadata={"help": "Rich styles for heading levels 1-6", "importance": "advanced"},
    )
    quote_border_style: str = field(
        default=DEFAULT_QUOTE_BORDER_STYLE,
        metadata={"help": "Border style of block quotes", "importance": "advanced"},
    )
    bullet: str = field(
        default=DEFAULT_BULLET,
        metadata={"help": "Marker for unordered list items", "importance": "core"},
    )
    code_style: str = field(
        default=DEFAULT_CODE_STYLE,
        metadata={"help": "Style of inline code spans", "importance": "advanced"},
    )
    link_style: str = field(
        default=DEFAULT_LINK_STYLE,
        metadata={"help": "Style of link text", "importance": "advanced"},
    )
    fade_out_style: str = field(
        default=DEFAULT_FADE_OUT_STYLE,
        metadata={"help": "Style of text carrying the fade-out hint", "importance": "advanced"},
    )
    show_link_urls: bool = field(
        default=DEFAULT_SHOW_LINK_URLS,
        metadata={"help": "Print link destinations after link text", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If heading_styles does not hold exactly six styles or bullet is empty.

        """
        super().__post_init__()
        if isinstance(self.heading_styles, list):
            object.__setattr__(self, "heading_styles", tuple(self.heading_styles))
        if len(self.heading_styles) != 6:
            raise ValueError(f"heading_styles must contain 6 styles, got {len(self.heading_styles)}")
        if not self.bullet:
            raise ValueError("bullet must be a non-empty string")
