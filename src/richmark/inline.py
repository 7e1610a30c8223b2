#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/inline.py
"""Inline content rendering.

Headings, paragraphs and table cells are text containers: their children are
inline nodes that together form one block of styled text. This module folds
such a run into a single ``RichTextString`` and emits it.

"""

from __future__ import annotations

import logging
from typing import Optional

from richmark.ast.nodes import (
    AstCode,
    AstEmphasis,
    AstFootnoteReference,
    AstHardLineBreak,
    AstHtmlInline,
    AstImage,
    AstLink,
    AstNode,
    AstSoftLineBreak,
    AstStrikethrough,
    AstStrongEmphasis,
    AstText,
)
from richmark.ast.utils import children_sequence
from richmark.scope import RichTextScope, Semantics
from richmark.string import InlineContent, LinkStyle, RichTextString, RichTextStringBuilder, SpanStyle

logger = logging.getLogger(__name__)


def _plain_text(node: AstNode) -> str:
    """Concatenate the text literals below ``node``, ignoring styling."""
    parts = []
    for child in children_sequence(node):
        if isinstance(child.type, (AstText, AstCode)):
            parts.append(child.type.literal)
        else:
            parts.append(_plain_text(child))
    return "".join(parts)


def _image_content(destination: str, description: str) -> InlineContent:
    return InlineContent(
        content=lambda scope: scope.image(destination, description),
        alternate_text=description or destination,
    )


def _append_inline(builder: RichTextStringBuilder, node: AstNode, log: logging.Logger) -> None:
    node_type = node.type

    if isinstance(node_type, AstText):
        builder.append(node_type.literal)
    elif isinstance(node_type, AstCode):
        with builder.with_style(SpanStyle.CODE):
            builder.append(node_type.literal)
    elif isinstance(node_type, AstEmphasis):
        with builder.with_style(SpanStyle.ITALIC):
            _append_children(builder, node, log)
    elif isinstance(node_type, AstStrongEmphasis):
        with builder.with_style(SpanStyle.BOLD):
            _append_children(builder, node, log)
    elif isinstance(node_type, AstStrikethrough):
        with builder.with_style(SpanStyle.STRIKETHROUGH):
            _append_children(builder, node, log)
    elif isinstance(node_type, AstLink):
        with builder.with_style(LinkStyle(node_type.destination, node_type.title)):
            _append_children(builder, node, log)
    elif isinstance(node_type, AstImage):
        description = _plain_text(node) or node_type.title
        builder.append_inline_content(_image_content(node_type.destination, description))
    elif isinstance(node_type, AstHtmlInline):
        builder.append(node_type.literal)
    elif isinstance(node_type, AstSoftLineBreak):
        builder.append(" ")
    elif isinstance(node_type, AstHardLineBreak):
        builder.append("\n")
    elif isinstance(node_type, AstFootnoteReference):
        with builder.with_style(SpanStyle.SUPERSCRIPT):
            builder.append(f"[{node_type.label}]")
    else:
        log.warning("Unexpected %s inside inline content, skipping it.", type(node_type).__name__)


def _append_children(builder: RichTextStringBuilder, node: AstNode, log: logging.Logger) -> None:
    for child in children_sequence(node):
        _append_inline(builder, child, log)


def compute_rich_text_string(node: AstNode, log: Optional[logging.Logger] = None) -> RichTextString:
    """Fold the inline children of ``node`` into one styled string.

    Parameters
    ----------
    node : AstNode
        Text container (heading, paragraph, table cell, ...)
    log : logging.Logger, optional
        Diagnostic sink for block nodes found among the inline children.
        Defaults to this module's logger.

    Returns
    -------
    RichTextString
        Text with spans for emphasis, strong, strikethrough, code and links,
        and inline content placeholders for images

    """
    builder = RichTextStringBuilder()
    _append_children(builder, node, log or logger)
    return builder.to_rich_text_string()


def markdown_rich_text(
    scope: RichTextScope,
    node: AstNode,
    semantics: Optional[Semantics] = None,
    fade_out_effect: bool = False,
    log: Optional[logging.Logger] = None,
) -> None:
    """Emit the inline content of ``node`` as one text block.

    Parameters
    ----------
    scope : RichTextScope
        Sink receiving the text block
    node : AstNode
        Text container whose children are inline nodes
    semantics : Semantics, optional
        Accessibility role passed to the scope
    fade_out_effect : bool, default = False
        Rendering hint passed to the scope unchanged
    log : logging.Logger, optional
        Diagnostic sink

    """
    scope.text(compute_rich_text_string(node, log), semantics=semantics, fade_out_effect=fade_out_effect)
