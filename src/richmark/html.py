#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/html.py
"""Rendering of raw HTML blocks.

Scopes have no HTML layout of their own, so block HTML is reduced to its
readable text with BeautifulSoup. Script and style content is discarded.

"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from richmark.scope import RichTextScope

logger = logging.getLogger(__name__)

_NON_TEXT_TAGS = ("script", "style", "template", "head")


def html_to_text(literal: str) -> str:
    """Extract readable text from an HTML fragment.

    Parameters
    ----------
    literal : str
        Raw HTML

    Returns
    -------
    str
        Text content, one line per block-level element, surrounding
        whitespace and blank lines removed

    """
    soup = BeautifulSoup(literal, "html.parser")
    for tag in soup(_NON_TEXT_TAGS):
        tag.decompose()
    lines = (line.strip() for line in soup.get_text("\n").splitlines())
    return "\n".join(line for line in lines if line)


def html_block(scope: RichTextScope, literal: str) -> None:
    """Emit the text of an HTML block. Blocks without text emit nothing."""
    text = html_to_text(literal)
    if not text:
        logger.debug("HTML block has no text content, nothing emitted")
        return
    scope.basic_text(text)
