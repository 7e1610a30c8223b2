#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/api.py
"""High-level entry points.

These functions combine parsing and rendering for the common cases:

    >>> from richmark import render_markdown
    >>> scope = render_markdown("# Title\\n\\nSome *text*.")
    >>> scope.texts()
    ['Title', 'Some text.']

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, TypeVar, Union

from richmark.ast.nodes import AstNode
from richmark.composer import AstBlockNodeComposer
from richmark.options.console import ConsoleRendererOptions
from richmark.options.markdown import MarkdownParserOptions
from richmark.parsers.base import ParserInput
from richmark.parsers.markdown import MarkdownAstParser
from richmark.renderer import basic_markdown
from richmark.scope import RichTextScope
from richmark.scopes.console import ConsoleScope
from richmark.scopes.recording import RecordingScope

if TYPE_CHECKING:
    from rich.console import Console

ScopeT = TypeVar("ScopeT", bound=RichTextScope)


def parse_markdown(source: ParserInput, options: Optional[MarkdownParserOptions] = None) -> AstNode:
    """Parse Markdown into a tree rooted at ``AstDocument``.

    Parameters
    ----------
    source : str, Path, IO, or bytes
        Markdown text, a file path, raw bytes, or a readable stream
    options : MarkdownParserOptions, optional
        Parser options

    Returns
    -------
    AstNode
        Document root

    """
    return MarkdownAstParser(options).parse(source)


def _as_tree(source: Union[AstNode, ParserInput], options: Optional[MarkdownParserOptions]) -> AstNode:
    if isinstance(source, AstNode):
        return source
    return parse_markdown(source, options)


def render_markdown(
    source: Union[AstNode, ParserInput],
    scope: Optional[ScopeT] = None,
    composer: Optional[AstBlockNodeComposer] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
    log: Optional[logging.Logger] = None,
) -> Union[ScopeT, RecordingScope]:
    """Render Markdown (text or an already parsed tree) into a scope.

    Parameters
    ----------
    source : AstNode, str, Path, IO, or bytes
        Parsed tree, or Markdown input to parse first
    scope : RichTextScope, optional
        Sink receiving the output. Defaults to a new ``RecordingScope``.
    composer : AstBlockNodeComposer, optional
        Interceptor for block node rendering
    parser_options : MarkdownParserOptions, optional
        Parser options, used when ``source`` is not a tree
    log : logging.Logger, optional
        Diagnostic sink for structural anomalies

    Returns
    -------
    RichTextScope
        The scope that received the output

    """
    target: Union[ScopeT, RecordingScope] = scope if scope is not None else RecordingScope()
    basic_markdown(target, _as_tree(source, parser_options), composer, log)
    return target


def render_to_console(
    source: Union[AstNode, ParserInput],
    console: Optional[Console] = None,
    options: Optional[ConsoleRendererOptions] = None,
    composer: Optional[AstBlockNodeComposer] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> ConsoleScope:
    """Render Markdown to a terminal with rich.

    Parameters
    ----------
    source : AstNode, str, Path, IO, or bytes
        Parsed tree, or Markdown input to parse first
    console : rich.console.Console, optional
        Destination console. Defaults to a new ``Console()``.
    options : ConsoleRendererOptions, optional
        Styling options
    composer : AstBlockNodeComposer, optional
        Interceptor for block node rendering
    parser_options : MarkdownParserOptions, optional
        Parser options, used when ``source`` is not a tree

    Returns
    -------
    ConsoleScope
        The scope holding the rendered output

    """
    scope = ConsoleScope(options)
    basic_markdown(scope, _as_tree(source, parser_options), composer)

    if console is None:
        from rich.console import Console

        console = Console()
    scope.print_to(console)
    return scope
