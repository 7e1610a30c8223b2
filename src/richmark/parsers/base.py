#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/parsers/base.py
"""Base class for parsers producing richmark AST trees."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from richmark.ast.nodes import AstNode
from richmark.exceptions import InvalidOptionsError, ParsingError
from richmark.options.base import BaseParserOptions

ParserInput = Union[str, Path, IO[bytes], IO[str], bytes]

_FALLBACK_ENCODINGS = ("utf-8-sig", "latin-1")


class BaseParser(ABC):
    """Abstract base class for parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Parser-specific options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with options."""
        self.options = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Raise InvalidOptionsError unless ``options`` is None or an ``expected_type``."""
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(parser_name, expected_type, type(options))

    @abstractmethod
    def parse(self, input_data: ParserInput) -> AstNode:
        """Parse the input into a tree rooted at an ``AstDocument`` node.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            Source text, a path to a file, raw bytes, or a readable stream.
            Strings are always treated as content, never as paths.

        Returns
        -------
        AstNode
            Document root

        Raises
        ------
        ParsingError
            If the input cannot be read

        """

    @staticmethod
    def _decode(data: bytes) -> str:
        for encoding in _FALLBACK_ENCODINGS:
            try:
                return data.decode(encoding)
            except UnicodeDecodeError:
                continue
        raise ParsingError("Could not decode input as text")

    @classmethod
    def _load_text_content(cls, input_data: ParserInput) -> str:
        """Load text from the supported input types."""
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, bytes):
            return cls._decode(input_data)
        if isinstance(input_data, Path):
            try:
                return cls._decode(input_data.read_bytes())
            except OSError as e:
                raise ParsingError(f"Could not read {input_data}: {e}", original_error=e) from e
        if hasattr(input_data, "read"):
            content = input_data.read()
            return cls._decode(content) if isinstance(content, bytes) else content
        raise ParsingError(f"Unsupported input type: {type(input_data).__name__}")
