#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/string.py
"""Styled text runs produced from inline Markdown content.

A ``RichTextString`` is plain text plus a list of styled spans over it, and a
set of inline-content placeholders. Placeholders stand for content that a
scope renders itself (for example an HTML block) and occupy one character
of alternate text in the plain string.

Strings are assembled with ``RichTextStringBuilder``:

    >>> builder = RichTextStringBuilder()
    >>> builder.append("Hello ")
    >>> with builder.with_style(SpanStyle.BOLD):
    ...     builder.append("world")
    >>> string = builder.to_rich_text_string()
    >>> string.text
    'Hello world'

"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Iterator, Union

from richmark.constants import INLINE_CONTENT_PLACEHOLDER

if TYPE_CHECKING:
    from richmark.scope import RichTextScope


class SpanStyle(str, Enum):
    """Simple text styles applied to a span."""

    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    STRIKETHROUGH = "strikethrough"
    SUPERSCRIPT = "superscript"


@dataclass(frozen=True)
class LinkStyle:
    """Hyperlink style applied to a span."""

    destination: str
    title: str = ""


Style = Union[SpanStyle, LinkStyle]


@dataclass(frozen=True)
class Span:
    """A style applied to ``text[start:end]``."""

    start: int
    end: int
    style: Style


@dataclass(frozen=True)
class InlineContent:
    """Deferred content rendered by a scope in place of a placeholder.

    Parameters
    ----------
    content : callable
        Receives the scope and emits whatever the placeholder stands for
    alternate_text : str
        Text used by sinks that cannot render the content

    """

    content: Callable[[RichTextScope], None]
    alternate_text: str = INLINE_CONTENT_PLACEHOLDER


@dataclass(frozen=True)
class RichTextString:
    """Immutable styled text.

    Parameters
    ----------
    text : str
        Plain text, with one placeholder character per inline content
    spans : tuple of Span
        Styles, ordered by start offset
    inline_contents : tuple of (int, InlineContent)
        Placeholder offsets into ``text`` and their content

    """

    text: str = ""
    spans: tuple[Span, ...] = ()
    inline_contents: tuple[tuple[int, InlineContent], ...] = field(default=())

    @classmethod
    def plain(cls, text: str) -> RichTextString:
        """Create an unstyled string."""
        return cls(text=text)

    def styles_at(self, offset: int) -> list[Style]:
        """Return the styles covering the character at ``offset``."""
        return [span.style for span in self.spans if span.start <= offset < span.end]

    def visible_text(self) -> str:
        """Return the text with inline content placeholders removed."""
        if not self.inline_contents:
            return self.text
        offsets = {offset for offset, _ in self.inline_contents}
        return "".join(ch for i, ch in enumerate(self.text) if i not in offsets)

    def visible_offset(self, offset: int) -> int:
        """Map an offset into ``text`` onto the matching offset in ``visible_text()``."""
        return offset - sum(1 for placeholder, _ in self.inline_contents if placeholder < offset)

    def visible_spans(self) -> tuple[Span, ...]:
        """Return the spans in ``visible_text()`` coordinates.

        Spans that cover nothing but placeholders are dropped.
        """
        if not self.inline_contents:
            return self.spans
        spans = (
            Span(self.visible_offset(span.start), self.visible_offset(span.end), span.style) for span in self.spans
        )
        return tuple(span for span in spans if span.end > span.start)

    def __str__(self) -> str:
        return self.text


class RichTextStringBuilder:
    """Mutable builder for ``RichTextString``."""

    def __init__(self) -> None:
        """Initialize an empty builder."""
        self._parts: list[str] = []
        self._length = 0
        self._spans: list[Span] = []
        self._open: list[tuple[int, Style]] = []
        self._inline_contents: list[tuple[int, InlineContent]] = []

    def __len__(self) -> int:
        return self._length

    def append(self, text: str) -> RichTextStringBuilder:
        """Append text carrying every currently open style."""
        self._parts.append(text)
        self._length += len(text)
        return self

    def push_style(self, style: Style) -> None:
        """Open a style at the current position."""
        self._open.append((self._length, style))

    def pop_style(self) -> None:
        """Close the most recently opened style.

        Raises
        ------
        IndexError
            If no style is open

        """
        start, style = self._open.pop()
        if self._length > start:
            self._spans.append(Span(start, self._length, style))

    @contextmanager
    def with_style(self, style: Style) -> Iterator[RichTextStringBuilder]:
        """Apply ``style`` to everything appended inside the block."""
        self.push_style(style)
        try:
            yield self
        finally:
            self.pop_style()

    def append_inline_content(self, content: InlineContent) -> RichTextStringBuilder:
        """Append a placeholder for deferred inline content."""
        self._inline_contents.append((self._length, content))
        return self.append(content.alternate_text[:1] or INLINE_CONTENT_PLACEHOLDER)

    def to_rich_text_string(self) -> RichTextString:
        """Freeze the builder's content. Styles still open are closed first."""
        while self._open:
            self.pop_style()
        return RichTextString(
            text="".join(self._parts),
            spans=tuple(sorted(self._spans, key=lambda span: (span.start, -span.end))),
            inline_contents=tuple(self._inline_contents),
        )


def rich_text_string(build: Callable[[RichTextStringBuilder], None]) -> RichTextString:
    """Build a ``RichTextString`` with a builder callback.

    Examples
    --------
    >>> rich_text_string(lambda b: b.append("label"))
    RichTextString(text='label', spans=(), inline_contents=())

    """
    builder = RichTextStringBuilder()
    build(builder)
    return builder.to_rich_text_string()
