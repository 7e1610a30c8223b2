#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/scope.py
"""Output sink contract for the Markdown renderer.

The renderer never builds output itself. Every visual element it produces is
a call on a ``RichTextScope``: block quotes, headings, lists and so on.
Container elements take a ``content`` callback which the scope invokes at
the point where the container's children belong, so nested calls land
inside the container.

Concrete scopes live in ``richmark.scopes``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence, TypeVar

from richmark.ast.nodes import Alignment
from richmark.string import RichTextString

T = TypeVar("T")

Content = Callable[[], None]


class ListType(str, Enum):
    """Kind of a formatted list."""

    ORDERED = "ordered"
    UNORDERED = "unordered"


class Semantics(str, Enum):
    """Accessibility role attached to a text block."""

    HEADING = "heading"


@dataclass(frozen=True)
class TableCellData:
    """Content of one table cell as handed to a scope."""

    content: RichTextString
    alignment: Optional[Alignment] = None


TableRowData = Sequence[TableCellData]


class RichTextScope(ABC):
    """Abstract base class for output sinks.

    Subclasses implement one method per visual element. Methods that take a
    ``content`` or ``draw_item`` callback must call it exactly where the
    nested output belongs.

    Examples
    --------
    A scope that only counts text blocks:

        >>> class CountingScope(RecordingScope):
        ...     count = 0
        ...     def text(self, text, semantics=None, fade_out_effect=False):
        ...         self.count += 1

    """

    @abstractmethod
    def block_quote(self, content: Content) -> None:
        """Emit a block quote wrapping whatever ``content`` emits."""

    @abstractmethod
    def horizontal_rule(self) -> None:
        """Emit a horizontal rule."""

    @abstractmethod
    def heading(self, level: int, content: Content) -> None:
        """Emit a heading container of ``level`` (1-6) around ``content``."""

    @abstractmethod
    def code_block(self, text: str) -> None:
        """Emit a code block containing ``text`` verbatim."""

    @abstractmethod
    def formatted_list(
        self,
        list_type: ListType,
        items: Sequence[T],
        draw_item: Callable[[T], None],
        start_index: int = 0,
    ) -> None:
        """Emit a list, calling ``draw_item`` once per item in order.

        Parameters
        ----------
        list_type : ListType
            Ordered or unordered
        items : sequence
            Items to draw
        draw_item : callable
            Emits the content of one item
        start_index : int, default = 0
            Zero-based index of the first item; the first ordered marker
            displays ``start_index + 1``

        """

    @abstractmethod
    def text(
        self,
        text: RichTextString,
        semantics: Optional[Semantics] = None,
        fade_out_effect: bool = False,
    ) -> None:
        """Emit one block of styled text.

        Parameters
        ----------
        text : RichTextString
            Styled content, possibly holding inline content placeholders
        semantics : Semantics, optional
            Accessibility role of the block
        fade_out_effect : bool, default = False
            Opaque rendering hint for content that is still streaming in

        """

    @abstractmethod
    def table(self, header: Optional[TableRowData], rows: Sequence[TableRowData]) -> None:
        """Emit a table with an optional header row and body rows."""

    def basic_text(self, text: str) -> None:
        """Emit unstyled text. An empty string emits a zero-content block."""
        self.text(RichTextString.plain(text))

    def image(self, destination: str, description: str) -> None:
        """Emit an image reference. Defaults to its description as text."""
        self.basic_text(description or destination)
