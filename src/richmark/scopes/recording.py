#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/scopes/recording.py
"""Scope that records output as a tree of plain data blocks.

``RecordingScope`` is the reference sink: every scope call becomes a
``RenderedBlock`` and container calls nest the blocks their content emits.
The result can be inspected directly or dumped as JSON.

"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional, Sequence, TypeVar

from richmark.scope import ListType, RichTextScope, Semantics, TableCellData, TableRowData
from richmark.string import LinkStyle, RichTextString, Style

T = TypeVar("T")


def _style_to_data(style: Style) -> Any:
    if isinstance(style, LinkStyle):
        return {"link": style.destination, "title": style.title}
    return style.value


def _cell_to_data(cell: TableCellData) -> dict[str, Any]:
    return {"text": cell.content.visible_text(), "alignment": cell.alignment}


@dataclass
class RenderedBlock:
    """One recorded scope call.

    Parameters
    ----------
    kind : str
        Element name: ``block_quote``, ``horizontal_rule``, ``heading``,
        ``code_block``, ``list``, ``list_item``, ``text``, ``table`` or
        ``image``
    attrs : dict
        Element data (level, text, spans, ...)
    children : list of RenderedBlock
        Blocks emitted inside this element

    """

    kind: str
    attrs: dict[str, Any] = field(default_factory=dict)
    children: list[RenderedBlock] = field(default_factory=list)

    def walk(self) -> Iterator[RenderedBlock]:
        """Yield this block and its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        data: dict[str, Any] = {"kind": self.kind}
        if self.attrs:
            data["attrs"] = dict(self.attrs)
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


class RecordingScope(RichTextScope):
    """Scope recording every call as a ``RenderedBlock``.

    Examples
    --------
        >>> scope = RecordingScope()
        >>> basic_markdown(scope, document)
        >>> [block.kind for block in scope.blocks]
        ['heading', 'text']

    """

    def __init__(self) -> None:
        """Initialize an empty recording."""
        self.blocks: list[RenderedBlock] = []
        self._targets: list[list[RenderedBlock]] = [self.blocks]

    def _emit(self, kind: str, **attrs: Any) -> RenderedBlock:
        block = RenderedBlock(kind, attrs)
        self._targets[-1].append(block)
        return block

    @contextmanager
    def _inside(self, block: RenderedBlock) -> Iterator[None]:
        self._targets.append(block.children)
        try:
            yield
        finally:
            self._targets.pop()

    def block_quote(self, content: Callable[[], None]) -> None:
        with self._inside(self._emit("block_quote")):
            content()

    def horizontal_rule(self) -> None:
        self._emit("horizontal_rule")

    def heading(self, level: int, content: Callable[[], None]) -> None:
        with self._inside(self._emit("heading", level=level)):
            content()

    def code_block(self, text: str) -> None:
        self._emit("code_block", text=text)

    def formatted_list(
        self,
        list_type: ListType,
        items: Sequence[T],
        draw_item: Callable[[T], None],
        start_index: int = 0,
    ) -> None:
        list_block = self._emit("list", list_type=list_type.value, start_index=start_index)
        with self._inside(list_block):
            for offset, item in enumerate(items):
                with self._inside(self._emit("list_item", index=start_index + offset)):
                    draw_item(item)

    def text(
        self,
        text: RichTextString,
        semantics: Optional[Semantics] = None,
        fade_out_effect: bool = False,
    ) -> None:
        block = self._emit(
            "text",
            text=text.visible_text(),
            spans=[(span.start, span.end, _style_to_data(span.style)) for span in text.visible_spans()],
            semantics=semantics.value if semantics else None,
            fade_out_effect=fade_out_effect,
        )
        if text.inline_contents:
            with self._inside(block):
                for _, inline_content in text.inline_contents:
                    inline_content.content(self)

    def table(self, header: Optional[TableRowData], rows: Sequence[TableRowData]) -> None:
        self._emit(
            "table",
            header=[_cell_to_data(cell) for cell in header] if header is not None else None,
            rows=[[_cell_to_data(cell) for cell in row] for row in rows],
        )

    def image(self, destination: str, description: str) -> None:
        self._emit("image", destination=destination, description=description)

    # Inspection helpers

    def walk(self) -> Iterator[RenderedBlock]:
        """Yield every recorded block in pre-order."""
        for block in self.blocks:
            yield from block.walk()

    def texts(self) -> list[str]:
        """Return the text of every recorded text block in order."""
        return [block.attrs["text"] for block in self.walk() if block.kind == "text"]

    def to_list(self) -> list[dict[str, Any]]:
        """Return the recording as JSON-serializable data."""
        return [block.to_dict() for block in self.blocks]
