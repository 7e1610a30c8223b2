#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/scopes/console.py
"""Terminal output scope built on rich.

``ConsoleScope`` turns scope calls into rich renderables:

- block quotes become bordered panels
- headings are styled per level, with spacing above levels 1 and 2
- code blocks are rendered with ``rich.syntax.Syntax``
- lists are two-column grids of markers and item content
- tables become ``rich.table.Table`` instances
- styled strings become ``rich.text.Text`` with one style per span

The collected output is a rich renderable itself, so it can be passed
straight to ``Console.print``.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Sequence, TypeVar

from richmark.constants import DEPS_RICH
from richmark.exceptions import InvalidOptionsError, RenderingError
from richmark.options.console import ConsoleRendererOptions
from richmark.scope import ListType, RichTextScope, Semantics, TableRowData
from richmark.string import LinkStyle, RichTextString, SpanStyle, Style
from richmark.utils.decorators import requires_dependencies

if TYPE_CHECKING:
    from rich.console import Console, Group, RenderableType
    from rich.style import Style as RichStyle
    from rich.text import Text


T = TypeVar("T")

_SIMPLE_STYLES = {
    SpanStyle.BOLD: "bold",
    SpanStyle.ITALIC: "italic",
    SpanStyle.STRIKETHROUGH: "strike",
    SpanStyle.SUPERSCRIPT: "dim",
}


class ConsoleScope(RichTextScope):
    """Scope producing rich renderables for terminal display.

    Parameters
    ----------
    options : ConsoleRendererOptions or None, default = None
        Styling options

    Examples
    --------
        >>> from rich.console import Console
        >>> scope = ConsoleScope()
        >>> basic_markdown(scope, document)
        >>> Console().print(scope)

    """

    @requires_dependencies("console scope", DEPS_RICH)
    def __init__(self, options: ConsoleRendererOptions | None = None):
        """Initialize the scope with styling options."""
        if options is not None and not isinstance(options, ConsoleRendererOptions):
            raise InvalidOptionsError("ConsoleScope", ConsoleRendererOptions, type(options))
        self.options = options or ConsoleRendererOptions()
        self._check_styles()
        self.renderables: list[RenderableType] = []
        self._targets: list[list[RenderableType]] = [self.renderables]

    def _check_styles(self) -> None:
        """Raise RenderingError if a style option is not a valid rich style."""
        from rich.errors import StyleSyntaxError
        from rich.style import Style as RichStyle

        options = self.options
        definitions = (
            *options.heading_styles,
            options.quote_border_style,
            options.code_style,
            options.link_style,
            options.fade_out_style,
        )
        for definition in definitions:
            try:
                RichStyle.parse(definition)
            except StyleSyntaxError as e:
                raise RenderingError(f"Invalid console style {definition!r}: {e}", original_error=e) from e

    def _emit(self, renderable: RenderableType) -> None:
        self._targets[-1].append(renderable)

    def _collect(self, content: Callable[[], None]) -> list[RenderableType]:
        collected: list[RenderableType] = []
        self._targets.append(collected)
        try:
            content()
        finally:
            self._targets.pop()
        return collected

    def block_quote(self, content: Callable[[], None]) -> None:
        from rich import box
        from rich.console import Group
        from rich.panel import Panel

        children = self._collect(content)
        self._emit(Panel(Group(*children), box=box.ROUNDED, border_style=self.options.quote_border_style))

    def horizontal_rule(self) -> None:
        from rich.rule import Rule

        self._emit(Rule(style=self.options.quote_border_style))

    def heading(self, level: int, content: Callable[[], None]) -> None:
        from rich.console import Group
        from rich.padding import Padding
        from rich.text import Text

        children = self._collect(content)
        style = self.options.heading_styles[min(max(level, 1), 6) - 1]
        for child in children:
            if isinstance(child, Text):
                child.stylize(style)
        top = 1 if level <= 2 else 0
        self._emit(Padding(Group(*children), (top, 0, 0, 0)))

    def code_block(self, text: str) -> None:
        from rich.syntax import Syntax

        self._emit(Syntax(text, "text", theme=self.options.code_theme, word_wrap=True, padding=(0, 1)))

    def formatted_list(
        self,
        list_type: ListType,
        items: Sequence[T],
        draw_item: Callable[[T], None],
        start_index: int = 0,
    ) -> None:
        from rich.console import Group
        from rich.table import Table
        from rich.text import Text

        grid = Table.grid(padding=(0, 1))
        grid.add_column(justify="right", no_wrap=True)
        grid.add_column(ratio=1)
        for offset, item in enumerate(items):
            children = self._collect(lambda: draw_item(item))
            if list_type is ListType.ORDERED:
                marker = f"{start_index + offset + 1}."
            else:
                marker = self.options.bullet
            grid.add_row(Text(marker), Group(*children))
        self._emit(grid)

    def text(
        self,
        text: RichTextString,
        semantics: Optional[Semantics] = None,
        fade_out_effect: bool = False,
    ) -> None:
        if not text.inline_contents:
            self._emit_text(self._rich_range(text, 0, len(text.text)), fade_out_effect)
            return
        # Inline content is emitted in place, between the text around it.
        cursor = 0
        for offset, inline_content in text.inline_contents:
            before = self._rich_range(text, cursor, offset)
            if before.plain.strip():
                self._emit_text(before, fade_out_effect)
            inline_content.content(self)
            cursor = offset + 1
        after = self._rich_range(text, cursor, len(text.text))
        if after.plain.strip():
            self._emit_text(after, fade_out_effect)

    def _emit_text(self, rendered: Text, fade_out_effect: bool) -> None:
        if fade_out_effect:
            rendered.stylize(self.options.fade_out_style)
        self._emit(rendered)

    def table(self, header: Optional[TableRowData], rows: Sequence[TableRowData]) -> None:
        from rich import box
        from rich.table import Table
        from rich.text import Text

        width = max([len(header) if header is not None else 0] + [len(row) for row in rows])
        table = Table(show_header=header is not None, box=box.SIMPLE_HEAVY, header_style="bold")
        for index in range(width):
            alignment = None
            if header is not None and index < len(header):
                alignment = header[index].alignment
            elif rows and index < len(rows[0]):
                alignment = rows[0][index].alignment
            title = self.to_rich_text(header[index].content) if header is not None and index < len(header) else ""
            table.add_column(title, justify=alignment or "left")
        for row in rows:
            cells = [self.to_rich_text(cell.content) for cell in row]
            cells.extend(Text("") for _ in range(width - len(cells)))
            table.add_row(*cells)
        self._emit(table)

    def image(self, destination: str, description: str) -> None:
        from rich.style import Style as RichStyle
        from rich.text import Text

        label = f"[image: {description}]" if description else "[image]"
        self._emit(Text(label, style=RichStyle(link=destination or None, italic=True)))

    def _span_style(self, style: Style) -> RichStyle:
        from rich.style import Style as RichStyle

        if isinstance(style, LinkStyle):
            return RichStyle.parse(self.options.link_style) + RichStyle(link=style.destination or None)
        if style is SpanStyle.CODE:
            return RichStyle.parse(self.options.code_style)
        return RichStyle.parse(_SIMPLE_STYLES[style])

    def to_rich_text(self, string: RichTextString) -> Text:
        """Convert a ``RichTextString`` into a rich ``Text``.

        Inline content placeholders are replaced in place by their alternate
        text, styled like the text around them.
        """
        return self._rich_range(string, 0, len(string.text), alternates=True)

    def _rich_range(self, string: RichTextString, start: int, end: int, alternates: bool = False) -> Text:
        """Convert ``string.text[start:end]``; placeholders are dropped unless ``alternates``."""
        from rich.style import Style as RichStyle
        from rich.text import Text

        placeholders = {offset: content for offset, content in string.inline_contents if start <= offset < end}
        points = {start, end}
        for span in string.spans:
            points.update(point for point in (span.start, span.end) if start < point < end)
        for offset in placeholders:
            points.update((offset, offset + 1))
        boundaries = sorted(points)

        result = Text()
        for segment_start, segment_end in zip(boundaries, boundaries[1:]):
            covering = [span for span in string.spans if span.start <= segment_start and segment_end <= span.end]
            styles = [self._span_style(span.style) for span in covering]
            style = RichStyle.combine(styles) if styles else ""
            if segment_start in placeholders:
                if not alternates:
                    continue
                result.append(placeholders[segment_start].alternate_text, style=style)
            else:
                result.append(string.text[segment_start:segment_end], style=style)
            if self.options.show_link_urls:
                for span in covering:
                    if isinstance(span.style, LinkStyle) and span.end == segment_end and span.style.destination:
                        result.append(f" ({span.style.destination})", style="dim")
        return result

    def renderable(self) -> Group:
        """Return everything emitted so far as one renderable."""
        from rich.console import Group

        return Group(*self.renderables)

    def __rich__(self) -> Group:
        return self.renderable()

    def print_to(self, console: Console) -> None:
        """Print the collected output to ``console``."""
        console.print(self.renderable())
