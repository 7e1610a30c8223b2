#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/table.py
"""Table rendering.

A table arrives as one ``AstTableRoot`` subtree::

    TableRoot
      TableHeader
        TableRow
          TableCell (inline children) ...
      TableBody
        TableRow ...

The subtree is flattened into a header row and body rows of styled cells and
handed to the scope in a single call. Nodes out of place inside the table are
logged and skipped.

"""

from __future__ import annotations

import logging
from typing import Optional

from richmark.ast.nodes import AstNode, AstTableBody, AstTableCell, AstTableHeader, AstTableRow
from richmark.ast.utils import children_sequence
from richmark.inline import compute_rich_text_string
from richmark.scope import RichTextScope, TableCellData

logger = logging.getLogger(__name__)


def _row_cells(row: AstNode, log: logging.Logger) -> list[TableCellData]:
    cells = []
    for cell in children_sequence(row):
        if not isinstance(cell.type, AstTableCell):
            log.warning("Unexpected %s inside a table row, skipping it.", type(cell.type).__name__)
            continue
        cells.append(TableCellData(content=compute_rich_text_string(cell, log), alignment=cell.type.alignment))
    return cells


def _section_rows(section: AstNode, log: logging.Logger) -> list[list[TableCellData]]:
    rows = []
    for row in children_sequence(section):
        if not isinstance(row.type, AstTableRow):
            log.warning("Unexpected %s inside a table section, skipping it.", type(row.type).__name__)
            continue
        rows.append(_row_cells(row, log))
    return rows


def render_table(scope: RichTextScope, table_root: AstNode, log: Optional[logging.Logger] = None) -> None:
    """Emit a table from an ``AstTableRoot`` subtree.

    Parameters
    ----------
    scope : RichTextScope
        Sink receiving the table
    table_root : AstNode
        Node of type ``AstTableRoot``
    log : logging.Logger, optional
        Diagnostic sink. Defaults to this module's logger.

    Notes
    -----
    The first header row becomes the table header. Additional header rows,
    which Markdown cannot produce but a hand-built tree may contain, are
    placed before the body rows.

    """
    log = log or logger
    header_rows: list[list[TableCellData]] = []
    body_rows: list[list[TableCellData]] = []

    for section in children_sequence(table_root):
        if isinstance(section.type, AstTableHeader):
            header_rows.extend(_section_rows(section, log))
        elif isinstance(section.type, AstTableBody):
            body_rows.extend(_section_rows(section, log))
        else:
            log.warning("Unexpected %s inside a table, skipping it.", type(section.type).__name__)

    header = header_rows[0] if header_rows else None
    scope.table(header, header_rows[1:] + body_rows)
