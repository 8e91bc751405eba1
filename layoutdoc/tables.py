"""
Table blocks.

A table record carries its rows inline, so a Table is complete as soon as it
is constructed: header rows and data rows are components of the table, not
children in the document tree. Cells hold either a plain string or an
embedded paragraph record.
"""

from __future__ import annotations

import html
from collections.abc import Iterator, Mapping
from typing import Any

from layoutdoc.models import Block, BlockTag, Paragraph, join_lines
from layoutdoc.records import (
    ROW_FULL,
    ROW_HEADER,
    get_field,
    get_int,
    get_records,
    get_str,
    row_kind,
)


class TableCell(Block):
    """A single cell. `value` is the cell text; `paragraph` is set when the
    cell held a paragraph record instead of a string."""

    tag = BlockTag.TABLE_CELL

    def __init__(self, record: Mapping[str, Any] | None = None) -> None:
        super().__init__(record)
        record = self.record
        self.col_span = max(get_int(record, "col_span", default=1), 1)

        raw_value = get_field(record, "cell_value", default="")
        self.paragraph: Paragraph | None = None
        if isinstance(raw_value, Mapping):
            self.paragraph = Paragraph(raw_value)
            self.value = self.paragraph.own_text
        else:
            self.value = str(raw_value)

    def _parts(self) -> Iterator[Block]:
        yield from super()._parts()
        if self.paragraph is not None:
            yield self.paragraph

    def to_text(self, include_children: bool = False, recurse: bool = False) -> str:
        self._require_frozen()
        if self.paragraph is not None:
            return self.paragraph.to_text()
        return self.value

    def to_html(
        self,
        include_children: bool = False,
        recurse: bool = False,
        *,
        element: str = "td",
    ) -> str:
        self._require_frozen()
        if self.paragraph is not None:
            content = self.paragraph.to_html()
        else:
            content = html.escape(self.value)
        span = f' colspan="{self.col_span}"' if self.col_span > 1 else ""
        return f"<{element}{span}>{content}</{element}>"


class TableRow(Block):
    """A data row. A full row is one cell spanning the table width, read from
    the row record itself."""

    tag = BlockTag.TABLE_ROW
    cell_element = "td"

    def __init__(self, record: Mapping[str, Any] | None = None) -> None:
        super().__init__(record)
        self.is_full_row = row_kind(self.record) == ROW_FULL
        if self.is_full_row:
            self.cells: tuple[TableCell, ...] = (TableCell(self.record),)
        else:
            self.cells = tuple(TableCell(cell) for cell in get_records(self.record, "cells"))

    def _parts(self) -> Iterator[Block]:
        yield from super()._parts()
        yield from self.cells

    def cell_texts(self) -> list[str]:
        """Cell text flattened to one line per cell."""
        return [cell.to_text().replace("\n", " ") for cell in self.cells]

    def to_text(self, include_children: bool = False, recurse: bool = False) -> str:
        self._require_frozen()
        return "| " + " | ".join(self.cell_texts()) + " |"

    def to_html(self, include_children: bool = False, recurse: bool = False) -> str:
        self._require_frozen()
        cells = "".join(cell.to_html(element=self.cell_element) for cell in self.cells)
        return f"<tr>{cells}</tr>"


class TableHeader(TableRow):
    """A header row."""

    tag = BlockTag.TABLE_HEADER
    cell_element = "th"

    def separator(self) -> str:
        """Markdown separator line with one `---` per cell."""
        return "| " + " | ".join("---" for _ in self.cells) + " |"


class Table(Block):
    """
    A table: ordered header rows, ordered data rows and an optional name.

    Text rendering emits one `| a | b |` line per row with a `| --- | --- |`
    separator under the first header row. Rows with differing cell counts
    are rendered as-is.
    """

    tag = BlockTag.TABLE

    def __init__(self, record: Mapping[str, Any] | None = None) -> None:
        super().__init__(record)
        self.name = get_str(self.record, "name")

        headers: list[TableHeader] = []
        rows: list[TableRow] = []
        for row_record in get_records(self.record, "table_rows"):
            if row_kind(row_record) == ROW_HEADER:
                headers.append(TableHeader(row_record))
            else:
                rows.append(TableRow(row_record))
        self.headers = tuple(headers)
        self.rows = tuple(rows)

    def _parts(self) -> Iterator[Block]:
        yield from super()._parts()
        yield from self.headers
        yield from self.rows

    def to_text(self, include_children: bool = False, recurse: bool = False) -> str:
        self._require_frozen()
        lines = []
        for i, header in enumerate(self.headers):
            lines.append(header.to_text())
            if i == 0:
                lines.append(header.separator())
        lines.extend(row.to_text() for row in self.rows)
        return join_lines(lines)

    def to_html(self, include_children: bool = False, recurse: bool = False) -> str:
        self._require_frozen()
        out = ["<table>"]
        if self.name:
            out.append(f"<caption>{html.escape(self.name)}</caption>")
        if self.headers:
            out.append("<thead>")
            out.extend(header.to_html() for header in self.headers)
            out.append("</thead>")
        out.append("<tbody>")
        out.extend(row.to_html() for row in self.rows)
        out.append("</tbody></table>")
        return "".join(out)
