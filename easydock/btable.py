"""A scrolling table widget with a fixed header and a highlighted cursor row."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .style import Style, join_vertical, text_height
from .text import clamp, truncate_with_ellipsis

_COLUMN_GAP = "  "
_DEFAULT_BODY_HEIGHT = 20


@dataclass(frozen=True)
class Column:
    """A table column: its title and its width in cells."""

    title: str
    width: int


@dataclass(frozen=True)
class TableStyles:
    """Styles for the header, ordinary rows and the selected row."""

    header: Style = field(default_factory=lambda: Style().bold(True))
    cell: Style = field(default_factory=Style)
    selected: Style = field(default_factory=lambda: Style().bold(True))


def default_table_styles() -> TableStyles:
    """Bold header and selected row, plain cells."""
    return TableStyles()


def _fit_cell(value: str, width: int) -> str:
    return (
        Style()
        .width(width)
        .max_width(width)
        .inline(True)
        .render(truncate_with_ellipsis(value, width))
    )


def scroll_window(total: int, cursor: int, height: int) -> tuple[int, int]:
    """Rows [start, end) to show so that the cursor stays roughly centred."""
    if total <= 0 or height <= 0:
        return 0, 0
    if height >= total:
        return 0, total
    cursor = clamp(cursor, 0, total - 1)
    start = max(0, cursor - height // 2)
    end = start + height
    if end > total:
        end = total
        start = end - height
    return max(0, start), end


class Table:
    """Renders rows under a header, scrolled so the cursor row is visible."""

    def __init__(
        self,
        columns: Sequence[Column] = (),
        rows: Sequence[Sequence[str]] = (),
        styles: TableStyles | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> None:
        self.columns = list(columns)
        self.rows = [list(row) for row in rows]
        self.styles = styles if styles is not None else default_table_styles()
        self._width = max(1, width) if width is not None else 0
        if height is None:
            self._body_height = _DEFAULT_BODY_HEIGHT
        else:
            self._body_height = max(1, height - text_height(self.headers_view()))
        self._cursor = 0
        self._content = ""
        self._refresh()

    @property
    def cursor(self) -> int:
        return self._cursor

    def set_cursor(self, index: int) -> None:
        """Move the cursor, clamped to the existing rows."""
        self._cursor = clamp(index, 0, len(self.rows) - 1) if self.rows else 0
        self._refresh()

    def _refresh(self) -> None:
        if self._width <= 0:
            self._width = 1
        if self._body_height <= 0:
            self._body_height = 1
        if not self.rows:
            self._content = ""
            return
        start, end = scroll_window(len(self.rows), self._cursor, self._body_height)
        self._content = join_vertical(*(self.render_row(index) for index in range(start, end)))

    def headers_view(self) -> str:
        """Column titles fitted to their widths and joined by the column gap."""
        return _COLUMN_GAP.join(
            _fit_cell(column.title, column.width) for column in self.columns if column.width > 0
        )

    def render_row(self, row_index: int) -> str:
        """One row with every cell fitted to its column width."""
        row = self.rows[row_index]
        parts = [
            _fit_cell(row[index] if index < len(row) else "", column.width)
            for index, column in enumerate(self.columns)
            if column.width > 0
        ]
        line = _COLUMN_GAP.join(parts)
        if row_index == self._cursor:
            return self.styles.selected.render(line)
        return self.styles.cell.render(line)

    def view(self) -> str:
        """The header followed by the visible rows, padded to the table size."""
        header = self.styles.header.render(self.headers_view())
        body = (
            Style()
            .width(self._width)
            .height(self._body_height)
            .max_width(self._width)
            .max_height(self._body_height)
            .render(self._content)
        )
        if body == "":
            return header
        return header + "\n" + body