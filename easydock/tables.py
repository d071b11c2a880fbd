"""Column schemas, table specs and rendering of resource tables."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from typing import Generic, TypeVar

from .btable import Column, Table, TableStyles, default_table_styles
from .layout import allocate_columns
from .text import clamp, constrain_line

T = TypeVar("T")

_COLUMN_GAP_WIDTH = 2


@dataclass(frozen=True)
class ColumnDef:
    """A column: header, minimum width and an optional desired-width rule."""

    header: str
    min_width: int
    desired: Callable[[int], int] | None = None


@dataclass
class Spec(Generic[T]):
    """Everything needed to render a table of items."""

    empty_message: str
    cursor: int
    items: Sequence[T]
    columns: Sequence[ColumnDef]
    row_builder: Callable[[T], Sequence[str]]


def fixed_width(width: int) -> Callable[[int], int]:
    """Width rule that ignores the table width."""
    return lambda _table_width: width


def proportional_width(min_width: int, divisor: int) -> Callable[[int], int]:
    """Width rule that takes a share of the table width, never below min_width."""
    return lambda table_width: max(min_width, int(table_width / divisor))


CONTAINER_SCHEMA = (
    ColumnDef("NAME", 10, proportional_width(10, 6)),
    ColumnDef("STATE", 12, fixed_width(12)),
    ColumnDef("CPU", 8, fixed_width(8)),
    ColumnDef("MEMORY", 18, fixed_width(18)),
    ColumnDef("IMAGE", 12, proportional_width(12, 5)),
    ColumnDef("STATUS", 8, proportional_width(8, 4)),
)

IMAGE_SCHEMA = (
    ColumnDef("REPOSITORY", 18, proportional_width(18, 4)),
    ColumnDef("TAGS", 16, proportional_width(16, 4)),
    ColumnDef("SIZE", 10, fixed_width(10)),
    ColumnDef("CREATED", 12, fixed_width(12)),
    ColumnDef("IMAGE ID", 12, proportional_width(12, 5)),
)

NETWORK_SCHEMA = (
    ColumnDef("NAME", 18, proportional_width(18, 4)),
    ColumnDef("DRIVER", 10, proportional_width(10, 6)),
    ColumnDef("SCOPE", 10, fixed_width(10)),
    ColumnDef("ENDPOINTS", 10, fixed_width(10)),
    ColumnDef("META", 18, proportional_width(18, 4)),
)

VOLUME_SCHEMA = (
    ColumnDef("NAME", 18, proportional_width(18, 4)),
    ColumnDef("DRIVER", 10, proportional_width(10, 6)),
    ColumnDef("SCOPE", 10, fixed_width(10)),
    ColumnDef("SIZE", 10, fixed_width(10)),
    ColumnDef("REFS", 8, fixed_width(8)),
)


def container_state_column_width(columns: Sequence[ColumnDef]) -> int:
    """Width of the STATE column, or 0 when there is none."""
    if len(columns) <= 1:
        return 0
    return columns[1].min_width


def content_width(width: int) -> int:
    """Table width normalised to at least one cell."""
    return max(1, width)


def simple_spec(
    width: int,
    empty_message: str,
    cursor: int,
    items: Sequence[T],
    columns_for_width: Callable[[int], Sequence[ColumnDef]],
    row_builder: Callable[[T], Sequence[str]],
) -> Spec[T]:
    """Build a spec whose columns are resolved for the given width."""
    return Spec(
        empty_message=empty_message,
        cursor=cursor,
        items=items,
        columns=columns_for_width(content_width(width)),
        row_builder=row_builder,
    )


def resolve_columns(table_width: int, defs: Sequence[ColumnDef]) -> list[ColumnDef]:
    """Fix each column's width so that columns and gaps fill the table width."""
    desired = [
        max(definition.min_width, definition.desired(table_width))
        if definition.desired is not None
        else definition.min_width
        for definition in defs
    ]
    available = max(1, table_width - (len(defs) - 1) * _COLUMN_GAP_WIDTH)
    widths = allocate_columns(available, desired)
    return [replace(definition, min_width=width) for definition, width in zip(defs, widths)]


def container_columns(table_width: int) -> list[ColumnDef]:
    return resolve_columns(table_width, CONTAINER_SCHEMA)


def image_columns(table_width: int) -> list[ColumnDef]:
    return resolve_columns(table_width, IMAGE_SCHEMA)


def network_columns(table_width: int) -> list[ColumnDef]:
    return resolve_columns(table_width, NETWORK_SCHEMA)


def volume_columns(table_width: int) -> list[ColumnDef]:
    return resolve_columns(table_width, VOLUME_SCHEMA)


def _split_image_tag_reference(reference: str) -> tuple[str, str]:
    if reference == "<none>:<none>":
        return "<none>", "<none>"
    last_colon = reference.rfind(":")
    if last_colon <= 0 or last_colon == len(reference) - 1:
        return reference, "-"
    return reference[:last_colon], reference[last_colon + 1:]


def split_image_tags(formatted_tags: str) -> tuple[str, str]:
    """Split 'repo:tag, repo:tag' into a repositories column and a tags column."""
    if formatted_tags == "":
        return "-", "-"
    pairs = [_split_image_tag_reference(reference) for reference in formatted_tags.split(", ")]
    return ", ".join(repo for repo, _ in pairs), ", ".join(tag for _, tag in pairs)


_STATE_COLOR_CODES = {
    "running": "32",
    "paused": "33",
    "restarting": "33",
    "created": "33",
    "exited": "31",
    "stopped": "31",
    "dead": "91",
}


def color_state_label(label: str, state: str) -> str:
    """Colour a state label by the container state, resetting only the foreground."""
    code = _STATE_COLOR_CODES.get(state.lower(), "36")
    return f"\x1b[{code}m{label}\x1b[39m"


def rows_from(items: Sequence[T], row_builder: Callable[[T], Sequence[str]]) -> list[list[str]]:
    """Turn items into table rows."""
    return [list(row_builder(item)) for item in items]


def render_table(
    styles: TableStyles,
    width: int,
    height: int,
    defs: Sequence[ColumnDef],
    rows: Sequence[Sequence[str]],
    cursor: int,
) -> str:
    """Render rows as a table with the cursor row highlighted."""
    table = Table(
        columns=[Column(definition.header, definition.min_width) for definition in defs],
        rows=rows,
        styles=styles,
        width=max(1, width),
        height=max(2, height),
    )
    if rows:
        table.set_cursor(clamp(cursor, 0, len(rows) - 1))
    return table.view()


def render_or_empty(
    width: int,
    height: int,
    empty_message: str,
    columns: Sequence[ColumnDef],
    rows: Sequence[Sequence[str]],
    cursor: int,
    styles: TableStyles,
) -> str:
    """Render a table, or the empty message when there are no rows."""
    if not rows:
        return constrain_line(empty_message, width)
    return render_table(styles, width, height, columns, rows, cursor)


def render_from_spec(width: int, height: int, spec: Spec[T], styles: TableStyles | None = None) -> str:
    """Render a table described by a spec."""
    if styles is None:
        styles = default_table_styles()
    rows = rows_from(spec.items, spec.row_builder)
    return render_or_empty(width, height, spec.empty_message, spec.columns, rows, spec.cursor, styles)