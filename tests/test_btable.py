import pytest

from easydock.btable import Column, Table, TableStyles, default_table_styles, scroll_window
from easydock.style import Style, text_height
from easydock.text import display_width, strip_ansi

PLAIN = TableStyles(header=Style(), cell=Style(), selected=Style())


def test_colored_cell_does_not_spill_into_next_column():
    table = Table(
        columns=[Column("STATE", 4), Column("STATUS", 6)],
        rows=[["\x1b[32mrunning\x1b[39m", "ok"]],
        width=20,
        height=2,
    )
    row = table.render_row(0)
    status_index = row.find("ok")
    assert status_index != -1
    reset_index = row.rfind("\x1b[39m", 0, status_index)
    assert reset_index != -1
    ellipsis_index = row.find("…")
    assert ellipsis_index != -1
    assert ellipsis_index < reset_index


@pytest.mark.parametrize(
    "total, cursor, height, expected",
    [
        (0, 0, 5, (0, 0)),
        (3, 1, 0, (0, 0)),
        (3, 1, 5, (0, 3)),
        (10, 0, 4, (0, 4)),
        (10, 5, 4, (3, 7)),
        (10, 9, 4, (6, 10)),
        (10, 42, 4, (6, 10)),
    ],
)
def test_scroll_window(total, cursor, height, expected):
    assert scroll_window(total, cursor, height) == expected


def test_headers_view_joins_with_gap_and_skips_zero_width():
    table = Table(columns=[Column("AB", 2), Column("HIDDEN", 0), Column("CD", 2)])
    assert table.headers_view() == "AB  CD"


def test_headers_view_truncates_titles():
    table = Table(columns=[Column("STATUS", 4)])
    assert table.headers_view() == "STA…"


def test_set_cursor_clamps_to_rows():
    table = Table(columns=[Column("A", 3)], rows=[["x"], ["y"]], width=10, height=4)
    table.set_cursor(99)
    assert table.cursor == 1
    table.set_cursor(-3)
    assert table.cursor == 0


def test_set_cursor_without_rows_is_zero():
    table = Table(columns=[Column("A", 3)], width=10, height=4)
    table.set_cursor(5)
    assert table.cursor == 0


def test_view_has_table_height_and_width():
    table = Table(columns=[Column("A", 3)], rows=[["x"], ["y"], ["z"]], styles=PLAIN, width=10, height=3)
    view = table.view()
    lines = view.split("\n")
    assert text_height(view) == 3
    assert lines[1].rstrip() == "x"
    assert all(display_width(line) == 10 for line in lines[1:])


def test_view_scrolls_to_keep_cursor_visible():
    table = Table(columns=[Column("A", 3)], rows=[["x"], ["y"], ["z"]], styles=PLAIN, width=10, height=3)
    assert "z" not in table.view()
    table.set_cursor(2)
    body = table.view().split("\n")[1:]
    assert [line.rstrip() for line in body] == ["y", "z"]


def test_empty_table_pads_body():
    table = Table(columns=[Column("A", 3)], styles=PLAIN, width=5, height=3)
    lines = table.view().split("\n")
    assert len(lines) == 3
    assert lines[0] == "A  "
    assert all(line.strip() == "" for line in lines[1:])


def test_selected_row_uses_selected_style():
    table = Table(
        columns=[Column("A", 3)], rows=[["x"], ["y"]], styles=default_table_styles(), width=10, height=4
    )
    assert table.render_row(0).startswith("\x1b[1m")
    assert table.render_row(1) == "y  "
    assert strip_ansi(table.render_row(0)) == "x  "