import pytest

from easydock.logs.helpers import (
    filter_log_lines,
    merge_polled_logs,
    raw_line_to_viewport_row_offset,
    sanitize_log_render_line,
    trim_logs,
    visible_log_range,
    viewport_range,
    wrap_log_lines,
    wrapped_row_count,
)
from easydock.logs.viewport import Viewport


def test_filter_log_lines():
    lines = ["alpha one", "beta two", "alpha three"]
    assert filter_log_lines(lines, "") == lines
    assert filter_log_lines(lines, "alpha") == ["alpha one", "alpha three"]
    assert filter_log_lines(lines, "zzz") == []


def test_wrap_log_lines():
    assert wrap_log_lines(["abcdef", "gh ijkl"], 3) == ["abc", "def", "gh ", "ijk", "l"]


def test_wrap_log_lines_non_positive_width():
    assert wrap_log_lines(["abc"], 0) == []


def test_wrap_keeps_empty_line():
    assert wrap_log_lines(["", "ab"], 5) == ["", "ab"]


@pytest.mark.parametrize(
    "previous, polled, max_lines, want, want_overlap",
    [
        (None, ["a", "b"], 0, ["a", "b"], True),
        (["a", "b"], None, 0, ["a", "b"], True),
        (["1", "2", "3"], ["3", "4", "5"], 0, ["1", "2", "3", "4", "5"], True),
        (["1", "2"], ["1", "2"], 0, ["1", "2"], True),
        (["1", "2", "3", "4"], ["3", "4"], 0, ["1", "2", "3", "4"], True),
        (["1\r", "2\r", "3\r"], ["3", "4"], 0, ["1", "2", "3", "4"], True),
        (["1", "2"], ["8", "9"], 0, ["8", "9"], False),
        (["1", "2", "3"], ["3", "4", "5"], 3, ["3", "4", "5"], True),
    ],
    ids=[
        "empty previous returns polled",
        "empty polled keeps previous",
        "overlap appends only new suffix",
        "identical slices stay stable",
        "smaller polled suffix keeps previous",
        "carriage returns are normalized for overlap",
        "disjoint poll replaces log buffer",
        "max lines trims merged result",
    ],
)
def test_merge_polled_logs(previous, polled, max_lines, want, want_overlap):
    got, overlap = merge_polled_logs(previous or [], polled or [], max_lines)
    assert got == want
    assert overlap == want_overlap


def test_trim_logs():
    assert trim_logs(["a", "b", "c"], 2) == ["b", "c"]
    assert trim_logs(["a", "b", "c"], 0) == ["a", "b", "c"]


def test_sanitize_log_render_line():
    assert sanitize_log_render_line("\x1b[31mred\x1b[0m\tx\r") == "red    x"
    assert sanitize_log_render_line("a\x00b\x07c") == "abc"


def test_wrapped_row_count():
    assert wrapped_row_count("", 5) == 1
    assert wrapped_row_count("abcdefghij", 5) == 2
    assert wrapped_row_count("abcdefghijk", 5) == 3
    assert wrapped_row_count("abc", 0) == 1


def test_raw_line_to_viewport_row_offset():
    lines = ["a" * 10, "b" * 10, "c" * 10]
    assert raw_line_to_viewport_row_offset(lines, 5, 0) == 0
    assert raw_line_to_viewport_row_offset(lines, 5, 2) == 4
    assert raw_line_to_viewport_row_offset(lines, 5, 99) == 6


def test_viewport_range_plain():
    viewport = Viewport(width=20, height=8)
    viewport.set_content("\n".join(str(index) for index in range(30)))
    viewport.y_offset = 4
    assert viewport_range(viewport, 30) == (4, 12)
    assert viewport_range(viewport, 0) == (0, 0)


def test_visible_log_range_wrapped_maps_to_raw_lines():
    lines = ["a" * 10, "b" * 10, "c" * 10]
    viewport = Viewport(width=5, height=2)
    viewport.set_content("\n".join(wrap_log_lines(lines, 5)))
    viewport.y_offset = 3
    assert visible_log_range(viewport, True, lines) == (1, 3)


def test_visible_log_range_unwrapped_matches_viewport_range():
    lines = [str(index) for index in range(30)]
    viewport = Viewport(width=20, height=8)
    viewport.set_content("\n".join(lines))
    viewport.goto_bottom()
    assert visible_log_range(viewport, False, lines) == viewport_range(viewport, len(lines))