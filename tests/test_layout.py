import pytest

from easydock.layout import (
    FrameLayout,
    allocate_columns,
    compute_frame_layout,
    frame_content_height,
    frame_content_width,
    main_area_height,
    render_framed_content,
)
from easydock.style import NORMAL_BORDER, ROUNDED_BORDER, Style, text_height, text_width


@pytest.fixture
def padded_frame():
    return Style().border(NORMAL_BORDER).padding(1, 2, 3, 4)


def test_frame_content_width_and_height(padded_frame):
    assert frame_content_width(30, padded_frame) == 22
    assert frame_content_height(20, padded_frame) == 14
    assert frame_content_width(1, padded_frame) == 1
    assert frame_content_height(1, padded_frame) == 1


def test_main_area_height():
    header = "line-1\nline-2"
    footer = "line-1"
    assert main_area_height(7, header, footer) == 4
    assert main_area_height(2, header, footer) == 1


def test_compute_frame_layout(padded_frame):
    got = compute_frame_layout(30, 20, padded_frame)
    assert got == FrameLayout(outer_width=30, outer_height=20, content_width=22, content_height=14)

    small = compute_frame_layout(0, -5, padded_frame)
    assert (small.outer_width, small.outer_height) == (1, 1)
    assert (small.content_width, small.content_height) == (1, 1)


def test_render_framed_content():
    frame = Style().border(ROUNDED_BORDER).padding(0, 1)
    layout = compute_frame_layout(24, 5, frame)
    rendered = render_framed_content(frame, layout, "x")
    width = text_width(rendered)
    height = text_height(rendered)
    assert layout.content_width <= width <= layout.outer_width
    assert layout.content_height <= height <= layout.outer_height


def test_render_framed_content_clips_inner_lines():
    frame = Style().border(ROUNDED_BORDER).padding(0, 1)
    layout = compute_frame_layout(20, 4, frame)
    content = "left side text that is definitely longer than the frame width"
    rendered = render_framed_content(frame, layout, content)
    assert rendered.count("\n") + 1 <= layout.outer_height
    for line in rendered.split("\n"):
        assert text_width(line) <= layout.outer_width


def test_allocate_columns_empty():
    assert allocate_columns(10, []) == []


def test_allocate_columns_non_positive_total():
    assert allocate_columns(0, [5, 6, 7]) == [1, 1, 1]


def test_allocate_columns_exact_fit():
    assert allocate_columns(10, [4, 6]) == [4, 6]


def test_allocate_columns_gives_surplus_to_last():
    assert allocate_columns(15, [4, 6]) == [4, 11]


def test_allocate_columns_shrinks_to_total():
    widths = allocate_columns(9, [5, 5, 5])
    assert sum(widths) == 9
    assert all(width >= 1 for width in widths)


def test_allocate_columns_stops_at_one():
    assert allocate_columns(2, [3, 3, 3]) == [1, 1, 1]