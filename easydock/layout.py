"""Column allocation and framed-region sizing."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .style import Style, text_height
from .text import clamp_single_line


def allocate_columns(total: int, desired: Sequence[int]) -> list[int]:
    """Distribute total width across the desired column widths."""
    if not desired:
        return []
    if total <= 0:
        return [1] * len(desired)

    widths = [max(1, width) for width in desired]
    current = sum(widths)
    if current == total:
        return widths
    if current < total:
        widths[-1] += total - current
        return widths

    over = current - total
    while over > 0:
        changed = False
        for index, width in enumerate(widths):
            if width > 1 and over > 0:
                widths[index] = width - 1
                over -= 1
                changed = True
        if not changed:
            break
    return widths


@dataclass(frozen=True)
class FrameLayout:
    """Outer and inner dimensions of a framed region."""

    outer_width: int
    outer_height: int
    content_width: int
    content_height: int


def frame_content_width(total: int, frame: Style) -> int:
    """Width left inside a frame after borders and padding."""
    return max(1, max(1, total) - frame.horizontal_frame_size())


def frame_content_height(total: int, frame: Style) -> int:
    """Height left inside a frame after borders, padding and margins."""
    return max(1, max(1, total) - frame.vertical_frame_size())


def main_area_height(total_height: int, header: str, footer: str) -> int:
    """Height left for main content between header and footer."""
    return max(1, total_height - text_height(header) - text_height(footer))


def compute_frame_layout(outer_width: int, outer_height: int, frame: Style) -> FrameLayout:
    """Compute content dimensions within a frame."""
    width = max(1, outer_width)
    height = max(1, outer_height)
    return FrameLayout(
        outer_width=width,
        outer_height=height,
        content_width=frame_content_width(width, frame),
        content_height=frame_content_height(height, frame),
    )


def render_framed_content(frame: Style, layout: FrameLayout, content: str) -> str:
    """Clip content lines to the inner width and wrap them in the frame."""
    inner_width = max(1, layout.outer_width - frame.horizontal_frame_size())
    clipped = "\n".join(clamp_single_line(line, inner_width) for line in content.split("\n"))
    return (
        frame.width(layout.outer_width)
        .height(layout.content_height)
        .max_width(layout.outer_width)
        .max_height(layout.outer_height)
        .render(clipped)
    )