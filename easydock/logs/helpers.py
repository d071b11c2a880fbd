"""Filtering, wrapping, merging and range mapping of container log lines."""

from __future__ import annotations

import unicodedata
from collections.abc import Sequence

from ..text import clamp, display_width, strip_ansi
from .viewport import Viewport

MAX_LIVE_LINES = 0
"""Retained live log history; 0 means unbounded."""

INITIAL_TAIL = 200
TAIL_STEP = 200


def filter_log_lines(lines: Sequence[str], query: str) -> list[str]:
    """Lines containing query; a blank query keeps all lines."""
    if not query.strip():
        return list(lines)
    return [line for line in lines if query in line]


def _wrap_log_line(line: str, width: int) -> list[str]:
    if line == "":
        return [""]
    chunks: list[str] = []
    current: list[str] = []
    used = 0
    for char in line:
        char_width = display_width(char)
        if char_width <= 0:
            current.append(char)
            continue
        if used > 0 and used + char_width > width:
            chunks.append("".join(current))
            current, used = [], 0
        current.append(char)
        used += char_width
        if used >= width:
            chunks.append("".join(current))
            current, used = [], 0
    if current:
        chunks.append("".join(current))
    return chunks or [""]


def wrap_log_lines(lines: Sequence[str], width: int) -> list[str]:
    """Split every line into rows of at most width cells."""
    if width <= 0:
        return []
    return [chunk for line in lines for chunk in _wrap_log_line(line, width)]


def viewport_range(viewport: Viewport, total: int) -> tuple[int, int]:
    """Indices [start, end) of the lines the viewport shows."""
    if total <= 0:
        return 0, 0
    start = clamp(viewport.y_offset, 0, max(0, total - 1))
    visible = max(1, viewport.visible_line_count())
    return start, min(total, start + visible)


def wrapped_row_count(line: str, width: int) -> int:
    """Number of rows a line takes when wrapped to width."""
    if width <= 0:
        return 1
    line_width = display_width(line)
    if line_width <= 0:
        return 1
    return max(1, -(-line_width // width))


def _row_to_line_index(log_lines: Sequence[str], wrap_width: int, row: int) -> int:
    if not log_lines:
        return 0
    cursor = 0
    for index, line in enumerate(log_lines):
        rows = wrapped_row_count(line, wrap_width)
        if row < cursor + rows:
            return index
        cursor += rows
    return len(log_lines) - 1


def visible_log_range(viewport: Viewport, wrap_lines: bool, log_lines: Sequence[str]) -> tuple[int, int]:
    """Raw log indices [start, end) visible in the viewport.

    With wrapping, viewport offsets count rows and are mapped back to raw lines.
    """
    total = len(log_lines)
    if total <= 0:
        return 0, 0
    if not wrap_lines:
        return viewport_range(viewport, total)

    wrap_width = max(1, viewport.width)
    total_rows = sum(wrapped_row_count(line, wrap_width) for line in log_lines)
    if total_rows <= 0:
        return 0, 0
    start_row = clamp(viewport.y_offset, 0, total_rows - 1)
    visible_rows = max(1, viewport.visible_line_count())
    end_row = min(total_rows, start_row + visible_rows)

    start_line = _row_to_line_index(log_lines, wrap_width, start_row)
    end_line = _row_to_line_index(log_lines, wrap_width, max(start_row, end_row - 1)) + 1
    return start_line, min(total, end_line)


def raw_line_to_viewport_row_offset(log_lines: Sequence[str], wrap_width: int, line_index: int) -> int:
    """Wrapped row offset of the first row of a raw log line."""
    if not log_lines or line_index <= 0:
        return 0
    line_index = min(line_index, len(log_lines))
    return sum(wrapped_row_count(line, wrap_width) for line in log_lines[:line_index])


def trim_logs(lines: Sequence[str], max_lines: int) -> list[str]:
    """Keep the most recent max_lines lines; max_lines <= 0 keeps all."""
    if max_lines <= 0 or len(lines) <= max_lines:
        return list(lines)
    return list(lines[-max_lines:])


def merge_polled_logs(
    previous: Sequence[str], polled: Sequence[str], max_lines: int
) -> tuple[list[str], bool]:
    """Merge a fresh polled chunk into the previous buffer.

    Returns the merged lines and whether an overlap between the two was found.
    """
    if not previous:
        return trim_logs(polled, max_lines), True
    if not polled:
        return list(previous), True

    old = [line.rstrip("\r") for line in previous]
    new = [line.rstrip("\r") for line in polled]

    for overlap in range(min(len(old), len(new)), 0, -1):
        if old[-overlap:] == new[:overlap]:
            return trim_logs(old + new[overlap:], max_lines), True

    if old == new:
        return trim_logs(old, max_lines), True
    if len(new) < len(old) and old[-len(new):] == new:
        return trim_logs(old, max_lines), True
    return trim_logs(new, max_lines), False


def sanitize_log_render_line(line: str) -> str:
    """Strip escapes and control characters, expanding tabs, for display."""
    clean = strip_ansi(line).replace("\r", "").replace("\t", "    ")
    return "".join(char for char in clean if unicodedata.category(char) != "Cc")