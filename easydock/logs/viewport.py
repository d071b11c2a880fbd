"""A scrollable window over lines of text, with vertical and horizontal offsets."""

from __future__ import annotations

import re

from ..text import clamp, display_width

_TOKEN_RE = re.compile(r"\x1b\[[^@-~]*[@-~]|.", re.DOTALL)


def _cut(line: str, start: int, end: int) -> str:
    """Keep the cells of line in [start, end), preserving escape sequences."""
    kept: list[str] = []
    column = 0
    for token in _TOKEN_RE.findall(line):
        if token.startswith("\x1b"):
            kept.append(token)
            continue
        cells = display_width(token)
        if column >= start and column + cells <= end:
            kept.append(token)
        column += cells
    return "".join(kept)


class Viewport:
    """Shows a window of lines; offsets are always clamped to the content."""

    def __init__(self, width: int = 0, height: int = 0, horizontal_step: int = 0) -> None:
        self.width = width
        self.height = height
        self.horizontal_step = horizontal_step
        self._lines: list[str] = []
        self._longest_line_width = 0
        self._y_offset = 0
        self._x_offset = 0

    def _max_y_offset(self) -> int:
        return max(0, len(self._lines) - self.height)

    def _max_x_offset(self) -> int:
        return max(0, self._longest_line_width - self.width)

    @property
    def y_offset(self) -> int:
        return self._y_offset

    @y_offset.setter
    def y_offset(self, value: int) -> None:
        self._y_offset = clamp(value, 0, self._max_y_offset())

    @property
    def x_offset(self) -> int:
        return self._x_offset

    @x_offset.setter
    def x_offset(self, value: int) -> None:
        self._x_offset = clamp(value, 0, self._max_x_offset())

    def set_content(self, content: str) -> None:
        """Replace the content; an offset past the new end moves to the bottom."""
        lines = content.replace("\r\n", "\n").split("\n")
        if len(lines) == 1 and display_width(lines[0]) == 0:
            lines = []
        self._lines = lines
        self._longest_line_width = max((display_width(line) for line in lines), default=0)
        if self._y_offset > self._max_y_offset():
            self.goto_bottom()

    def _visible_lines(self) -> list[str]:
        if not self._lines:
            return []
        top = max(0, self._y_offset)
        bottom = clamp(self._y_offset + self.height, top, len(self._lines))
        return self._lines[top:bottom]

    def total_line_count(self) -> int:
        return len(self._lines)

    def visible_line_count(self) -> int:
        return len(self._visible_lines())

    def scroll_up(self, lines: int) -> None:
        if self.at_top() or lines <= 0 or not self._lines:
            return
        self.y_offset = self._y_offset - lines

    def scroll_down(self, lines: int) -> None:
        if self.at_bottom() or lines <= 0 or not self._lines:
            return
        self.y_offset = self._y_offset + lines

    def scroll_left(self, columns: int) -> None:
        self.x_offset = self._x_offset - columns

    def scroll_right(self, columns: int) -> None:
        self.x_offset = self._x_offset + columns

    def page_up(self) -> None:
        if self.at_top():
            return
        self.scroll_up(self.height)

    def page_down(self) -> None:
        if self.at_bottom():
            return
        self.scroll_down(self.height)

    def goto_top(self) -> None:
        self._y_offset = 0

    def goto_bottom(self) -> None:
        self._y_offset = self._max_y_offset()

    def at_top(self) -> bool:
        return self._y_offset <= 0

    def at_bottom(self) -> bool:
        return self._y_offset >= self._max_y_offset()

    def view(self) -> str:
        """The visible window, padded to exactly width by height cells."""
        if self.width <= 0 or self.height <= 0:
            return ""
        rows = []
        for line in self._visible_lines():
            cut = _cut(line, self._x_offset, self._x_offset + self.width)
            rows.append(cut + " " * max(0, self.width - display_width(cut)))
        rows.extend(" " * self.width for _ in range(self.height - len(rows)))
        return "\n".join(rows[: self.height])