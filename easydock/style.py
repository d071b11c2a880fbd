"""A small terminal styling model: colours, attributes, padding, borders and sizing."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from .text import clamp_single_line, display_width


@dataclass(frozen=True)
class Border:
    """Characters that draw a box around styled content."""

    top: str
    bottom: str
    left: str
    right: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str


NORMAL_BORDER = Border("─", "─", "│", "│", "┌", "┐", "└", "┘")
ROUNDED_BORDER = Border("─", "─", "│", "│", "╭", "╮", "╰", "╯")

_TOKEN_RE = re.compile(r"\x1b\[[^@-~]*[@-~]|.", re.DOTALL)


def _color_code(color: str, base: int) -> str:
    if color.startswith("#"):
        red, green, blue = (int(color[index:index + 2], 16) for index in (1, 3, 5))
        return f"{base + 8};2;{red};{green};{blue}"
    number = int(color)
    if number < 8:
        return str(base + number)
    if number < 16:
        return str(base + 60 + number - 8)
    return f"{base + 8};5;{number}"


def _paint(text: str, codes: list[str]) -> str:
    if not codes or not text:
        return text
    return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


def _hard_wrap(line: str, width: int) -> list[str]:
    if width <= 0 or display_width(line) <= width:
        return [line]
    chunks: list[str] = []
    current: list[str] = []
    used = 0
    for token in _TOKEN_RE.findall(line):
        if token.startswith("\x1b"):
            current.append(token)
            continue
        token_width = display_width(token)
        if used and used + token_width > width:
            chunks.append("".join(current))
            current, used = [], 0
        current.append(token)
        used += token_width
    chunks.append("".join(current))
    return chunks


@dataclass(frozen=True)
class Style:
    """Immutable style; every setter returns a new style."""

    _bold: bool = False
    _underline: bool = False
    _reverse: bool = False
    _fg: str | None = None
    _bg: str | None = None
    _padding: tuple[int, int, int, int] = (0, 0, 0, 0)
    _margin_bottom: int = 0
    _border: Border | None = None
    _border_fg: str | None = None
    _width: int | None = None
    _height: int | None = None
    _max_width: int | None = None
    _max_height: int | None = None
    _inline: bool = False

    def bold(self, enabled: bool = True) -> Style:
        return replace(self, _bold=enabled)

    def underline(self, enabled: bool = True) -> Style:
        return replace(self, _underline=enabled)

    def reverse(self, enabled: bool = True) -> Style:
        return replace(self, _reverse=enabled)

    def foreground(self, color: str | int) -> Style:
        return replace(self, _fg=str(color))

    def background(self, color: str | int) -> Style:
        return replace(self, _bg=str(color))

    def padding(self, *args: int) -> Style:
        """Set padding with the CSS shorthand of one to four values."""
        if len(args) == 1:
            sides = (args[0],) * 4
        elif len(args) == 2:
            sides = (args[0], args[1], args[0], args[1])
        elif len(args) == 3:
            sides = (args[0], args[1], args[2], args[1])
        elif len(args) == 4:
            sides = tuple(args)
        else:
            raise ValueError(f"padding takes 1 to 4 values, got {len(args)}")
        return replace(self, _padding=tuple(max(0, side) for side in sides))

    def margin_bottom(self, value: int) -> Style:
        return replace(self, _margin_bottom=max(0, value))

    def border(self, border: Border | None) -> Style:
        return replace(self, _border=border)

    def border_foreground(self, color: str | int) -> Style:
        return replace(self, _border_fg=str(color))

    def width(self, value: int) -> Style:
        """Total width including padding and border."""
        return replace(self, _width=value)

    def height(self, value: int) -> Style:
        """Minimum total height including padding and border."""
        return replace(self, _height=value)

    def max_width(self, value: int) -> Style:
        return replace(self, _max_width=value)

    def max_height(self, value: int) -> Style:
        return replace(self, _max_height=value)

    def inline(self, enabled: bool = True) -> Style:
        """Render on one line, ignoring padding, border and margins."""
        return replace(self, _inline=enabled)

    def horizontal_frame_size(self) -> int:
        """Cells taken horizontally by padding and border."""
        top, right, bottom, left = self._padding
        return left + right + (2 if self._border else 0)

    def vertical_frame_size(self) -> int:
        """Rows taken vertically by padding, border and margin."""
        top, right, bottom, left = self._padding
        return top + bottom + (2 if self._border else 0) + self._margin_bottom

    def _text_codes(self) -> list[str]:
        codes = []
        if self._bold:
            codes.append("1")
        if self._underline:
            codes.append("4")
        if self._reverse:
            codes.append("7")
        if self._fg is not None:
            codes.append(_color_code(self._fg, 30))
        if self._bg is not None:
            codes.append(_color_code(self._bg, 40))
        return codes

    def _blank(self, count: int) -> str:
        if count <= 0:
            return ""
        spaces = " " * count
        if self._bg is None:
            return spaces
        return _paint(spaces, [_color_code(self._bg, 40)])

    def render(self, text: str) -> str:
        """Apply the style to text and return the rendered block."""
        inline = self._inline
        framed = not inline
        text = str(text).replace("\t", "    ")
        if inline:
            text = text.replace("\n", "")
        lines = text.split("\n")

        top, right, bottom, left = self._padding if framed else (0, 0, 0, 0)
        border = self._border if framed else None
        edge = 2 if border else 0

        inner_width = None
        if self._width is not None:
            inner_width = max(0, self._width - left - right - edge)
            if framed:
                lines = [chunk for line in lines for chunk in _hard_wrap(line, inner_width)]

        block = max(display_width(line) for line in lines)
        if inner_width is not None:
            block = max(block, inner_width)

        codes = self._text_codes()
        lines = [_paint(line, codes) + self._blank(block - display_width(line)) for line in lines]

        if framed:
            if self._height is not None:
                inner_height = self._height - top - bottom - edge
                lines.extend(self._blank(block) for _ in range(inner_height - len(lines)))
            full = block + left + right
            lines = (
                [self._blank(full)] * top
                + [self._blank(left) + line + self._blank(right) for line in lines]
                + [self._blank(full)] * bottom
            )
            if border:
                border_codes = [] if self._border_fg is None else [_color_code(self._border_fg, 30)]
                side_left = _paint(border.left, border_codes)
                side_right = _paint(border.right, border_codes)
                lines = (
                    [_paint(border.top_left + border.top * full + border.top_right, border_codes)]
                    + [side_left + line + side_right for line in lines]
                    + [_paint(border.bottom_left + border.bottom * full + border.bottom_right, border_codes)]
                )
            lines.extend(" " * (full + edge) for _ in range(self._margin_bottom))

        if self._max_width is not None:
            lines = [clamp_single_line(line, self._max_width) for line in lines]
        if self._max_height is not None:
            lines = lines[: max(0, self._max_height)]
        return "\n".join(lines)


def text_height(text: str) -> int:
    """Number of lines in a block of text."""
    return text.count("\n") + 1


def text_width(text: str) -> int:
    """Visible width of the widest line in a block of text."""
    return max(display_width(line) for line in text.split("\n"))


def join_vertical(*blocks: str) -> str:
    """Stack blocks top to bottom, left aligned and padded to a common width."""
    if not blocks:
        return ""
    lines = [line for block in blocks for line in block.split("\n")]
    width = max(display_width(line) for line in lines)
    return "\n".join(line + " " * (width - display_width(line)) for line in lines)


def join_horizontal(*blocks: str) -> str:
    """Place blocks side by side, top aligned."""
    if not blocks:
        return ""
    split_blocks = [block.split("\n") for block in blocks]
    height = max(len(lines) for lines in split_blocks)
    columns = []
    for lines in split_blocks:
        width = max(display_width(line) for line in lines)
        padded = [line + " " * (width - display_width(line)) for line in lines]
        padded.extend(" " * width for _ in range(height - len(lines)))
        columns.append(padded)
    return "\n".join("".join(row) for row in zip(*columns))