"""Width-aware text helpers that keep ANSI escape sequences intact."""

from __future__ import annotations

import math
import re
from collections.abc import Sequence

from wcwidth import wcwidth

ELLIPSIS = "…"

_ANSI_RE = re.compile(
    r"\x1b\[[0-?]*[ -/]*[@-~]"  # CSI sequences
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"  # OSC sequences
    r"|\x1b[PX^_][^\x1b]*\x1b\\"  # DCS, SOS, PM and APC strings
    r"|\x1b[@-_]"  # two-character escapes
    r"|\x1b"  # stray escape bytes
)
_CSI_RE = re.compile(r"\x1b\[[^@-~]*[@-~]")
_TOKEN_RE = re.compile(r"\x1b\[[^@-~]*[@-~]|\x1b|.", re.DOTALL)


def strip_ansi(text: str) -> str:
    """Remove terminal escape sequences from text."""
    return _ANSI_RE.sub("", text)


def _char_width(char: str) -> int:
    return max(0, wcwidth(char))


def display_width(text: str) -> int:
    """Number of terminal cells the visible part of text occupies."""
    return sum(_char_width(char) for char in strip_ansi(text))


def _truncate_with_ansi_tail(text: str, width: int) -> tuple[str, str]:
    """Split text at a visible width.

    Returns the visible prefix (with the escapes met before the cut) and the
    escape sequences found in the cut-off tail, so trailing resets survive.
    """
    if width <= 0:
        return "", ""
    prefix: list[str] = []
    used = 0
    for token in _TOKEN_RE.finditer(text):
        piece = token.group()
        if piece.startswith("\x1b"):
            if len(piece) > 1:
                prefix.append(piece)
            continue
        char_width = _char_width(piece)
        if used + char_width > width:
            tail = "".join(_CSI_RE.findall(text, token.start()))
            return "".join(prefix), tail
        prefix.append(piece)
        used += char_width
    return "".join(prefix), ""


def truncate_with_ellipsis(text: str, width: int) -> str:
    """Constrain text to width cells, ending in an ellipsis when cut."""
    if width <= 0:
        return ""
    if display_width(text) <= width:
        return text
    if width == 1:
        return ELLIPSIS
    prefix, tail = _truncate_with_ansi_tail(text, width - 1)
    return prefix + ELLIPSIS + tail


def constrain_line(line: str, width: int) -> str:
    """Drop trailing newlines and fit the line into width cells."""
    if width <= 0:
        return ""
    return truncate_with_ellipsis(line.rstrip("\n"), width)


def constrain_lines(lines: Sequence[str], width: int) -> list[str]:
    """Apply constrain_line to every line."""
    return [constrain_line(line, width) for line in lines]


def clamp_single_line(line: str, width: int) -> str:
    """Flatten line breaks to spaces and cut to width cells without ellipsis."""
    if width <= 0:
        return ""
    flat = line.replace("\n", " ").replace("\r", " ")
    if display_width(flat) <= width:
        return flat
    prefix, tail = _truncate_with_ansi_tail(flat, width)
    return prefix + tail


def clamp(value: int, low: int, high: int) -> int:
    """Constrain value to the inclusive range [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def clip_lines(lines: Sequence[str], height: int) -> list[str]:
    """Keep at most height lines."""
    if height <= 0:
        return []
    return list(lines[:height])


def clip_and_pad_lines(lines: Sequence[str], height: int, fill: str) -> list[str]:
    """Clip to height lines and pad missing rows with fill."""
    if height <= 0:
        return []
    clipped = clip_lines(lines, height)
    return clipped + [fill] * (height - len(clipped))


def render_percent(value: float) -> str:
    """Format a percentage with one decimal; NaN and infinities become '-'."""
    if math.isnan(value) or math.isinf(value):
        return "-"
    return f"{value:.1f}%"


def format_memory_usage(usage: str, percent: float, limit: str) -> str:
    """Format memory usage with an optional limit and a percentage."""
    if usage == "-":
        return "-"
    if limit and limit != "-":
        return f"{usage} / {limit} ({render_percent(percent)})"
    return f"{usage} ({render_percent(percent)})"


def join_sections(*parts: str) -> str:
    """Join the non-blank parts with newlines."""
    return "\n".join(part for part in parts if part.strip())


def ref_count_text(ref: int) -> str:
    """Render a reference count; zero or negative counts show as '0'."""
    if ref <= 0:
        return "0"
    return str(ref)