"""Browse tab, scope and per-tab cursor state."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from .text import clamp

_TAB_FIELDS = ("container", "image", "network", "volume")


@dataclass
class Cursors:
    """Cursor position for each browse tab."""

    container: int = 0
    image: int = 0
    network: int = 0
    volume: int = 0


@dataclass
class SelectionState:
    """Active tab, container scope and cursors together."""

    active_tab: int = 0
    show_all: bool = False
    cursors: Cursors = field(default_factory=Cursors)


def move_active_tab(current: int, delta: int, min_tab: int, max_tab: int) -> int:
    """Shift the active tab and clamp it to [min_tab, max_tab]."""
    return clamp(current + delta, min_tab, max_tab)


def toggle_container_scope(active_tab: int, containers_tab: int, show_all: bool) -> tuple[bool, bool]:
    """Flip show_all on the containers tab; return the value and whether it flipped."""
    if active_tab != containers_tab:
        return show_all, False
    return not show_all, True


def cursor_for_tab(cursors: Cursors, tab: int) -> int | None:
    """Cursor of a tab, or None for an unknown tab."""
    if 0 <= tab < len(_TAB_FIELDS):
        return getattr(cursors, _TAB_FIELDS[tab])
    return None


def set_cursor_for_tab(cursors: Cursors, tab: int, value: int) -> bool:
    """Set the cursor of a tab; False when the tab does not exist."""
    if not 0 <= tab < len(_TAB_FIELDS):
        return False
    setattr(cursors, _TAB_FIELDS[tab], value)
    return True


def move_cursor_for_tab(cursors: Cursors, tab: int, delta: int, item_count: int) -> bool:
    """Move a tab cursor by delta within [0, item_count - 1]."""
    cursor = cursor_for_tab(cursors, tab)
    if cursor is None:
        return False
    return set_cursor_for_tab(cursors, tab, clamp(cursor + delta, 0, max(0, item_count - 1)))


def clamp_cursor_for_tab(cursors: Cursors, tab: int, item_count: int) -> bool:
    """Clamp a tab cursor to [0, item_count - 1]."""
    return move_cursor_for_tab(cursors, tab, 0, item_count)


def clamp_all_cursors(
    cursors: Cursors, tabs: Iterable[int], item_count_for_tab: Callable[[int], int]
) -> None:
    """Clamp the cursor of every listed tab using its item count."""
    for tab in tabs:
        clamp_cursor_for_tab(cursors, tab, item_count_for_tab(tab))


def reconcile_cursor_for_tab(cursors: Cursors, tab: int, index: int, found: bool) -> bool:
    """Point a tab cursor at index when the item was found."""
    if not found:
        return False
    return set_cursor_for_tab(cursors, tab, index)