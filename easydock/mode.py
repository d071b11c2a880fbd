"""Top-level screen modes and root key routing."""

from __future__ import annotations

from enum import IntEnum


class Screen(IntEnum):
    """A top-level TUI mode."""

    BROWSE = 0
    LOGS = 1


class RootKeyRoute(IntEnum):
    """Where a key pressed at the root level is sent."""

    BROWSE = 0
    LOGS = 1
    NOOP = 2
    QUIT = 3


def route_root_key(key: str, screen: Screen) -> RootKeyRoute:
    """Decide whether a key is global, ignored, or handled by the screen."""
    if key == "ctrl+c":
        return RootKeyRoute.QUIT
    if key in ("q", "tab"):
        return RootKeyRoute.NOOP
    if screen == Screen.LOGS:
        return RootKeyRoute.LOGS
    return RootKeyRoute.BROWSE


def enter_logs_transition() -> Screen:
    """Screen to show when entering logs mode."""
    return Screen.LOGS


def exit_logs_transition(containers_tab: int) -> tuple[Screen, int]:
    """Screen and tab to show when leaving logs mode."""
    return Screen.BROWSE, containers_tab