"""The default colour theme of the interface."""

from __future__ import annotations

from dataclasses import dataclass

from .style import NORMAL_BORDER, ROUNDED_BORDER, Style


@dataclass(frozen=True)
class Theme:
    """Every style used by the interface."""

    page: Style
    header: Style
    title: Style
    title_meta: Style
    breadcrumb: Style
    tab: Style
    active_tab: Style
    badge: Style
    muted: Style
    main_frame: Style
    subpage_frame: Style
    divider: Style
    header_row: Style
    row: Style
    active_row: Style
    section: Style
    label: Style
    value: Style
    error_text: Style
    footer: Style
    key: Style
    key_text: Style
    follow_on: Style
    follow_off: Style
    monitor_box: Style
    state_run: Style
    state_warn: Style
    state_stop: Style
    state_dead: Style
    state_other: Style
    active_bg: str


def _chrome_styles() -> dict[str, Style]:
    return {
        "header": Style().padding(1, 1, 0, 1),
        "title": Style().bold(True).foreground("230").background("24").padding(0, 1),
        "title_meta": Style().foreground("252").background("24").padding(0, 1),
        "tab": Style().foreground("252").padding(0, 1),
        "active_tab": Style().bold(True).foreground("86").underline(True).padding(0, 1),
        "badge": Style().foreground("229").background("60").padding(0, 1),
        "footer": Style().padding(0, 1, 1, 1).margin_bottom(1).foreground("248"),
        "key": Style().bold(True).foreground("230").background("31").padding(0, 1),
        "key_text": Style().foreground("248"),
        "error_text": Style().foreground("203"),
    }


def _browse_styles() -> dict[str, Style]:
    return {
        "section": Style().bold(True).foreground("186"),
        "label": Style().foreground("109"),
        "value": Style().foreground("252"),
        "muted": Style().foreground("244"),
        "divider": Style().foreground("60"),
        "state_run": Style().foreground("42"),
        "state_warn": Style().foreground("214"),
        "state_stop": Style().foreground("203"),
        "state_dead": Style().foreground("199"),
        "state_other": Style().foreground("110"),
    }


def _logs_styles() -> dict[str, Style]:
    return {
        "breadcrumb": Style().bold(True).foreground("247"),
        "follow_on": Style().foreground("252").bold(True),
        "follow_off": Style().foreground("244"),
        "monitor_box": Style().border(NORMAL_BORDER).border_foreground("60").padding(0, 1),
    }


def _table_styles(active_bg: str) -> dict[str, Style]:
    return {
        "header_row": Style().bold(True).foreground("230"),
        "row": Style().foreground("252"),
        "active_row": Style().bold(True).background(active_bg),
    }


def _frame_styles() -> dict[str, Style]:
    return {
        "main_frame": Style().border(ROUNDED_BORDER).border_foreground("67").padding(0, 1),
        "subpage_frame": Style().border(ROUNDED_BORDER).border_foreground("110").padding(0, 1),
    }


def default_theme() -> Theme:
    """The theme the interface uses out of the box."""
    active_bg = "236"
    return Theme(
        page=Style(),
        active_bg=active_bg,
        **_chrome_styles(),
        **_browse_styles(),
        **_logs_styles(),
        **_table_styles(active_bg),
        **_frame_styles(),
    )