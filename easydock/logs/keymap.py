"""Key bindings of the logs screen and their help text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyBinding:
    """Keys that trigger an action, with the label and text shown in help."""

    keys: tuple[str, ...]
    help_key: str = ""
    help_desc: str = ""

    def matches(self, key: str) -> bool:
        """Whether the pressed key is one of this binding's keys."""
        return key in self.keys


def _help_key_label(label: str) -> str:
    return f" {label} "


@dataclass(frozen=True)
class LogsKeyMap:
    """Every binding of the logs screen."""

    right: KeyBinding = KeyBinding(("right",), "→", "scroll right")
    left: KeyBinding = KeyBinding(("left",), "←", "scroll left")
    up: KeyBinding = KeyBinding(("up", "k"), "↑/k", "line up")
    down: KeyBinding = KeyBinding(("down", "j"), "↓/j", "line down")
    page_up: KeyBinding = KeyBinding(("pgup",), "pgup", "page up")
    page_down: KeyBinding = KeyBinding(("pgdown",), "pgdn", "page down")
    home: KeyBinding = KeyBinding(("home",), "home", "top")
    end: KeyBinding = KeyBinding(("end",), "end", "bottom")
    toggle_follow: KeyBinding = KeyBinding(("f",), _help_key_label("f"), "toggle follow")
    toggle_wrap: KeyBinding = KeyBinding(("w",), _help_key_label("w"), "toggle wrap")
    open_filter: KeyBinding = KeyBinding(("/",), _help_key_label("/"), "filter")
    open_shell: KeyBinding = KeyBinding(("s",), _help_key_label("s"), "shell")
    back: KeyBinding = KeyBinding(("esc",), _help_key_label("esc"), "back")
    help_navigate: KeyBinding = KeyBinding(
        ("left", "up", "down", "right"), _help_key_label("← ↑ ↓ →"), "navigate"
    )
    help_page: KeyBinding = KeyBinding(("pgup", "pgdown"), _help_key_label("pgup/dn"), "jump up/down")
    help_home_end: KeyBinding = KeyBinding(
        ("home", "end"), _help_key_label("home/end"), "go to top/bottom"
    )

    def short_help(self) -> list[KeyBinding]:
        """Bindings shown in the one-line footer."""
        return [
            self.help_navigate,
            self.help_page,
            self.help_home_end,
            self.open_shell,
            self.open_filter,
            self.toggle_follow,
            self.toggle_wrap,
            self.back,
        ]

    def full_help(self) -> list[list[KeyBinding]]:
        """Bindings shown in the expanded help, in columns."""
        return [
            [self.help_navigate, self.page_up, self.page_down],
            [self.home, self.end],
            [self.open_shell],
            [self.toggle_follow, self.toggle_wrap, self.back],
        ]