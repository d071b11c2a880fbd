"""State of the logs screen and the updates applied to it."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from enum import Enum

from .helpers import (
    MAX_LIVE_LINES,
    filter_log_lines,
    merge_polled_logs,
    sanitize_log_render_line,
    trim_logs,
    visible_log_range,
    wrap_log_lines,
    wrapped_row_count,
)
from .viewport import Viewport

_HISTORY_NO_PROGRESS_LIMIT = 3


class Source(str, Enum):
    """Why a log load was requested."""

    INITIAL = "initial"
    HISTORY = "history"
    POLL = "poll"


@dataclass
class ContainerLiveData:
    """Log lines and resource history of one container."""

    logs: list[str] = field(default_factory=list)
    cpu_history: list[float] = field(default_factory=list)
    mem_history: list[float] = field(default_factory=list)


@dataclass
class FilterState:
    """The line filter: whether it is being edited, and its query."""

    active: bool = False
    query: str = ""
    prompt: str = "🔎︎ "


@dataclass
class LoadResult:
    """Outcome of loading container logs."""

    container_id: str
    session_id: int
    data: ContainerLiveData = field(default_factory=ContainerLiveData)
    error: Exception | None = None
    tail: int = 0
    src: Source | None = None


@dataclass
class LoadRequest:
    """A request to load container logs."""

    container_id: str
    session_id: int
    prev_cpu: list[float] = field(default_factory=list)
    prev_mem: list[float] = field(default_factory=list)
    tail: int = 0
    src: Source = Source.INITIAL


@dataclass
class Transition:
    """What the caller should do after the logs state changed."""

    exit_to_browse: bool = False
    force_tab: int = 0
    load: LoadRequest | None = None
    error: Exception | None = None
    launch_terminal: bool = False


def _new_viewport() -> Viewport:
    viewport = Viewport(width=1, height=1, horizontal_step=8)
    viewport.set_content("")
    return viewport


@dataclass
class LogsState:
    """Everything the logs screen tracks for the container it shows."""

    container_id: str = ""
    session_id: int = 0
    data: ContainerLiveData = field(default_factory=ContainerLiveData)
    tail_lines: int = 0
    history_base_len: int = 0
    history_appended_during_load: int = 0
    history_no_progress_count: int = 0
    filter: FilterState = field(default_factory=FilterState)
    horizontal_offset: int = 0
    wrap_lines: bool = False
    wrap_x_offset: int = 0
    initial_load: bool = False
    history_done: bool = False
    history_load: bool = False
    follow: bool = True
    viewport: Viewport = field(default_factory=_new_viewport)

    def _reset(self) -> None:
        fresh = LogsState()
        for item in fields(self):
            setattr(self, item.name, getattr(fresh, item.name))

    def set_follow(self, enabled: bool) -> None:
        """Turn following on or off; turning it on jumps to the bottom."""
        self.follow = enabled
        if enabled:
            self.viewport.goto_bottom()

    def set_wrap_lines(self, enabled: bool) -> None:
        """Switch wrapping, remembering the horizontal offset across the switch."""
        if self.wrap_lines == enabled:
            return
        if enabled:
            self.wrap_x_offset = self.horizontal_offset
            self.viewport.x_offset = 0
        else:
            self.viewport.x_offset = self.wrap_x_offset
        self.wrap_lines = enabled

    def reset_for_container(self, session_id: int, container_id: str, tail: int) -> None:
        """Start afresh for a container, waiting for its first load."""
        self._reset()
        self.session_id = session_id
        self.container_id = container_id
        self.tail_lines = tail
        self.initial_load = True

    def reset_for_exit(self, session_id: int) -> None:
        """Clear everything when leaving the logs screen."""
        self._reset()
        self.session_id = session_id

    def can_load_history(self) -> bool:
        return self.viewport.at_top() and not self.history_done and not self.history_load

    def start_history_load(self, next_tail: int) -> None:
        """Mark an older-history load as running."""
        self.history_load = True
        self.history_done = False
        self.history_base_len = len(self.data.logs)
        self.history_appended_during_load = 0
        if next_tail > self.tail_lines:
            self.tail_lines = next_tail

    def apply_initial(self, data: ContainerLiveData) -> None:
        self.initial_load = False
        self.history_load = False
        self.history_done = False
        self.data = data

    def apply_history(self, data: ContainerLiveData, previous_y_offset: int) -> None:
        """Take a longer log tail, keeping the view on the same lines."""
        previous_len = self.history_base_len if self.history_base_len > 0 else len(self.data.logs)
        self.history_load = False
        prepended = max(0, len(data.logs) - previous_len - self.history_appended_during_load)
        if prepended == 0:
            self.history_no_progress_count += 1
        else:
            self.history_no_progress_count = 0
        if self.history_no_progress_count >= _HISTORY_NO_PROGRESS_LIMIT:
            self.history_done = True
        delta = self.rendered_viewport_line_delta(data.logs, prepended)
        self.data = data
        self.history_base_len = 0
        self.history_appended_during_load = 0
        if not self.follow:
            self.viewport.y_offset = previous_y_offset + delta

    def apply_poll(self, data: ContainerLiveData, previous_y_offset: int) -> None:
        """Merge freshly polled logs into the buffer."""
        previous_len = len(self.data.logs)
        merged, overlap_found = merge_polled_logs(self.data.logs, data.logs, MAX_LIVE_LINES)
        if overlap_found or not self.data.logs:
            data = replace(data, logs=merged)
        else:
            data = replace(data, logs=trim_logs(data.logs, MAX_LIVE_LINES))
        if self.history_load:
            self.history_appended_during_load += max(0, len(data.logs) - previous_len)
        self.data = data
        self.initial_load = False
        if not self.follow:
            self.viewport.y_offset = previous_y_offset

    def sync_viewport(self, lines: list[str], visible_width: int, visible_rows: int) -> None:
        """Size the viewport and give it lines to show."""
        self.viewport.width = visible_width
        self.viewport.height = visible_rows
        self.viewport.set_content("\n".join(lines))
        if self.follow:
            self.viewport.goto_bottom()

    def sync_viewport_from_data(self, visible_width: int, visible_rows: int) -> None:
        """Show the filtered, sanitised and possibly wrapped logs."""
        lines = [
            sanitize_log_render_line(line)
            for line in filter_log_lines(self.data.logs, self.filter.query)
        ]
        if self.wrap_lines:
            lines = wrap_log_lines(lines, visible_width)
        self.sync_viewport(lines, visible_width, visible_rows)

    def visible_log_range(self, log_lines: list[str]) -> tuple[int, int]:
        """Raw indices [start, end) of log_lines currently on screen."""
        return visible_log_range(self.viewport, self.wrap_lines, log_lines)

    def rendered_viewport_line_delta(self, all_lines: list[str], prepended: int) -> int:
        """Viewport rows taken by the first prepended lines of all_lines."""
        if prepended <= 0 or not all_lines:
            return 0
        prepended = min(prepended, len(all_lines))
        added = filter_log_lines(all_lines[:prepended], self.filter.query)
        if not self.wrap_lines:
            return len(added)
        width = max(1, self.viewport.width)
        return sum(wrapped_row_count(sanitize_log_render_line(line), width) for line in added)