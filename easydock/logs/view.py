"""Rendering of the logs screen: header, filter line and the log panel."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from ..layout import compute_frame_layout, render_framed_content
from ..style import Style, join_horizontal
from ..text import clamp_single_line, clip_and_pad_lines, display_width, join_sections
from .helpers import filter_log_lines, sanitize_log_render_line, viewport_range
from .state import FilterState, LogsState

FILTER_HEADER_HEIGHT = 2
_DIVIDER_CHAR = "─"


@dataclass(frozen=True)
class ViewStyles:
    """Styles used by the logs screen."""

    breadcrumb: Style = field(default_factory=Style)
    follow_on: Style = field(default_factory=Style)
    follow_off: Style = field(default_factory=Style)
    muted: Style = field(default_factory=Style)
    divider: Style = field(default_factory=Style)
    subpage_frame: Style = field(default_factory=Style)


@dataclass
class ViewModel:
    """Everything needed to draw the logs screen."""

    state: LogsState = field(default_factory=LogsState)
    container_name: str = ""
    loading_indicator: str = ""
    width: int = 0
    height: int = 0
    styles: ViewStyles = field(default_factory=ViewStyles)


def render_title_divider(style: Style, width: int) -> str:
    """A horizontal rule exactly width cells wide."""
    return style.render(_DIVIDER_CHAR * max(0, width))


def dynamic_input_width(prompt: str, width: int) -> int:
    """Width left for the input text after the prompt."""
    return max(1, width - display_width(prompt))


def _pad_visible_width(line: str, width: int) -> str:
    return line + " " * max(0, width - display_width(line))


def _render_filter_input(filter_state: FilterState, width: int) -> str:
    input_width = dynamic_input_width(filter_state.prompt, width)
    return filter_state.prompt + clamp_single_line(filter_state.query, input_width)


def _render_filter_header(input_line: str, width: int, divider_style: Style) -> str:
    return render_title_divider(divider_style, width) + "\n" + clamp_single_line(input_line, width)


def visible_rows_for_content(content_height: int, filter_active: bool) -> int:
    """Rows left for log lines below the header and, if shown, the filter."""
    overhead = 2
    if filter_active:
        overhead += FILTER_HEADER_HEIGHT
    return max(1, content_height - overhead)


def _render_right_priority_line(left: str, right: str, width: int) -> str:
    if width <= 0:
        return ""
    right = clamp_single_line(right, width)
    right_width = display_width(right)
    if right_width >= width:
        return right
    left = clamp_single_line(left, max(1, width - right_width - 1))
    spacing = max(0, width - display_width(left) - right_width)
    return left + " " * spacing + right


def render_header(vm: ViewModel, breadcrumb: str, total: int, start: int, end: int) -> str:
    """Breadcrumb on the left; wrap, follow and line range on the right."""
    state = vm.state
    styles = vm.styles
    first = last = 0
    if total > 0:
        first = start + 1
        last = max(first, end)
    follow_style = styles.follow_on if state.follow else styles.follow_off
    wrap_style = styles.follow_on if state.wrap_lines else styles.follow_off
    right = join_horizontal(
        styles.muted.render("wrap:"),
        wrap_style.render("on" if state.wrap_lines else "off"),
        styles.muted.render("  "),
        styles.muted.render("follow:"),
        follow_style.render("on" if state.follow else "off"),
        styles.muted.render(f"  lines:({first}-{last}/{total})"),
    )
    return _render_right_priority_line(styles.breadcrumb.render(breadcrumb), right, vm.width)


def _render_loading_line(style: Style, width: int, indicator: str, text: str) -> str:
    prefix = indicator.strip()
    if prefix:
        prefix += " "
    return clamp_single_line(style.render(prefix + text), width)


def _apply_scroll_indicator(
    line: str, width: int, can_left: bool, can_right: bool, style: Style
) -> str:
    if width <= 0:
        return ""
    left = style.render("<")
    right = style.render(">")
    if can_left and can_right:
        inner = max(0, width - 2)
        return left + _pad_visible_width(clamp_single_line(line, inner), inner) + right
    inner = max(0, width - 1)
    body = _pad_visible_width(clamp_single_line(line, inner), inner)
    if can_left:
        return left + body
    return body + right


def _render_horizontal_scroll_indicators(
    state: LogsState, lines: list[str], render_lines: list[str], width: int, style: Style
) -> list[str]:
    if state.wrap_lines or width <= 0 or not lines or not render_lines:
        return lines
    start, end = viewport_range(state.viewport, len(render_lines))
    visible = render_lines[start:end]
    if not visible:
        return lines

    x_offset = max(0, state.viewport.x_offset)
    can_left = x_offset > 0
    out = list(lines)
    for index, (line, source) in enumerate(zip(out, visible)):
        can_right = x_offset < max(0, display_width(source) - width)
        if can_left or can_right:
            out[index] = _apply_scroll_indicator(line, width, can_left, can_right, style)
    return out


def render_panel(vm: ViewModel, width: int, height: int) -> str:
    """The log lines, or a loading or empty message, padded to height rows."""
    state = vm.state
    muted = vm.styles.muted
    content_width = max(1, width - 2)
    if state.initial_load:
        loading = _render_loading_line(muted, content_width, vm.loading_indicator, "Loading logs...")
        return "\n".join(clip_and_pad_lines([loading], height, ""))

    log_list = filter_log_lines(state.data.logs, state.filter.query)
    if not log_list:
        empty = "No logs found for this container."
        if state.filter.query.strip():
            empty = "No log lines match current filter."
        message = clamp_single_line(muted.render(empty), content_width)
        return "\n".join(clip_and_pad_lines([message], height, ""))

    render_lines = [sanitize_log_render_line(line) for line in log_list]
    lines = state.viewport.view().split("\n")
    lines = _render_horizontal_scroll_indicators(
        state, lines, render_lines, max(1, state.viewport.width), muted.reverse(True)
    )
    if state.history_load:
        history = _render_loading_line(
            muted, content_width, vm.loading_indicator, "Loading older logs..."
        )
        lines = [history] + lines
    return "\n".join(clip_and_pad_lines(lines, height, ""))


def render_content(vm: ViewModel) -> str:
    """The whole logs page inside its frame."""
    if vm.width == 0 or vm.height == 0:
        return ""
    styles = vm.styles
    state = vm.state
    layout = compute_frame_layout(vm.width, vm.height, styles.subpage_frame)
    breadcrumb = clamp_single_line(
        f"Containers / {vm.container_name} / Logs", layout.content_width
    )
    logs_height = visible_rows_for_content(layout.content_height, state.filter.active)
    log_list = filter_log_lines(state.data.logs, state.filter.query)
    start, end = state.visible_log_range(log_list)
    headline = render_header(
        replace(vm, width=layout.content_width), breadcrumb, len(log_list), start, end
    )
    panel = render_panel(vm, layout.content_width, logs_height)

    if state.filter.active:
        input_line = _render_filter_input(state.filter, layout.content_width)
        middle = _render_filter_header(input_line, layout.content_width, styles.divider)
    else:
        middle = render_title_divider(styles.divider, layout.content_width)
    return render_framed_content(
        styles.subpage_frame, layout, join_sections(headline, middle, panel)
    )