"""Key and load-result handling for the logs screen."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .helpers import INITIAL_TAIL, TAIL_STEP
from .keymap import LogsKeyMap
from .state import LoadRequest, LoadResult, LogsState, Source, Transition

_HORIZONTAL_STEP = 8


def _horizontal_scroll(state: LogsState, right: bool) -> Transition:
    if state.wrap_lines:
        return Transition()
    state.set_follow(False)
    if right:
        state.viewport.scroll_right(_HORIZONTAL_STEP)
        state.horizontal_offset += _HORIZONTAL_STEP
    else:
        state.viewport.scroll_left(_HORIZONTAL_STEP)
        state.horizontal_offset = max(0, state.horizontal_offset - _HORIZONTAL_STEP)
    return Transition()


def _history_transition_if_needed(state: LogsState) -> Transition:
    if not state.can_load_history():
        return Transition()
    next_tail = len(state.data.logs) + TAIL_STEP
    state.start_history_load(next_tail)
    return Transition(
        load=LoadRequest(
            container_id=state.container_id,
            session_id=state.session_id,
            prev_cpu=state.data.cpu_history,
            prev_mem=state.data.mem_history,
            tail=next_tail,
            src=Source.HISTORY,
        )
    )


def _vertical_scroll(state: LogsState, direction: int, is_page: bool) -> Transition:
    state.set_follow(False)
    viewport = state.viewport
    if is_page:
        if direction > 0:
            viewport.page_down()
        else:
            viewport.page_up()
    elif direction > 0:
        viewport.scroll_down(1)
    else:
        viewport.scroll_up(1)

    # Scrolling down onto the last line turns following back on.
    if direction > 0 and viewport.at_bottom():
        state.set_follow(True)
    return _history_transition_if_needed(state)


def _home(state: LogsState) -> Transition:
    state.set_follow(False)
    state.viewport.x_offset = 0
    state.horizontal_offset = 0
    state.viewport.goto_top()
    return _history_transition_if_needed(state)


def _end(state: LogsState) -> Transition:
    state.set_follow(True)
    return Transition()


class Controller:
    """Applies keys and load results to a logs state and says what to do next."""

    def enter(self, state: LogsState, container_id: str) -> Transition:
        """Open the logs of a container and request its first load."""
        state.reset_for_container(state.session_id + 1, container_id, INITIAL_TAIL)
        return Transition(
            load=LoadRequest(
                container_id=container_id,
                session_id=state.session_id,
                tail=state.tail_lines,
                src=Source.INITIAL,
            )
        )

    def exit(self, state: LogsState, containers_tab: int) -> Transition:
        """Leave the logs screen, returning to the containers tab."""
        state.reset_for_exit(state.session_id + 1)
        return Transition(exit_to_browse=True, force_tab=containers_tab)

    def handle_key(
        self, state: LogsState, key: str, keys: LogsKeyMap, containers_tab: int
    ) -> Transition:
        """React to a key pressed on the logs screen."""
        if keys.right.matches(key):
            return _horizontal_scroll(state, True)
        if keys.left.matches(key):
            return _horizontal_scroll(state, False)
        if keys.up.matches(key):
            return _vertical_scroll(state, -1, False)
        if keys.down.matches(key):
            return _vertical_scroll(state, 1, False)
        if keys.page_up.matches(key):
            return _vertical_scroll(state, -1, True)
        if keys.page_down.matches(key):
            return _vertical_scroll(state, 1, True)
        if keys.home.matches(key):
            return _home(state)
        if keys.end.matches(key):
            return _end(state)
        if keys.toggle_follow.matches(key):
            state.set_follow(not state.follow)
            return Transition()
        if keys.open_shell.matches(key):
            return Transition(launch_terminal=True)
        if keys.back.matches(key):
            return self.exit(state, containers_tab)
        return Transition()

    def handle_result(
        self, state: LogsState, result: LoadResult, visible_width: int, visible_rows: int
    ) -> Transition:
        """Apply a finished load; results for another session are ignored."""
        if result.session_id != state.session_id or result.container_id != state.container_id:
            return Transition()
        if result.error is not None:
            state.initial_load = False
            state.history_load = False
            return Transition(error=result.error)

        if result.tail > 0 and result.tail > state.tail_lines:
            state.tail_lines = result.tail

        if result.src == Source.HISTORY:
            state.apply_history(result.data, state.viewport.y_offset)
        elif result.src == Source.INITIAL:
            state.apply_initial(result.data)
        else:
            state.apply_poll(result.data, state.viewport.y_offset)
        state.sync_viewport_from_data(visible_width, visible_rows)
        return Transition()

    def selected_container(self, state: LogsState, containers: Sequence[Any]) -> Any | None:
        """The container whose logs are shown, looked up by its full id."""
        if not state.container_id:
            return None
        return next(
            (item for item in containers if getattr(item, "full_id", None) == state.container_id),
            None,
        )