from easydock.logs.helpers import INITIAL_TAIL, TAIL_STEP
from easydock.logs.state import ContainerLiveData, LogsState


def _lines(prefix, count):
    return [f"{prefix}-{index:02d}" for index in range(count)]


def _state(lines, width=80, rows=8):
    state = LogsState(container_id="container-7", session_id=7)
    state.data = ContainerLiveData(logs=list(lines))
    state.sync_viewport_from_data(width, rows)
    return state


def test_new_state_follows_and_is_empty():
    state = LogsState()
    assert state.follow
    assert state.data.logs == []
    assert state.viewport.total_line_count() == 0


def test_set_follow_jumps_to_bottom():
    state = _state(_lines("base", 100))
    state.set_follow(False)
    state.viewport.goto_top()
    state.set_follow(True)
    assert state.viewport.at_bottom()


def test_reset_for_container():
    state = _state(_lines("base", 10))
    state.wrap_lines = True
    state.reset_for_container(5, "ctr-1", INITIAL_TAIL)
    assert state.session_id == 5
    assert state.container_id == "ctr-1"
    assert state.tail_lines == INITIAL_TAIL
    assert state.initial_load
    assert state.data.logs == []
    assert not state.wrap_lines


def test_reset_for_exit_clears_container():
    state = _state(_lines("base", 10))
    state.reset_for_exit(state.session_id + 1)
    assert state.container_id == ""
    assert state.session_id == 8
    assert state.follow


def test_start_history_load():
    state = _state(_lines("base", 20))
    state.viewport.goto_top()
    assert state.can_load_history()
    next_tail = len(state.data.logs) + TAIL_STEP
    state.start_history_load(next_tail)
    assert state.history_load
    assert not state.can_load_history()
    assert state.history_base_len == len(state.data.logs)
    assert state.tail_lines == next_tail


def test_apply_initial_resets_flags():
    state = _state(_lines("base", 5))
    state.initial_load = state.history_load = state.history_done = True
    data = ContainerLiveData(logs=["a", "b"])
    state.apply_initial(data)
    assert not (state.initial_load or state.history_load or state.history_done)
    assert state.data.logs == ["a", "b"]


def test_apply_poll_merges_overlap():
    state = _state(["a", "b"])
    state.initial_load = True
    state.apply_poll(ContainerLiveData(logs=["b", "c"]), state.viewport.y_offset)
    assert state.data.logs == ["a", "b", "c"]
    assert not state.initial_load


def test_apply_poll_disjoint_replaces():
    state = _state(["a", "b"])
    state.apply_poll(ContainerLiveData(logs=["x", "y"]), state.viewport.y_offset)
    assert state.data.logs == ["x", "y"]


def test_apply_poll_counts_lines_appended_during_history_load():
    state = _state(["a", "b"])
    state.start_history_load(TAIL_STEP)
    before = len(state.data.logs)
    state.apply_poll(ContainerLiveData(logs=["b", "c", "d"]), 0)
    assert state.history_appended_during_load == len(state.data.logs) - before


def test_apply_history_advances_offset_by_prepended_lines():
    state = _state(_lines("base", 30))
    state.follow = False
    state.viewport.y_offset = 2
    previous = state.viewport.y_offset
    older = _lines("older", 5)
    state.history_load = True
    state.apply_history(ContainerLiveData(logs=older + state.data.logs), previous)
    assert not state.history_load
    assert not state.history_done
    assert state.viewport.y_offset == previous + len(older)


def test_apply_history_done_after_three_unchanged_responses():
    state = _state(_lines("base", 20))
    for attempt in range(3):
        state.history_load = True
        state.history_base_len = len(state.data.logs)
        state.apply_history(ContainerLiveData(logs=list(state.data.logs)), 0)
        assert state.history_done == (attempt == 2)


def test_set_wrap_lines_remembers_horizontal_offset():
    state = _state(["x" * 200], width=20, rows=4)
    state.horizontal_offset = 8
    state.viewport.x_offset = 8
    state.set_wrap_lines(True)
    assert state.wrap_lines
    assert state.wrap_x_offset == state.horizontal_offset
    assert state.viewport.x_offset == 0


def test_sync_viewport_from_data_applies_filter():
    state = _state(["nope", "match one", "match two", "other"])
    state.filter.query = "match"
    state.sync_viewport_from_data(60, 6)
    assert state.viewport.total_line_count() == 2
    assert "match one" in state.viewport.view()


def test_sync_viewport_wraps_long_lines():
    state = _state(["y" * 50], width=20, rows=8)
    state.wrap_lines = True
    state.sync_viewport_from_data(20, 8)
    assert state.viewport.total_line_count() > 1


def test_rendered_delta_counts_wrapped_rows():
    lines = ["x" * 45, "y" * 5, "z"]
    state = _state(lines, width=20)
    plain = state.rendered_viewport_line_delta(lines, 2)
    state.wrap_lines = True
    wrapped = state.rendered_viewport_line_delta(lines, 2)
    assert plain == 2
    assert wrapped > plain
    assert state.rendered_viewport_line_delta(lines, 0) == 0


def test_visible_log_range_covers_viewport():
    lines = _lines("base", 30)
    state = _state(lines)
    start, end = state.visible_log_range(lines)
    assert end == len(lines)
    assert end - start == state.viewport.visible_line_count()