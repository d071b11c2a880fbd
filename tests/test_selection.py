from easydock.selection import (
    Cursors,
    SelectionState,
    clamp_all_cursors,
    clamp_cursor_for_tab,
    cursor_for_tab,
    move_active_tab,
    move_cursor_for_tab,
    reconcile_cursor_for_tab,
    set_cursor_for_tab,
    toggle_container_scope,
)


def test_move_active_tab():
    assert move_active_tab(0, 1, 0, 3) == 1
    assert move_active_tab(0, -1, 0, 3) == 0
    assert move_active_tab(3, 1, 0, 3) == 3


def test_toggle_container_scope():
    assert toggle_container_scope(0, 0, True) == (False, True)
    assert toggle_container_scope(1, 0, True) == (True, False)


def test_cursor_apis():
    c = Cursors(container=1, image=2, network=3, volume=4)

    assert cursor_for_tab(c, 0) == 1
    assert set_cursor_for_tab(c, 2, 9) is True
    assert c.network == 9

    move_cursor_for_tab(c, 0, 10, 3)
    assert c.container == 2

    clamp_cursor_for_tab(c, 1, 0)
    assert c.image == 0

    assert reconcile_cursor_for_tab(c, 3, 7, False) is False
    assert c.volume == 4
    assert reconcile_cursor_for_tab(c, 3, 7, True) is True
    assert c.volume == 7


def test_unknown_tab():
    c = Cursors()
    assert cursor_for_tab(c, 9) is None
    assert set_cursor_for_tab(c, -1, 3) is False
    assert move_cursor_for_tab(c, 4, 1, 10) is False
    assert c == Cursors()


def test_clamp_all_cursors():
    c = Cursors(container=10, image=10, network=10, volume=10)
    counts = {0: 1, 1: 2, 2: 3, 3: 4}
    clamp_all_cursors(c, [0, 1, 2, 3], counts.__getitem__)
    assert c == Cursors(container=0, image=1, network=2, volume=3)


def test_selection_state_defaults():
    state = SelectionState(active_tab=2, show_all=True)
    assert state.cursors == Cursors()
    assert state.active_tab == 2