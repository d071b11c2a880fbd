from easydock.logs.keymap import KeyBinding, LogsKeyMap


def test_up_and_down_accept_vim_keys():
    keys = LogsKeyMap()
    assert keys.up.matches("up")
    assert keys.up.matches("k")
    assert keys.down.matches("j")
    assert not keys.up.matches("j")


def test_back_is_escape_only():
    keys = LogsKeyMap()
    assert keys.back.matches("esc")
    assert not keys.back.matches("q")


def test_custom_binding_matches_its_keys():
    binding = KeyBinding(("x", "y"), "x", "do")
    assert binding.matches("y")
    assert not binding.matches("z")


def test_help_key_labels_are_padded():
    keys = LogsKeyMap()
    assert keys.toggle_follow.help_key == " f "
    assert keys.toggle_follow.help_desc == "toggle follow"


def test_short_help_order():
    keys = LogsKeyMap()
    short = keys.short_help()
    assert short[0] is keys.help_navigate
    assert short[-1] is keys.back
    assert keys.open_filter in short


def test_full_help_groups_cover_shell_and_wrap():
    keys = LogsKeyMap()
    groups = keys.full_help()
    flat = [binding for group in groups for binding in group]
    assert [keys.open_shell] in groups
    assert keys.toggle_wrap in flat
    assert keys.home in flat and keys.end in flat