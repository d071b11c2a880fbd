# easydock

This library holds the building blocks of a terminal dashboard for containers.
It provides:

- width-aware text helpers that keep ANSI escape sequences intact;
- a small immutable `Style`;
- table layout and rendering;
- tab and cursor bookkeeping;
- a complete state model for a scrollable, filterable container log viewer,
  with its renderer.

## Installation

From the project directory:

```
pip install .
```

The only runtime dependency is `wcwidth`. It is used to measure how many
terminal cells a character takes.

## Modules

### `easydock.text`

These helpers measure and cut text:

- `strip_ansi`
- `display_width`
- `truncate_with_ellipsis`, which ends the text with `…` and keeps trailing reset codes
- `constrain_line` and `constrain_lines`
- `clamp_single_line`, which flattens line breaks and cuts without an ellipsis

These helpers deal with lines and numbers:

- `clamp`
- `clip_lines`
- `clip_and_pad_lines`

These helpers format values:

- `render_percent`, which returns `"-"` for NaN and infinities
- `format_memory_usage`
- `join_sections`, which joins the non-blank parts with newlines
- `ref_count_text`

### `easydock.style`

`Style` is immutable: every setter returns a new style. The setters are:

- `bold`, `underline`, `reverse`
- `foreground`, `background`, which take 0–255 colour numbers or `#rrggbb`
- `padding`, which takes CSS shorthand
- `margin_bottom`
- `border`, `border_foreground`
- `width`, `height`, `max_width`, `max_height`
- `inline`

`render(text)` returns the styled block. `horizontal_frame_size()` and
`vertical_frame_size()` report the space taken by padding, border and margin.

`Border` describes box characters. `NORMAL_BORDER` and `ROUNDED_BORDER` are
ready-made borders.

`join_vertical`, `join_horizontal`, `text_width` and `text_height` combine and
measure blocks of text.

### `easydock.layout`

- `allocate_columns(total, desired)` shares a width among columns.
- `frame_content_width`, `frame_content_height` and `main_area_height` size
  regions.
- `compute_frame_layout` returns a `FrameLayout`.
- `render_framed_content` clips each content line and draws the frame around it.

### `easydock.mode`

`Screen` has two values: `BROWSE` and `LOGS`. `RootKeyRoute` has four values:
`BROWSE`, `LOGS`, `NOOP` and `QUIT`.

`route_root_key(key, screen)` decides where a key goes:

- `"ctrl+c"` quits.
- `"q"` and `"tab"` are ignored.
- Any other key goes to the current screen.

`enter_logs_transition` and `exit_logs_transition` give the target screen (and
tab) when switching screens.

### `easydock.selection`

`Cursors` holds one cursor per tab: container, image, network and volume.
`SelectionState` holds the active tab, the scope flag and the cursors.

The functions are:

- `move_active_tab`
- `toggle_container_scope`
- `cursor_for_tab`, which returns `None` for an unknown tab
- `set_cursor_for_tab`
- `move_cursor_for_tab`
- `clamp_cursor_for_tab`
- `clamp_all_cursors`
- `reconcile_cursor_for_tab`

### `easydock.btable`

`Table` renders rows under a header. Each cell is fitted to its `Column` width,
and the cursor row uses the selected style from `TableStyles`. The visible
window is chosen by `scroll_window` so that the cursor stays roughly centred.
`default_table_styles()` gives a bold header and a bold selected row.

### `easydock.tables`

`ColumnDef` gives a header, a minimum width and an optional desired-width rule
(`fixed_width`, `proportional_width`). There are four column schemas:

- `CONTAINER_SCHEMA`
- `IMAGE_SCHEMA`
- `NETWORK_SCHEMA`
- `VOLUME_SCHEMA`

`resolve_columns` turns a schema into fixed widths for a table width. So do
`container_columns`, `image_columns`, `network_columns` and `volume_columns`,
each for its own schema. Columns are separated by two-cell gaps.

A `Spec` holds:

- the items;
- a row builder;
- the columns;
- the cursor;
- an empty message.

`simple_spec` builds a `Spec`. `render_from_spec`, `render_or_empty` and
`render_table` draw it.

Two further helpers:

- `split_image_tags("nginx:latest, redis:alpine")` returns
  `("nginx, redis", "latest, alpine")`.
- `color_state_label` colours a label by container state and resets only the
  foreground colour.

### `easydock.theme`

`default_theme()` returns a frozen `Theme` holding every style of the
dashboard: header, tabs, frames, table rows, log follow indicators and
container state colours.

### `easydock.logs`

The log viewer is split into these modules:

- **`viewport`**: `Viewport`, a window over lines with clamped vertical and
  horizontal offsets. It supports scrolling, paging, `goto_top` and
  `goto_bottom`, and a padded `view()`.
- **`helpers`**: functions for log lines:
  - `filter_log_lines`
  - `wrap_log_lines`
  - `merge_polled_logs`, which appends only the lines that are new after the
    overlap
  - `trim_logs`
  - `sanitize_log_render_line`
  - range mapping between raw lines and wrapped rows: `visible_log_range`,
    `viewport_range`, `raw_line_to_viewport_row_offset` and `wrapped_row_count`
  - the constants `INITIAL_TAIL` and `TAIL_STEP` (both 200) and
    `MAX_LIVE_LINES` (0, unbounded)
- **`keymap`**: `LogsKeyMap` and `KeyBinding`. The default keys are:
  - arrows, `k` and `j` to move;
  - `pgup` and `pgdown` to page;
  - `home` and `end` to jump;
  - `f` to toggle follow;
  - `w` to toggle wrap;
  - `/` to filter;
  - `s` to open a shell;
  - `esc` to go back.

  `short_help()` and `full_help()` list the bindings for help display.
- **`state`**: `LogsState`, with its follow and wrap switches, history loading
  and poll merging. It also defines the data classes `ContainerLiveData`,
  `FilterState`, `LoadRequest`, `LoadResult` and `Transition`, and the
  `Source` enum. After three history loads in a row that add nothing, history
  is marked done.
- **`controller`**: `Controller`, with the methods:
  - `enter`
  - `exit`
  - `handle_key`
  - `handle_result`, which ignores results from a stale session or container
  - `selected_container`

  Each of these returns a `Transition` except `selected_container`, which
  returns the matching container or `None`. A `Transition` can ask for a
  load, report an error, request a terminal, or return to the browse screen.
- **`view`**: `render_content(ViewModel(...))` draws the framed logs page.
  The page has:
  - a breadcrumb;
  - wrap and follow indicators and the range of lines shown;
  - an optional filter line;
  - the log panel, with `<` and `>` markers when lines can scroll sideways.

  The module also provides `render_header`, `render_panel`,
  `visible_rows_for_content`, `render_title_divider` and `dynamic_input_width`.

## Example

```python
from easydock.layout import compute_frame_layout, render_framed_content
from easydock.logs.controller import Controller
from easydock.logs.keymap import LogsKeyMap
from easydock.logs.state import ContainerLiveData, LoadResult, LogsState
from easydock.logs.view import ViewModel, render_content
from easydock.style import ROUNDED_BORDER, Style

frame = Style().border(ROUNDED_BORDER).padding(0, 1)
layout = compute_frame_layout(40, 6, frame)
print(render_framed_content(frame, layout, "hello"))

state = LogsState()
controller = Controller()
request = controller.enter(state, "web-1").load  # tail=200, src=Source.INITIAL

# Fetch the logs yourself, then hand the outcome back:
controller.handle_result(
    state,
    LoadResult(
        container_id=request.container_id,
        session_id=request.session_id,
        data=ContainerLiveData(logs=["starting", "ready"]),
        src=request.src,
    ),
    visible_width=76,
    visible_rows=6,
)
controller.handle_key(state, "up", LogsKeyMap(), containers_tab=0)
print(render_content(ViewModel(state=state, container_name="web", width=80, height=12)))
```

## What this package does not do

This package is a library, not an application:

- It has no command and no interactive event loop.
- It does not connect to a container engine. Listing containers, images,
  networks and volumes, and fetching logs or metrics, is up to the caller,
  which passes the results in as `LoadResult` objects.
- It does not open shells. A `Transition` with `launch_terminal` set only
  reports that one was asked for.
- It does not build the dashboard's header, footer, tab bar or browse-screen
  detail panes.
- It does not build row builders for container, image, network or volume
  records.

## Running the tests

```
pip install -e ".[test]"
pytest
```