"""Log viewer: viewport, line helpers, key bindings, state, controller and rendering."""