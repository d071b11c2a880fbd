"""Terminal text styling, table layout and log-viewer state for a container dashboard."""

__version__ = "0.1.0"