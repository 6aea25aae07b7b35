"""DataTable keyboard bindings."""

from textual.binding import Binding

DATA_TABLE_BINDINGS: list[Binding] = [
    Binding("g", "cursor_first", "Top", show=False),
    Binding("G", "cursor_last", "Bottom", show=False),
    Binding("b", "toggle_sticky_bottom", "Stick to Bottom"),
]

__all__ = [
    "DATA_TABLE_BINDINGS",
]
