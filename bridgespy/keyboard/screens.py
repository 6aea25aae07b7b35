"""Screen-specific keyboard bindings."""

from textual.binding import Binding

# ============================================================================
# Spy screen
# ============================================================================

SPY_SCREEN_BINDINGS: list[Binding] = [
    Binding("c", "clear_table", "Clear Table"),
    Binding("slash", "focus_filter", "Filter"),
    Binding("x", "reset_filters", "Reset Filters"),
    Binding("p", "toggle_follow", "Pause/Follow"),
    Binding("escape", "focus_table", "Table", show=False),
]

__all__ = [
    "SPY_SCREEN_BINDINGS",
]
