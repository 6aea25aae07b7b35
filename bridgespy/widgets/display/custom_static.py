"""CustomStatic widget - Static with the standard widget CSS class."""

from __future__ import annotations

from textual.widgets import Static


class CustomStatic(Static):
    """Static text display.

    CSS Classes: widget-custom-static
    """

    def __init__(
        self,
        content: str = "",
        *,
        id: str | None = None,
        classes: str = "",
        markup: bool = True,
    ) -> None:
        super().__init__(
            content,
            id=id,
            classes=f"widget-custom-static {classes}".strip(),
            markup=markup,
        )
