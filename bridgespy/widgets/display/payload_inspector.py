"""PayloadInspector - detail sidebar for the selected bridge call."""

from __future__ import annotations

from typing import Any

from rich.console import RenderableType
from rich.panel import Panel
from rich.pretty import Pretty
from rich.text import Text

from bridgespy.constants.values import NO_SELECTION_PLACEHOLDER, PAYLOAD_PANEL_TITLE
from bridgespy.widgets.display.custom_static import CustomStatic

_MISSING = object()


class PayloadInspector(CustomStatic):
    """Pretty-prints the original payload of the selected row.

    CSS Classes: widget-custom-static, payload-inspector
    """

    DEFAULT_CSS = """
    PayloadInspector {
        height: 1fr;
        width: 1fr;
        padding: 0 1;
        overflow-y: auto;
    }
    PayloadInspector.empty {
        color: $text-muted;
        content-align: center middle;
    }
    """

    def __init__(self, *, id: str | None = None, classes: str = "") -> None:
        super().__init__(
            NO_SELECTION_PLACEHOLDER,
            id=id,
            classes=f"payload-inspector empty {classes}".strip(),
            markup=False,
        )
        self._payload: Any = _MISSING

    @property
    def has_payload(self) -> bool:
        return self._payload is not _MISSING

    @property
    def payload(self) -> Any | None:
        return None if self._payload is _MISSING else self._payload

    @staticmethod
    def render_payload(payload: Any) -> RenderableType:
        """Renderable for ``payload``, expanded and indented."""
        return Panel(
            Pretty(payload, expand_all=True, indent_guides=True),
            title=PAYLOAD_PANEL_TITLE,
            title_align="left",
        )

    def show_payload(self, payload: Any) -> None:
        """Display ``payload``; repeated calls with the same object are no-ops."""
        if self._payload is payload:
            return
        self._payload = payload
        self.remove_class("empty")
        self.update(self.render_payload(payload))

    def show_placeholder(self) -> None:
        if self._payload is _MISSING:
            return
        self._payload = _MISSING
        self.add_class("empty")
        self.update(Text(NO_SELECTION_PLACEHOLDER))
