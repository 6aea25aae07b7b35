"""Base widget classes shared by Bridge Spy widgets.

Standard Reactive Pattern:
- All stateful widgets inherit from StatefulWidget
- Reactive attributes: is_loading, data, error
- Watch methods: watch_is_loading, watch_data, watch_error
"""

from __future__ import annotations

from typing import ClassVar

from textual.reactive import reactive
from textual.widget import Widget


class BaseWidget(Widget):
    """Base widget applying a fixed set of default CSS classes.

    Attributes:
        _default_classes: Space-separated CSS classes added to every instance.
    """

    _default_classes: ClassVar[str] = ""

    def __init__(
        self,
        *,
        id: str | None = None,
        classes: str = "",
        **kwargs,
    ) -> None:
        """Initialize the base widget.

        Args:
            id: Widget ID.
            classes: CSS classes to apply in addition to the defaults.
            **kwargs: Additional keyword arguments passed to Widget.
        """
        super().__init__(id=id, classes=classes, **kwargs)
        if self._default_classes:
            self.add_class(*self._default_classes.split())

    def add_css_class(self, class_name: str) -> None:
        """Add a CSS class to the widget."""
        self.add_class(class_name)

    def remove_css_class(self, class_name: str) -> None:
        """Remove a CSS class from the widget."""
        self.remove_class(class_name)

    def has_css_class(self, class_name: str) -> bool:
        """Check if widget has a specific CSS class."""
        return self.has_class(class_name)


class StatefulWidget(BaseWidget):
    """Base class for widgets with standardized reactive state management.

    Subclasses override the ``watch_*`` hooks they care about:
    - is_loading: waiting for the first value
    - data: rows backing the widget
    - error: message shown instead of a value
    """

    is_loading = reactive(False)
    data = reactive[list[dict]]([])
    error = reactive[str | None](None)

    def watch_is_loading(self, loading: bool) -> None:
        """Update UI based on loading state."""

    def watch_data(self, data: list[dict]) -> None:
        """Update UI when data changes."""

    def watch_error(self, error: str | None) -> None:
        """Handle error state changes."""
