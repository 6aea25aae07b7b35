"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "Bridge Spy"
APP_VERSION: Final = "0.3.0"

# ============================================================================
# Ingestion
# ============================================================================

# Host event name carrying a raw event or a batch of raw events.
NEW_ROW_EVENT: Final = "newRow"

# Substituted for args that cannot be serialized.
UNSERIALIZABLE_ARGS: Final = "[unserializable]"

# ============================================================================
# Sidebar
# ============================================================================

NO_SELECTION_PLACEHOLDER: Final = "Select a message to view details"
PAYLOAD_PANEL_TITLE: Final = "Payload"

__all__ = [
    "APP_TITLE",
    "APP_VERSION",
    "NEW_ROW_EVENT",
    "NO_SELECTION_PLACEHOLDER",
    "PAYLOAD_PANEL_TITLE",
    "UNSERIALIZABLE_ARGS",
]
