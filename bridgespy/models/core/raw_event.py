"""Raw bridge call records as delivered by the event source."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from bridgespy.utils.serialization import safe_compact_json

logger = logging.getLogger(__name__)


class EventArgs:
    """Opaque ``args`` value of a raw event, stringified on first use.

    The wrapped value is never inspected; only its JSON text is needed by
    the table, so serialization happens lazily and at most once.
    """

    __slots__ = ("_present", "_text", "value")

    def __init__(self, value: Any = None, *, present: bool = True) -> None:
        self.value = value
        self._present = present
        self._text: str | None = None

    @classmethod
    def absent(cls) -> EventArgs:
        """Args placeholder for events that carry no ``args`` key."""
        return cls(None, present=False)

    @property
    def present(self) -> bool:
        """Whether the source event had an ``args`` key at all."""
        return self._present

    @property
    def text(self) -> str:
        """Compact JSON form of the value, or a sentinel when it cannot be serialized."""
        if self._text is None:
            self._text = safe_compact_json(self.value) if self._present else ""
        return self._text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EventArgs):
            return NotImplemented
        return self._present == other._present and self.text == other.text

    def __hash__(self) -> int:
        return hash((self._present, self.text))

    def __repr__(self) -> str:
        return f"EventArgs({self.text!r})"


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class RawEvent(BaseModel):
    """One ingested bridge/RPC call record.

    Every field has a safe default so a malformed record still produces a
    usable event. Unknown keys are kept as extras.
    """

    model_config = ConfigDict(
        extra="allow",
        frozen=True,
        arbitrary_types_allowed=True,
    )

    id: str = ""
    time: int = 0  # epoch millis
    type: str = ""
    module: str = ""
    method: str = ""
    args: EventArgs = Field(default_factory=EventArgs.absent)

    @field_validator("id", "type", "module", "method", mode="before")
    @classmethod
    def _text_field(cls, value: Any) -> str:
        return _coerce_text(value)

    @field_validator("time", mode="before")
    @classmethod
    def _epoch_millis(cls, value: Any) -> int:
        try:
            millis = float(value)
        except (TypeError, ValueError):
            return 0
        if math.isnan(millis) or math.isinf(millis):
            return 0
        return int(millis)

    @field_validator("args", mode="before")
    @classmethod
    def _wrap_args(cls, value: Any) -> EventArgs:
        if isinstance(value, EventArgs):
            return value
        return EventArgs(value)

    @classmethod
    def from_payload(cls, payload: Any) -> RawEvent:
        """Build an event from whatever the source delivered.

        Mappings are validated field by field; anything else becomes an
        event whose ``args`` is the payload itself.
        """
        if isinstance(payload, RawEvent):
            return payload
        if isinstance(payload, Mapping):
            data = {str(key): value for key, value in payload.items()}
            data.setdefault("args", EventArgs.absent())
            try:
                return cls.model_validate(data)
            except ValidationError as exc:
                logger.debug("Malformed raw event %r: %s", payload, exc)
        return cls(args=payload)
