"""Follow a JSONL file of bridge call records.

Each line is one of:

- a raw event object: ``{"id": "1", "time": ..., "type": "N->JS", ...}``
- a JSON array of raw event objects (one batch)
- an envelope naming the host event: ``{"event": "newRow", "payload": ...}``

Bare events and arrays are delivered as ``newRow``.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from bridgespy.constants.values import NEW_ROW_EVENT
from bridgespy.controllers.base.base_controller import BaseEventSource, SourceEvent

logger = logging.getLogger(__name__)


def parse_line(line: str) -> SourceEvent | None:
    """Parse one JSONL line; blank or invalid lines yield None."""
    text = line.strip()
    if not text:
        return None
    try:
        record = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Skipping invalid JSONL line %r: %s", text[:80], exc)
        return None
    if isinstance(record, dict) and "event" in record and "payload" in record:
        return SourceEvent(str(record["event"]), record["payload"])
    return SourceEvent(NEW_ROW_EVENT, record)


class JsonlEventSource(BaseEventSource):
    """Tail a JSONL file and emit its new records on every poll.

    Tracks the read offset and the file identity; truncation or
    replacement (log rotation) restarts reading from the top. Partial
    trailing lines are held until their newline arrives.
    """

    name = "jsonl"

    def __init__(self, path: Path | str, *, start_at_end: bool = False) -> None:
        super().__init__()
        self.path = Path(path)
        self.start_at_end = start_at_end
        self.offset = 0
        self.partial = b""
        self._inode: int | None = None
        self._positioned = False

    def check_connection(self) -> bool:
        return self.path.is_file()

    def _read_new_bytes(self) -> bytes:
        if not self.path.exists():
            return b""

        stat = self.path.stat()
        size = stat.st_size

        if not self._positioned:
            self._positioned = True
            self._inode = stat.st_ino
            if self.start_at_end:
                self.offset = size
                return b""

        # Truncated in place or replaced by a new file
        if size < self.offset or stat.st_ino != self._inode:
            logger.info("%s was truncated or rotated; reading from start", self.path)
            self.offset = 0
            self.partial = b""
            self._inode = stat.st_ino

        if size == self.offset:
            return b""

        with self.path.open("rb") as handle:
            handle.seek(self.offset)
            data = handle.read(size - self.offset)
        self.offset += len(data)
        return data

    @staticmethod
    def _parse_lines(lines: list[bytes]) -> list[SourceEvent]:
        # Decoded per complete line so multi-byte characters never straddle a read
        events: list[SourceEvent] = []
        for raw in lines:
            event = parse_line(raw.decode("utf-8", errors="replace"))
            if event is not None:
                events.append(event)
        return events

    def poll(self) -> list[SourceEvent]:
        data = self.partial + self._read_new_bytes()
        if not data:
            return []

        lines = data.split(b"\n")
        # The last element is an incomplete line, or b"" when data ends with a newline
        self.partial = lines.pop()
        return self._parse_lines(lines)

    def flush(self) -> list[SourceEvent]:
        """Parse the held trailing line as if its newline had arrived."""
        pending, self.partial = self.partial, b""
        if not pending:
            return []
        return self._parse_lines([pending])

    def close(self) -> None:
        self.partial = b""

    def __repr__(self) -> str:
        return f"JsonlEventSource({os.fspath(self.path)!r}, offset={self.offset})"
