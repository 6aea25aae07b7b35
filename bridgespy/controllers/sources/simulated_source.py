"""Synthetic bridge traffic for demos and screenshots."""

from __future__ import annotations

import random
from typing import Any

from bridgespy.constants.enums import Direction
from bridgespy.constants.values import NEW_ROW_EVENT
from bridgespy.controllers.base.base_controller import BaseEventSource, SourceEvent
from bridgespy.utils.clock import Clock, now_ms

# (module, method) pairs modelled on common React Native traffic
_JS_TO_NATIVE_CALLS: list[tuple[str, str]] = [
    ("UIManager", "createView"),
    ("UIManager", "updateView"),
    ("UIManager", "setChildren"),
    ("UIManager", "manageChildren"),
    ("Timing", "createTimer"),
    ("Timing", "deleteTimer"),
    ("NativeAnimatedModule", "startAnimatingNode"),
    ("WebSocketModule", "send"),
]
_NATIVE_TO_JS_CALLS: list[tuple[str, str]] = [
    ("JSTimers", "callTimers"),
    ("RCTEventEmitter", "receiveTouches"),
    ("RCTDeviceEventEmitter", "emit"),
    ("AppRegistry", "runApplication"),
]


class SimulatedEventSource(BaseEventSource):
    """Generates roughly ``rate_per_second`` bridge calls per second of clock time.

    Deterministic for a given ``seed`` and clock.
    """

    name = "simulated"

    def __init__(
        self,
        *,
        rate_per_second: float = 20.0,
        seed: int | None = None,
        clock: Clock | None = None,
    ) -> None:
        super().__init__()
        self.rate_per_second = rate_per_second
        self._random = random.Random(seed)
        self._clock = clock or now_ms
        self._last_poll_ms: int | None = None
        self._carry = 0.0
        self._next_id = 1

    def check_connection(self) -> bool:
        return True

    def _build_args(self, module: str, method: str) -> Any:
        rnd = self._random
        if module == "UIManager":
            return [rnd.randint(1, 5000), "RCTView", {"flex": 1, "opacity": round(rnd.random(), 2)}]
        if module in ("Timing", "JSTimers"):
            return [[rnd.randint(1, 300)]]
        if method == "receiveTouches":
            return ["topTouchStart", [{"identifier": 0, "pageX": rnd.randint(0, 400)}], [0]]
        if method == "emit":
            return ["appStateDidChange", {"app_state": rnd.choice(["active", "background"])}]
        if method == "send":
            return ["x" * rnd.randint(8, 512), rnd.randint(1, 9)]
        return []

    def _build_event(self, time_ms: int) -> dict[str, Any]:
        if self._random.random() < 0.6:
            direction = Direction.JS_TO_NATIVE
            module, method = self._random.choice(_JS_TO_NATIVE_CALLS)
        else:
            direction = Direction.NATIVE_TO_JS
            module, method = self._random.choice(_NATIVE_TO_JS_CALLS)
        event = {
            "id": str(self._next_id),
            "time": time_ms,
            "type": direction.value,
            "module": module,
            "method": method,
            "args": self._build_args(module, method),
        }
        self._next_id += 1
        return event

    def poll(self) -> list[SourceEvent]:
        now = self._clock()
        if self._last_poll_ms is None:
            self._last_poll_ms = now
            return []
        elapsed_seconds = max(0, now - self._last_poll_ms) / 1000
        self._last_poll_ms = now

        due = self._carry + elapsed_seconds * self.rate_per_second
        count = int(due)
        self._carry = due - count
        if count == 0:
            return []
        batch = [self._build_event(now) for _ in range(count)]
        return [SourceEvent(NEW_ROW_EVENT, batch)]
