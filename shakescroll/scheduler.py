from __future__ import annotations
from typing import Callable, Dict, List
import logging
import pygame

logger = logging.getLogger(__name__)

TimerCallback = Callable[[], bool]


class TimerScheduler:
    """
    Periodic callbacks on top of the pygame event queue.

    add(ms, cb) reserves a custom event type and asks SDL to post it every
    `ms` milliseconds. The app loop hands every event to dispatch(); the
    matching callback runs to completion on the main thread. A callback that
    returns False is cancelled, the same contract as a GLib timeout source.

    Timers are independent: nothing orders two callbacks registered with the
    same period against each other.
    """

    def __init__(self, set_timer: Callable[[int, int], None] = pygame.time.set_timer):
        self._set_timer = set_timer
        self._callbacks: Dict[int, TimerCallback] = {}
        # pygame hands out a limited number of custom types; recycle cancelled ones
        self._free: List[int] = []

    # --- registration -------------------------------------------------------
    def add(self, interval_ms: int, callback: TimerCallback) -> int:
        interval_ms = int(interval_ms)
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be > 0, got {interval_ms}")
        etype = self._free.pop() if self._free else pygame.event.custom_type()
        self._callbacks[etype] = callback
        self._set_timer(etype, interval_ms)
        logger.info("Timer %d every %d ms -> %s", etype, interval_ms,
                    getattr(callback, "__qualname__", repr(callback)))
        return etype

    def cancel(self, etype: int) -> None:
        if self._callbacks.pop(etype, None) is not None:
            self._set_timer(etype, 0)
            self._free.append(etype)

    def cancel_all(self) -> None:
        for etype in list(self._callbacks):
            self.cancel(etype)

    # --- loop ---------------------------------------------------------------
    def dispatch(self, e: pygame.event.Event) -> bool:
        """Run the callback bound to e.type. Returns True if e was a timer event."""
        cb = self._callbacks.get(e.type)
        if cb is None:
            return False
        if not cb():
            self.cancel(e.type)
        return True

    def active(self) -> List[int]:
        return list(self._callbacks)
