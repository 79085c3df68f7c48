"""
Periodic tick triggers.

The game only needs ``start(interval_ms, callback)`` and ``cancel()``; tests drive it
with ``ManualScheduler`` and the window uses ``PygameScheduler``.
"""

from __future__ import annotations
from typing import Callable, Optional

import pygame  # type: ignore

Callback = Callable[[], None]

TICK_EVENT = pygame.USEREVENT + 1


class Scheduler:
    def start(self, interval_ms: int, callback: Callback) -> None:
        raise NotImplementedError

    def cancel(self) -> None:
        raise NotImplementedError

    @property
    def active(self) -> bool:
        raise NotImplementedError


class ManualScheduler(Scheduler):
    """Fires only when told to; no time passes on its own."""

    def __init__(self):
        self.interval_ms: Optional[int] = None
        self._callback: Optional[Callback] = None

    def start(self, interval_ms: int, callback: Callback) -> None:
        self.interval_ms = interval_ms
        self._callback = callback

    def cancel(self) -> None:
        self.interval_ms = None
        self._callback = None

    @property
    def active(self) -> bool:
        return self._callback is not None

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            # a tick may cancel us (game over)
            if self._callback is None:
                return
            self._callback()


class PygameScheduler(Scheduler):
    """
    Posts ``TICK_EVENT`` every ``interval_ms`` through ``pygame.time.set_timer``.
    The event loop hands those events to ``dispatch`` so ticks run on the loop's thread.
    """

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self._callback: Optional[Callback] = None

    def start(self, interval_ms: int, callback: Callback) -> None:
        self._callback = callback
        pygame.time.set_timer(self.event_type, interval_ms)

    def cancel(self) -> None:
        pygame.time.set_timer(self.event_type, 0)
        self._callback = None

    @property
    def active(self) -> bool:
        return self._callback is not None

    def dispatch(self, event: pygame.event.Event) -> bool:
        """Run the callback for a tick event. Returns True if the event was ours."""
        if event.type != self.event_type:
            return False
        if self._callback is not None:
            self._callback()
        return True
