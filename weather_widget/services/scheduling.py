from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Protocol


class DelayedAction(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule(self, delay_seconds: float, action: Callable[[], None]) -> DelayedAction: ...


class ThreadingScheduler:
    def schedule(self, delay_seconds: float, action: Callable[[], None]) -> DelayedAction:
        timer = threading.Timer(delay_seconds, action)
        timer.daemon = True
        timer.start()
        return timer


class ImmediateAction:
    """Handle for an action that already ran; cancelling it does nothing."""

    def cancel(self) -> None:
        return None
