from __future__ import annotations

import threading
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass

from weather_widget.services.presenter import Presenter
from weather_widget.web.view import HtmlView


@dataclass(frozen=True)
class Widget:
    presenter: Presenter
    view: HtmlView


class WidgetRegistry:
    """In-memory widgets keyed by browser session id, least recently used evicted first."""

    def __init__(self, *, max_sessions: int) -> None:
        self._max_sessions = max(int(max_sessions), 1)
        self._lock = threading.Lock()
        self._by_session: OrderedDict[str, Widget] = OrderedDict()

    def get_or_create(self, session_id: str, factory: Callable[[], Widget]) -> Widget:
        with self._lock:
            widget = self._by_session.get(session_id)
            if widget is not None:
                self._by_session.move_to_end(session_id)
                return widget
            widget = factory()
            self._by_session[session_id] = widget
            while len(self._by_session) > self._max_sessions:
                self._by_session.popitem(last=False)
            return widget

    def discard(self, session_id: str) -> None:
        with self._lock:
            self._by_session.pop(session_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_session)
