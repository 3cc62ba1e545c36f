from __future__ import annotations

from weather_widget.services.presenter import Presenter
from weather_widget.web.sessions import Widget, WidgetRegistry
from weather_widget.web.view import HtmlView
from tests.fakes import FakeForecastClient, FakeGeocodingClient, ManualScheduler


def _widget() -> Widget:
    view = HtmlView()
    presenter = Presenter(
        view=view,
        geocoder=FakeGeocodingClient(),
        forecaster=FakeForecastClient(),
        scheduler=ManualScheduler(),
    )
    return Widget(presenter=presenter, view=view)


def test_same_session_reuses_widget() -> None:
    registry = WidgetRegistry(max_sessions=2)
    first = registry.get_or_create("a", _widget)
    assert registry.get_or_create("a", _widget) is first
    assert len(registry) == 1


def test_least_recently_used_session_is_evicted() -> None:
    registry = WidgetRegistry(max_sessions=2)
    a = registry.get_or_create("a", _widget)
    b = registry.get_or_create("b", _widget)
    registry.get_or_create("a", _widget)  # "b" is now the oldest

    registry.get_or_create("c", _widget)

    assert len(registry) == 2
    assert registry.get_or_create("a", _widget) is a
    assert registry.get_or_create("b", _widget) is not b


def test_discard() -> None:
    registry = WidgetRegistry(max_sessions=0)
    registry.get_or_create("a", _widget)
    registry.discard("a")
    registry.discard("missing")
    assert len(registry) == 0
