"""Search/display state machine for the weather widget.

The presenter owns all widget state and drives a :class:`View`; it never
touches markup itself. Transitions::

    IDLE -> SEARCH_LOADING -> DISPLAYING | EMPTY | ERROR
    DISPLAYING -> SEARCH_LOADING   (new search)
    DISPLAYING -> DISPLAYING       (unit or day change, served from cache)
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Protocol

from weather_widget.models.weather import ForecastData, Location
from weather_widget.services import display
from weather_widget.services.dates import DateFormatter
from weather_widget.services.forecast import hourly_window
from weather_widget.services.scheduling import (
    DelayedAction,
    ImmediateAction,
    Scheduler,
    ThreadingScheduler,
)
from weather_widget.services.units import UnitCategory, UnitsState

logger = logging.getLogger(__name__)

MAX_DAY_INDEX = 6


class GeocodingClient(Protocol):
    def resolve(self, query: str) -> Location | None: ...


class ForecastClient(Protocol):
    def fetch(self, latitude: float, longitude: float) -> ForecastData: ...


class View(Protocol):
    def show_initial_state(self) -> None: ...

    def hide_initial_message(self) -> None: ...

    def show_search_loader(self) -> None: ...

    def hide_search_loader(self) -> None: ...

    def show_section_loading(self) -> None: ...

    def hide_section_loading(self) -> None: ...

    def show_main_content(self) -> None: ...

    def show_no_results(self) -> None: ...

    def show_error(self) -> None: ...

    def render_current(self, current: display.CurrentDisplay) -> None: ...

    def render_details(self, details: display.DetailsDisplay) -> None: ...

    def render_daily(self, items: list[display.DailyItemDisplay]) -> None: ...

    def render_day_selector(self, options: list[display.DayOption]) -> None: ...

    def render_hourly(self, items: list[display.HourlyItemDisplay]) -> None: ...

    def render_units(self, units: display.UnitsDisplay) -> None: ...


class PresenterState(str, Enum):
    IDLE = "idle"
    SEARCH_LOADING = "search_loading"
    DISPLAYING = "displaying"
    EMPTY = "empty"
    ERROR = "error"


@dataclass
class ViewState:
    selected_day_index: int = 0
    last_location: Location | None = None
    last_forecast: ForecastData | None = None


@dataclass(frozen=True)
class PendingSearch:
    query: str
    generation: int
    loader: DelayedAction


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


@dataclass
class Presenter:
    view: View
    geocoder: GeocodingClient
    forecaster: ForecastClient
    scheduler: Scheduler = field(default_factory=ThreadingScheduler)
    loader_delay_seconds: float = 0.1
    reset_day_on_search: bool = False
    clock: Callable[[], datetime] = _utc_now
    dates: DateFormatter = field(default_factory=DateFormatter)
    units: UnitsState = field(default_factory=UnitsState)
    view_state: ViewState = field(default_factory=ViewState)
    state: PresenterState = PresenterState.IDLE

    def __post_init__(self) -> None:
        self._lock = threading.RLock()
        self._generation = 0

    def start(self) -> None:
        with self._lock:
            self.view.show_initial_state()
            self.view.render_units(display.units_display(self.units))

    def search(self, query: str) -> PresenterState:
        pending = self.begin_search(query)
        if pending is None:
            return self.state
        return self.run_search(pending)

    def begin_search(self, query: str) -> PendingSearch | None:
        """Enter SEARCH_LOADING and arm the loader; :meth:`run_search` does the lookup."""
        text = query.strip()
        if not text:
            return None

        with self._lock:
            self._generation += 1
            generation = self._generation
            self.state = PresenterState.SEARCH_LOADING
            self.view.hide_initial_message()
            if self.loader_delay_seconds <= 0:
                self.view.show_search_loader()
                loader: DelayedAction = ImmediateAction()
            else:
                loader = self.scheduler.schedule(
                    self.loader_delay_seconds, self._show_loader(generation)
                )
        return PendingSearch(query=text, generation=generation, loader=loader)

    def run_search(self, pending: PendingSearch) -> PresenterState:
        generation = pending.generation
        loader = pending.loader
        try:
            location = self.geocoder.resolve(pending.query)
            if location is None:
                loader.cancel()
                with self._lock:
                    if self._superseded(generation):
                        return self.state
                    self.view.hide_search_loader()
                    self.view.show_no_results()
                    self.state = PresenterState.EMPTY
                    return self.state

            with self._lock:
                if self._superseded(generation):
                    return self.state
                self.view.show_section_loading()

            forecast = self.forecaster.fetch(location.latitude, location.longitude)

            loader.cancel()
            with self._lock:
                if self._superseded(generation):
                    return self.state
                # location and forecast are only ever replaced as a pair
                self.view_state.last_location = location
                self.view_state.last_forecast = forecast
                if self.reset_day_on_search:
                    self.view_state.selected_day_index = 0
                self.view.show_main_content()
                self._render_all()
                self.view.hide_search_loader()
                self.view.hide_section_loading()
                self.state = PresenterState.DISPLAYING
                return self.state
        except Exception:
            logger.exception("Weather search for %r failed", pending.query)
            loader.cancel()
            with self._lock:
                if self._superseded(generation):
                    return self.state
                self.view.hide_search_loader()
                self.view.hide_section_loading()
                self.view.show_error()
                self.state = PresenterState.ERROR
                return self.state

    def select_day(self, index: int) -> None:
        if not 0 <= index <= MAX_DAY_INDEX:
            raise ValueError(f"day index must be between 0 and {MAX_DAY_INDEX}, got {index}")
        with self._lock:
            self.view_state.selected_day_index = index
            if self.view_state.last_forecast is not None:
                self._render_hourly()
                self._render_day_selector()

    def change_unit(self, category: UnitCategory | str, value: str) -> None:
        with self._lock:
            self.units.set_unit(category, value)
            self._rerender_cached()
            self.view.render_units(display.units_display(self.units))

    def switch_to_imperial(self) -> None:
        with self._lock:
            self.units.switch_to_imperial()
            self.view.render_units(display.units_display(self.units))
            self._rerender_cached()

    def _show_loader(self, generation: int) -> Callable[[], None]:
        def _show() -> None:
            with self._lock:
                if generation == self._generation and self.state is PresenterState.SEARCH_LOADING:
                    self.view.show_search_loader()

        return _show

    def _superseded(self, generation: int) -> bool:
        if generation != self._generation:
            logger.debug("Discarding result of superseded search %s", generation)
            return True
        return False

    def _rerender_cached(self) -> None:
        if self.view_state.last_forecast is not None and self.view_state.last_location is not None:
            self._render_all()

    def _location_now(self) -> datetime:
        forecast = self.view_state.last_forecast
        offset = forecast.utc_offset_seconds if forecast is not None else 0
        return self.clock().astimezone(timezone(timedelta(seconds=offset)))

    def _render_all(self) -> None:
        location = self.view_state.last_location
        forecast = self.view_state.last_forecast
        if location is None or forecast is None:
            return
        self.view.render_current(
            display.current_display(
                location, forecast.current, self.units, self.dates, self._location_now()
            )
        )
        self.view.render_details(display.details_display(forecast.current, self.units))
        self.view.render_daily(display.daily_display(forecast.daily, self.units, self.dates))
        self._render_day_selector()
        self._render_hourly()

    def _render_day_selector(self) -> None:
        forecast = self.view_state.last_forecast
        if forecast is None:
            return
        self.view.render_day_selector(
            display.day_options(forecast.daily, self.view_state.selected_day_index, self.dates)
        )

    def _render_hourly(self) -> None:
        forecast = self.view_state.last_forecast
        if forecast is None:
            return
        entries = hourly_window(
            forecast.hourly, self.view_state.selected_day_index, self._location_now().hour
        )
        self.view.render_hourly(display.hourly_display(entries, self.units, self.dates))
