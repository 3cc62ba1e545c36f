from __future__ import annotations

from dataclasses import dataclass, field

from weather_widget.services.display import (
    CurrentDisplay,
    DailyItemDisplay,
    DayOption,
    DetailsDisplay,
    HourlyItemDisplay,
    UnitsDisplay,
)


@dataclass
class PageModel:
    initial_message: bool = False
    main_content_hidden: bool = False
    title_hidden: bool = False
    no_results: bool = False
    error: bool = False
    search_loader: bool = False
    sections_loading: bool = False

    current: CurrentDisplay | None = None
    details: DetailsDisplay | None = None
    daily: list[DailyItemDisplay] = field(default_factory=list)
    day_options: list[DayOption] = field(default_factory=list)
    hourly: list[HourlyItemDisplay] = field(default_factory=list)
    units: UnitsDisplay | None = None

    @property
    def selected_day_label(self) -> str | None:
        for option in self.day_options:
            if option.selected:
                return option.label
        return None


class HtmlView:
    """View that records presenter output into a :class:`PageModel` for Jinja2."""

    def __init__(self) -> None:
        self.page = PageModel()

    def show_initial_state(self) -> None:
        self.page.main_content_hidden = True
        self.page.initial_message = True

    def hide_initial_message(self) -> None:
        self.page.initial_message = False
        self.page.main_content_hidden = False

    def show_search_loader(self) -> None:
        self.page.search_loader = True

    def hide_search_loader(self) -> None:
        self.page.search_loader = False

    def show_section_loading(self) -> None:
        self.page.sections_loading = True

    def hide_section_loading(self) -> None:
        self.page.sections_loading = False

    def show_main_content(self) -> None:
        self.page.no_results = False
        self.page.main_content_hidden = False

    def show_no_results(self) -> None:
        self.page.main_content_hidden = True
        self.page.no_results = True

    def show_error(self) -> None:
        self.page.error = True
        self.page.main_content_hidden = True
        self.page.title_hidden = True

    def render_current(self, current: CurrentDisplay) -> None:
        self.page.current = current

    def render_details(self, details: DetailsDisplay) -> None:
        self.page.details = details

    def render_daily(self, items: list[DailyItemDisplay]) -> None:
        self.page.daily = items

    def render_day_selector(self, options: list[DayOption]) -> None:
        self.page.day_options = options

    def render_hourly(self, items: list[HourlyItemDisplay]) -> None:
        self.page.hourly = items

    def render_units(self, units: UnitsDisplay) -> None:
        self.page.units = units
