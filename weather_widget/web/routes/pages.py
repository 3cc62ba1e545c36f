from __future__ import annotations

from concurrent.futures import Executor
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse

from weather_widget.api.deps import get_search_executor, get_widget_registry
from weather_widget.services.presenter import MAX_DAY_INDEX
from weather_widget.services.units import category_for
from weather_widget.web.deps import (
    SESSION_WIDGET_KEY,
    csrf_protect,
    ensure_csrf_token,
    get_widget,
)
from weather_widget.web.sessions import Widget, WidgetRegistry
from weather_widget.web.templates import templates

router = APIRouter()

UnitChoice = Literal["celsius", "fahrenheit", "kmh", "mph", "mm", "inches", "imperial"]


def _back_to_widget() -> RedirectResponse:
    return RedirectResponse("/ui/", status_code=303)


@router.get("/", include_in_schema=False)
def widget_page(
    request: Request,
    widget: Annotated[Widget, Depends(get_widget)],
):
    csrf_token = ensure_csrf_token(request)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "request": request,
            "title": "Weather Now",
            "csrf_token": csrf_token,
            "page": widget.view.page,
            "state": widget.presenter.state.value,
        },
    )


@router.post("/search", include_in_schema=False, dependencies=[Depends(csrf_protect)])
def search(
    widget: Annotated[Widget, Depends(get_widget)],
    executor: Annotated[Executor, Depends(get_search_executor)],
    query: Annotated[str, Form(max_length=200)] = "",
):
    pending = widget.presenter.begin_search(query)
    if pending is not None:
        executor.submit(widget.presenter.run_search, pending)
    return _back_to_widget()


@router.post("/units", include_in_schema=False, dependencies=[Depends(csrf_protect)])
def change_units(
    widget: Annotated[Widget, Depends(get_widget)],
    unit: Annotated[UnitChoice, Form()],
):
    if unit == "imperial":
        widget.presenter.switch_to_imperial()
    else:
        widget.presenter.change_unit(category_for(unit), unit)
    return _back_to_widget()


@router.post("/day", include_in_schema=False, dependencies=[Depends(csrf_protect)])
def select_day(
    widget: Annotated[Widget, Depends(get_widget)],
    day_index: Annotated[int, Form(ge=0, le=MAX_DAY_INDEX)],
):
    widget.presenter.select_day(day_index)
    return _back_to_widget()


@router.post("/retry", include_in_schema=False, dependencies=[Depends(csrf_protect)])
def retry(
    request: Request,
    registry: Annotated[WidgetRegistry, Depends(get_widget_registry)],
):
    widget_id = request.session.pop(SESSION_WIDGET_KEY, None)
    if isinstance(widget_id, str):
        registry.discard(widget_id)
    return _back_to_widget()
