from __future__ import annotations

from datetime import datetime, timezone

from weather_widget.services.dates import DateFormatter


def test_current_date_label() -> None:
    now = datetime(2026, 10, 17, 9, 5, tzinfo=timezone.utc)
    assert DateFormatter().current_date_label(now) == "Saturday, Oct 17, 2026"


def test_day_labels_use_utc() -> None:
    dates = DateFormatter()
    assert dates.short_day_label("2026-10-17") == "Sat"
    assert dates.full_day_label("2026-10-18") == "Sunday"
    # late evening west of UTC is already the next day in UTC
    assert dates.full_day_label("2026-10-17T23:30:00-05:00") == "Sunday"


def test_hour_label() -> None:
    assert DateFormatter().hour_label("2026-10-17T07:00") == "07:00"
