from __future__ import annotations

from datetime import datetime, timezone


def _parse_utc(value: str) -> datetime:
    # Provider dates are date-only ("2026-10-17"); a naive value is taken as UTC
    # so the weekday never shifts with the server's local zone.
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


class DateFormatter:
    def current_date_label(self, now: datetime | None = None) -> str:
        """Full weekday, short month, day and year, e.g. ``Saturday, Oct 17, 2026``."""
        now = now or datetime.now().astimezone()
        return f"{now:%A}, {now:%b} {now.day}, {now.year}"

    def short_day_label(self, iso_date: str) -> str:
        return f"{_parse_utc(iso_date):%a}"

    def full_day_label(self, iso_date: str) -> str:
        return f"{_parse_utc(iso_date):%A}"

    def hour_label(self, iso_timestamp: str) -> str:
        # Hourly timestamps are already local to the forecast location.
        return f"{datetime.fromisoformat(iso_timestamp):%H:%M}"
