from __future__ import annotations

from enum import Enum


class IconId(str, Enum):
    CLEAR = "clear"
    PARTLY_CLOUDY = "partly-cloudy"
    OVERCAST = "overcast"
    FOG = "fog"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    SNOW = "snow"
    STORM = "storm"


# WMO weather interpretation codes as reported by Open-Meteo. Code 1
# ("mainly clear") shares the clear icon.
WEATHER_CODE_ICONS: dict[int, IconId] = {
    0: IconId.CLEAR,
    1: IconId.CLEAR,
    2: IconId.PARTLY_CLOUDY,
    3: IconId.OVERCAST,
    45: IconId.FOG,
    48: IconId.FOG,
    51: IconId.DRIZZLE,
    53: IconId.DRIZZLE,
    55: IconId.DRIZZLE,
    61: IconId.RAIN,
    63: IconId.RAIN,
    65: IconId.RAIN,
    71: IconId.SNOW,
    73: IconId.SNOW,
    75: IconId.SNOW,
    77: IconId.SNOW,
    80: IconId.RAIN,
    81: IconId.RAIN,
    82: IconId.RAIN,
    85: IconId.SNOW,
    86: IconId.SNOW,
    95: IconId.STORM,
    96: IconId.STORM,
    99: IconId.STORM,
}


def icon_for(code: int | None) -> IconId:
    if code is None:
        return IconId.CLEAR
    return WEATHER_CODE_ICONS.get(code, IconId.CLEAR)


def icon_path(icon: IconId) -> str:
    return f"/static/icons/{icon.value}.svg"
