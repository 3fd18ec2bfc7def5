"""
Renderer — turns a resolved search into the strings the result panel shows.

The date shown is the calendar day at the searched location, taken from the
forecast's UTC offset, not the server's local date.
"""

from __future__ import annotations
import math
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from models import CurrentConditions, WeatherPresentation, WeatherView


def round_half_up(value: float) -> int:
    """Nearest integer, halves go up (23.5 -> 24, -0.5 -> 0)."""
    return math.floor(value + 0.5)


def format_number(value) -> str:
    """Provider precision, but whole floats print without a trailing .0"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_date(day: date) -> str:
    # en-US, e.g. "Monday, Jan 3"; strftime names are English under the default C locale
    return f"{day:%A}, {day:%b} {day.day}"


def local_date(utc_offset_seconds: int, now: Optional[datetime] = None) -> date:
    """Today's date at a location `utc_offset_seconds` away from UTC."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone(timedelta(seconds=utc_offset_seconds))).date()


def render(city: str, country: str, conditions: CurrentConditions,
           presentation: WeatherPresentation, today: Optional[date] = None) -> WeatherView:
    today = today or local_date(conditions.utc_offset_seconds)
    return WeatherView(
        location=f"{city}, {country}",
        date=format_date(today),
        temperature=str(round_half_up(conditions.temperature_c)),
        description=presentation.description,
        icon_class=f"fa-solid fa-{presentation.icon}",
        humidity=f"{format_number(conditions.relative_humidity_pct)}%",
        wind_speed=f"{format_number(conditions.wind_speed_kmh)} km/h",
        feels_like=f"{round_half_up(conditions.apparent_temperature_c)}°",
    )
