"""
Weather ability — current conditions for a pair of coordinates.

Uses the Open-Meteo forecast API (free, no API key required).
"""

import asyncio
import logging

import requests

from config import FORECAST_URL, HTTP_TIMEOUT
from errors import ServiceUnavailable
from models import CurrentConditions

log = logging.getLogger(__name__)

CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "weather_code",
    "wind_speed_10m",
)


def _forecast(latitude: float, longitude: float) -> dict:
    try:
        resp = requests.get(
            FORECAST_URL,
            params={
                "latitude": latitude,
                "longitude": longitude,
                "current": ",".join(CURRENT_FIELDS),
                "timezone": "auto",
            },
            timeout=HTTP_TIMEOUT,
        )
        resp.raise_for_status()
    except requests.RequestException as e:
        log.warning(f"Forecast request for ({latitude}, {longitude}) failed: {e}")
        raise ServiceUnavailable("Weather service unavailable") from e
    return resp.json()


async def fetch_current(latitude: float, longitude: float) -> CurrentConditions:
    """Fetch current conditions. One call, no retry."""
    data = await asyncio.to_thread(_forecast, latitude, longitude)
    return CurrentConditions.from_api(data["current"], data.get("utc_offset_seconds", 0))
