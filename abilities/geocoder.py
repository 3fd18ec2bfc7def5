"""
Geocoder ability — resolve a city name to coordinates.

Uses the Open-Meteo geocoding API (free, no API key required).
"""

import asyncio
import logging

import requests

from config import GEOCODING_URL, HTTP_TIMEOUT
from errors import NotFound, ServiceUnavailable
from models import GeoResult

log = logging.getLogger(__name__)


def _search(name: str) -> dict:
    try:
        resp = requests.get(
            GEOCODING_URL,
            params={"name": name, "count": 1, "language": "en", "format": "json"},
            timeout=HTTP_TIMEOUT,
        )
        resp.raise_for_status()
    except requests.RequestException as e:
        log.warning(f"Geocoding request for {name!r} failed: {e}")
        raise ServiceUnavailable("Geocoding service unavailable") from e
    return resp.json()


async def resolve_city(name: str) -> GeoResult:
    """Return the provider's best match for `name`. Raises NotFound if there is none."""
    data = await asyncio.to_thread(_search, name)
    results = data.get("results")
    if not results:
        raise NotFound(f'City "{name}" not found')
    geo = GeoResult.from_api(results[0])
    log.info(f"Resolved {name!r} to {geo.name}, {geo.country} ({geo.latitude}, {geo.longitude})")
    return geo
