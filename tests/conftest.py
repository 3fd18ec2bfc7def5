from __future__ import annotations

import json

import pytest
import requests


def make_response(payload=None, status: int = 200, body: bytes | None = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.reason = "OK" if status < 400 else "Error"
    resp._content = body if body is not None else json.dumps(payload or {}).encode()
    return resp


PARIS = {"name": "Paris", "latitude": 48.85341, "longitude": 2.3488, "country": "France"}

CURRENT = {
    "temperature_2m": 23.4,
    "relative_humidity_2m": 65,
    "apparent_temperature": 21.6,
    "weather_code": 2,
    "wind_speed_10m": 12.3,
}


class FakeOpenMeteo:
    """Stands in for requests.get; answers by URL and records every call."""

    def __init__(self, geo=None, forecast=None):
        self.geo = geo if geo is not None else make_response({"results": [PARIS]})
        self.forecast = forecast if forecast is not None else make_response({"utc_offset_seconds": 7200, "timezone": "Europe/Paris", "current": CURRENT})
        self.calls: list[tuple[str, dict]] = []

    def __call__(self, url, params=None, timeout=None):
        self.calls.append((url, params))
        answer = self.geo if "geocoding" in url else self.forecast
        if isinstance(answer, Exception):
            raise answer
        return answer

    def urls(self) -> list[str]:
        return [url for url, _ in self.calls]


@pytest.fixture
def open_meteo(monkeypatch):
    fake = FakeOpenMeteo()
    monkeypatch.setattr(requests, "get", fake)
    return fake
