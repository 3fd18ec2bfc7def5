"""
Data models for a single weather search and the widget's UI state.
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class SearchQuery:
    city: str

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional[SearchQuery]:
        """Trim user input. Returns None when nothing is left."""
        city = (raw or "").strip()
        if not city:
            return None
        return cls(city=city)


@dataclass
class GeoResult:
    name: str
    country: str
    latitude: float
    longitude: float

    @classmethod
    def from_api(cls, row: dict) -> GeoResult:
        return cls(
            name=row["name"],
            country=row.get("country", ""),
            latitude=row["latitude"],
            longitude=row["longitude"],
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class CurrentConditions:
    temperature_c: float
    apparent_temperature_c: float
    relative_humidity_pct: int
    wind_speed_kmh: float
    weather_code: int
    utc_offset_seconds: int = 0  # of the location, from timezone=auto

    @classmethod
    def from_api(cls, current: dict, utc_offset_seconds: int = 0) -> CurrentConditions:
        return cls(
            temperature_c=current["temperature_2m"],
            apparent_temperature_c=current["apparent_temperature"],
            relative_humidity_pct=current["relative_humidity_2m"],
            wind_speed_kmh=current["wind_speed_10m"],
            weather_code=current["weather_code"],
            utc_offset_seconds=utc_offset_seconds,
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class WeatherPresentation:
    description: str
    icon: str  # Font Awesome icon name without the "fa-" prefix

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class WeatherView:
    """Display strings for the result panel."""
    location: str
    date: str
    temperature: str
    description: str
    icon_class: str
    humidity: str
    wind_speed: str
    feels_like: str

    def to_dict(self) -> dict:
        return asdict(self)


class Panel(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    RESULT = "result"
    ERROR = "error"


@dataclass(frozen=True)
class UIState:
    """
    What the widget shows. `panel` is the tag; only the payload fields
    belonging to that panel are set. Build through the classmethods.
    """
    panel: Panel = Panel.IDLE
    city: str = ""
    country: str = ""
    conditions: Optional[CurrentConditions] = None
    presentation: Optional[WeatherPresentation] = None
    view: Optional[WeatherView] = None
    message: str = ""
    error_kind: str = ""
    query: str = field(default="", compare=False)

    @classmethod
    def idle(cls) -> UIState:
        return cls(Panel.IDLE)

    @classmethod
    def loading(cls, query: str) -> UIState:
        return cls(Panel.LOADING, query=query)

    @classmethod
    def result(cls, city: str, country: str, conditions: CurrentConditions,
               presentation: WeatherPresentation, view: WeatherView) -> UIState:
        return cls(
            Panel.RESULT,
            city=city,
            country=country,
            conditions=conditions,
            presentation=presentation,
            view=view,
        )

    @classmethod
    def error(cls, message: str, kind: str = "unexpected") -> UIState:
        return cls(Panel.ERROR, message=message, error_kind=kind)

    @property
    def is_loading(self) -> bool:
        return self.panel is Panel.LOADING

    def to_dict(self) -> dict:
        d = {"state": self.panel.value}
        if self.panel is Panel.RESULT:
            d.update({
                "city": self.city,
                "country": self.country,
                "conditions": self.conditions.to_dict(),
                "presentation": self.presentation.to_dict(),
                "view": self.view.to_dict(),
            })
        elif self.panel is Panel.ERROR:
            d.update({"message": self.message, "kind": self.error_kind})
        elif self.panel is Panel.LOADING:
            d["query"] = self.query
        return d
