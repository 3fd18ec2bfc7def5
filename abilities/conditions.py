"""
Map WMO weather codes to a description and a Font Awesome icon.

See https://open-meteo.com/en/docs for the code table.
"""

from models import WeatherPresentation

# (low, high) inclusive, checked in order
CODE_RANGES = [
    ((0, 0), WeatherPresentation("Clear Sky", "sun")),
    ((1, 3), WeatherPresentation("Partly Cloudy", "cloud-sun")),
    ((45, 48), WeatherPresentation("Foggy", "smog")),
    ((51, 55), WeatherPresentation("Drizzle", "cloud-rain")),
    ((61, 65), WeatherPresentation("Rain", "cloud-showers-heavy")),
    ((71, 77), WeatherPresentation("Snow Fall", "snowflake")),
    ((80, 82), WeatherPresentation("Rain Showers", "cloud-showers-water")),
    ((95, 99), WeatherPresentation("Thunderstorm", "cloud-bolt")),
]

UNKNOWN = WeatherPresentation("Unknown", "cloud")


def classify(code: int) -> WeatherPresentation:
    for (low, high), presentation in CODE_RANGES:
        if low <= code <= high:
            return presentation
    return UNKNOWN
