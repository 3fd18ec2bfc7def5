"""
Failures a weather lookup can end in.

Clients raise these; the search controller catches them (and anything
else) and turns them into the error panel.
"""


class WeatherLookupError(Exception):
    kind = "unexpected"


class NotFound(WeatherLookupError):
    """The geocoder had no match for the city name."""
    kind = "not_found"


class ServiceUnavailable(WeatherLookupError):
    """An upstream HTTP call failed or returned a non-success status."""
    kind = "service_unavailable"
