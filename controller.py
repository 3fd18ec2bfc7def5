"""
Search controller — owns the widget's UI state and runs one search at a time.

Flow per submission:
  1. Trim the input; blank input is ignored
  2. Switch to the loading panel
  3. Geocode the city, then fetch current weather for its coordinates
  4. Classify the weather code and render the display strings
  5. Switch to the result panel, or to the error panel on any failure

A submission that arrives while a search is loading is ignored, so the
trigger is effectively disabled until the loading panel goes away.
"""

from __future__ import annotations
import logging
import threading
from typing import Callable, Optional

from abilities import conditions, geocoder, weather
from models import SearchQuery, UIState
import renderer

log = logging.getLogger(__name__)


class SearchController:
    def __init__(self):
        self.state: UIState = UIState.idle()
        self._listeners: list[Callable[[UIState], None]] = []
        self._lock = threading.Lock()

    def add_listener(self, callback: Callable[[UIState], None]):
        """
        Register a surface that displays state.
        callback(state) — called on every transition, in order.
        """
        self._listeners.append(callback)

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    async def submit(self, raw: Optional[str]) -> Optional[UIState]:
        """
        Run a search for the city typed by the user.
        Returns the state the search ended in, or None when nothing happened
        (blank input or a search already loading).
        """
        query = SearchQuery.parse(raw)
        if query is None:
            return None

        with self._lock:
            if self.state.is_loading:
                log.info(f"Ignoring search for {query.city!r}: another search is loading")
                return None
            self._set_state(UIState.loading(query.city))

        outcome = UIState.error("Search was interrupted")
        try:
            outcome = await self._search(query)
        except Exception as e:
            log.exception(f"Error fetching weather for {query.city!r}")
            outcome = UIState.error(str(e) or type(e).__name__, getattr(e, "kind", "unexpected"))
        finally:
            # Leaving the loading panel is unconditional
            self._set_state(outcome)
        return outcome

    async def _search(self, query: SearchQuery) -> UIState:
        geo = await geocoder.resolve_city(query.city)
        current = await weather.fetch_current(geo.latitude, geo.longitude)
        presentation = conditions.classify(current.weather_code)
        view = renderer.render(geo.name, geo.country, current, presentation)
        log.info(f"Weather for {view.location}: {view.temperature}°C, {presentation.description}")
        return UIState.result(geo.name, geo.country, current, presentation, view)

    def _set_state(self, state: UIState):
        self.state = state
        for callback in self._listeners:
            callback(state)
