"""
Weather widget — Flask web UI.

Provides:
  - The widget page: city search box plus loading / result / error panels
  - Form action for searches (submit button or Enter in the text field)
  - REST API for programmatic access

Each browser session that has searched gets its own search controller,
keyed by an id kept in Flask's signed session cookie. Sessions that never
search get no controller and see the idle page. At most `max_sessions`
controllers are kept; the least recently used is dropped first.
"""

import asyncio
import logging
import threading
import uuid
from collections import OrderedDict
from typing import Optional

from flask import Flask, render_template, request, jsonify, redirect, url_for, session

from config import MAX_SESSIONS, WIDGET_SECRET
from controller import SearchController
from models import Panel, SearchQuery, UIState

log = logging.getLogger(__name__)

ERROR_STATUS = {
    "not_found": 404,
    "service_unavailable": 503,
    "unexpected": 500,
}


def create_app(secret_key: str = WIDGET_SECRET, max_sessions: int = MAX_SESSIONS):
    app = Flask(__name__)
    app.secret_key = secret_key

    controllers: "OrderedDict[str, SearchController]" = OrderedDict()
    controllers_lock = threading.Lock()

    def current_state() -> UIState:
        widget_id = session.get("widget_id")
        with controllers_lock:
            controller = controllers.get(widget_id) if widget_id else None
        return controller.state if controller else UIState.idle()

    def controller_for_search() -> SearchController:
        widget_id = session.get("widget_id")
        if not widget_id:
            widget_id = uuid.uuid4().hex
            session["widget_id"] = widget_id
        with controllers_lock:
            controller = controllers.get(widget_id)
            if controller is None:
                controller = controllers[widget_id] = SearchController()
            controllers.move_to_end(widget_id)
            while len(controllers) > max_sessions:
                dropped, _ = controllers.popitem(last=False)
                log.info(f"Dropped search controller for session {dropped[:8]}")
        return controller

    def run_search(controller: SearchController, city: str) -> Optional[UIState]:
        loop = asyncio.new_event_loop()
        try:
            return loop.run_until_complete(controller.submit(city))
        finally:
            loop.close()

    app.extensions["weather_controllers"] = controllers

    # ── Pages ───────────────────────────────────────────────

    @app.route("/")
    def index():
        return render_template("widget.html", state=current_state(), Panel=Panel)

    # ── Form actions ────────────────────────────────────────

    @app.route("/search", methods=["POST"])
    def search():
        city = request.form.get("city", "")
        if SearchQuery.parse(city):
            run_search(controller_for_search(), city)
        return redirect(url_for("index"))

    # ── API endpoints ───────────────────────────────────────

    @app.route("/api/weather", methods=["GET"])
    def api_weather():
        city = request.args.get("city", "")
        if not SearchQuery.parse(city):
            return jsonify({"error": "city is required"}), 400

        state = run_search(controller_for_search(), city)
        if state is None:
            return jsonify({"error": "a search is already in progress"}), 409
        if state.panel is Panel.ERROR:
            return jsonify(state.to_dict()), ERROR_STATUS.get(state.error_kind, 500)
        return jsonify(state.to_dict())

    @app.route("/api/state", methods=["GET"])
    def api_state():
        return jsonify(current_state().to_dict())

    return app
