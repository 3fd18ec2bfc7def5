"""
Weather widget — entry point.

Serves the widget page and its JSON API.

Usage:
  python main.py
"""

import logging

from config import LOG_LEVEL, WIDGET_HOST, WIDGET_PORT
from web import create_app

logging.basicConfig(
    format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
    level=LOG_LEVEL,
)
log = logging.getLogger("widget")


def main():
    app = create_app()
    # Keep Flask request logs out of the console
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    log.info(f"Weather widget: http://{WIDGET_HOST}:{WIDGET_PORT}")
    app.run(host=WIDGET_HOST, port=WIDGET_PORT, use_reloader=False)


if __name__ == "__main__":
    main()
