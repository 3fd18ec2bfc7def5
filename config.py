"""
Configuration — loads from .env, provides defaults.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Web widget
WIDGET_HOST = os.getenv("WIDGET_HOST", "127.0.0.1")
WIDGET_PORT = int(os.getenv("WIDGET_PORT", "8080"))
WIDGET_SECRET = os.getenv("WIDGET_SECRET", "change-me-in-production")
MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "1000"))  # search controllers kept in memory

# Open-Meteo endpoints (free, no API key)
GEOCODING_URL = os.getenv("GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search")
FORECAST_URL = os.getenv("FORECAST_URL", "https://api.open-meteo.com/v1/forecast")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))  # seconds

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
