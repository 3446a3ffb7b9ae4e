"""Runtime configuration read from the environment."""

import os
from pathlib import Path

# Endpoints
RADIO_BROWSER_URL = os.environ.get(
    "RADIO_BROWSER_URL", "https://de1.api.radio-browser.info/json/stations"
)
OPEN_METEO_URL = os.environ.get("OPEN_METEO_URL", "https://api.open-meteo.com/v1/forecast")
NOMINATIM_URL = os.environ.get("NOMINATIM_URL", "https://nominatim.openstreetmap.org/reverse")

# Nominatim rejects requests without an identifying User-Agent
USER_AGENT = os.environ.get("NEARBY_RADIO_USER_AGENT", "nearby-radio/0.1.0")
HTTP_TIMEOUT = float(os.environ.get("NEARBY_RADIO_TIMEOUT", "10"))

LOG_LEVEL = os.environ.get("NEARBY_RADIO_LOG_LEVEL", "INFO").upper()

STATION_SEARCH_LIMIT = 100

DATA_DIR = Path(__file__).parent.parent / "data"
