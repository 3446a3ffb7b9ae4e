"""Client for the radio-browser.info station directory."""

import logging

from ..config import RADIO_BROWSER_URL, STATION_SEARCH_LIMIT
from ..geo.nearest_station import Station
from .base import ApiClient, ErrorPolicy, ServiceError

logger = logging.getLogger(__name__)


class RadioDirectoryClient(ApiClient):
    """
    Search radio stations by country or state.

    Failures are logged and an empty list is returned, so callers cannot tell
    "no matches" from "request failed" unless they pass ErrorPolicy.RAISE.
    """

    service_name = "Radio API"
    base_url = RADIO_BROWSER_URL
    error_policy = ErrorPolicy.DEFAULT

    def search_by_country(self, country_code: str) -> list[Station]:
        """Most clicked working stations with a position in a country."""
        return self._search(country_code)

    def search_by_state(self, country_code: str, state: str) -> list[Station]:
        """Same as search_by_country, restricted to a state/region name."""
        return self._search(country_code, state=state)

    def _search(self, country_code: str, state: str | None = None) -> list[Station]:
        params = {"countrycode": country_code.upper()}
        if state:
            params["state"] = state
        params.update(
            {
                "hidebroken": "true",
                "has_geo_info": "true",
                "limit": STATION_SEARCH_LIMIT,
                "order": "clickcount",
                "reverse": "true",
            }
        )

        try:
            payload = self._get_json(f"{self.base_url}/search", params=params)
            if not isinstance(payload, list):
                raise ServiceError(f"{self.service_name} returned a non-list payload")
        except ServiceError as e:
            return self._handle_failure(e, [])

        stations = [Station.from_dict(record) for record in payload if isinstance(record, dict)]
        logger.debug(
            "Found %d stations for %s%s", len(stations), params["countrycode"],
            f"/{state}" if state else "",
        )
        return stations
