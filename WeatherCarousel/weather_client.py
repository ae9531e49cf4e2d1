"""Client for the aggregator endpoint, used by the dashboard."""
import logging
import random
from typing import List, Optional, Sequence

import requests

from cities import CITIES
from fallback import fallback_records
from weather_data import City, WeatherRecord

DEFAULT_ENDPOINT = "http://127.0.0.1:5000/api/weather"


class WeatherClient:
    """
    Fetches the weather collection from the aggregator endpoint.

    fetch() never raises: if the endpoint cannot be reached or answers with
    an error, random placeholder records are returned for every city.
    """

    def __init__(
        self,
        endpoint_url: str = DEFAULT_ENDPOINT,
        cities: Sequence[City] = CITIES,
        timeout: Optional[float] = None,
        max_age_seconds: int = 300,
        rng: Optional[random.Random] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize weather client.

        Args:
            endpoint_url: URL of the aggregator's /api/weather endpoint
            cities: Cities used to build fallback records
            timeout: HTTP request timeout in seconds (None leaves it to requests)
            max_age_seconds: Freshness hint sent with every request
            rng: Random source for fallback records
            session: Optional requests session to reuse connections
        """
        self.endpoint_url = endpoint_url
        self.cities = tuple(cities)
        self.timeout = timeout
        self.max_age_seconds = max_age_seconds
        self.rng = rng
        self.session = session or requests.Session()

    def fetch(self) -> List[WeatherRecord]:
        """
        Fetch the weather collection.

        Returns:
            List[WeatherRecord]: Live records, or fallback records on failure
        """
        try:
            response = self.session.get(
                self.endpoint_url,
                headers={"Cache-Control": f"max-age={self.max_age_seconds}"},
                timeout=self.timeout,
            )
            if not response.ok:
                raise WeatherClientError(f"Failed to fetch weather data: HTTP {response.status_code}")

            payload = response.json()
            if not isinstance(payload, list):
                raise WeatherClientError("Expected a JSON array of weather records")
            records = [WeatherRecord.from_dict(item) for item in payload]
            logging.info(f"Loaded weather for {len(records)} cities from {self.endpoint_url}")
            return records

        except (requests.exceptions.RequestException, WeatherClientError, ValueError) as e:
            logging.error(f"Error fetching weather data: {e}")
            return fallback_records(self.cities, rng=self.rng)


class WeatherClientError(Exception):
    """Exception raised when the aggregator answers with an unusable response."""
    pass
