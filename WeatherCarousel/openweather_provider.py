"""OpenWeather Current Weather API provider implementation."""
import logging
from datetime import datetime, timezone
from typing import Optional

import requests

from conditions import map_condition
from weather_data import City, WeatherRecord, round_half_up
from weather_provider import WeatherProviderBase, WeatherProviderError


class OpenWeatherProvider(WeatherProviderBase):
    """
    Weather provider using OpenWeather Current Weather API.

    Uses the free Current Weather API: https://openweathermap.org/current
    One request is made per city, keyed by its latitude/longitude.
    """

    BASE_URL = "https://api.openweathermap.org/data/2.5/weather"

    def __init__(
        self,
        api_key: str,
        lang: str = "en",
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize OpenWeather provider.

        Args:
            api_key: OpenWeather API key
            lang: Language code for descriptions (e.g., "en", "de")
            timeout: HTTP request timeout in seconds (None leaves it to requests)
            session: Optional requests session to reuse connections
        """
        self.api_key = api_key
        self.lang = lang
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_current(self, city: City) -> WeatherRecord:
        """
        Fetch current weather for a city from OpenWeather.

        Args:
            city: City to fetch weather for

        Returns:
            WeatherRecord: Current weather, normalized to dashboard units

        Raises:
            WeatherProviderError: If the API request fails
        """
        params = {
            "lat": city.lat,
            "lon": city.lon,
            "appid": self.api_key,
            "units": "metric",
            "lang": self.lang,
        }

        try:
            logging.debug(f"OpenWeather request for {city.name}: lat={city.lat}, lon={city.lon}")
            response = self.session.get(self.BASE_URL, params=params, timeout=self.timeout)
            logging.debug(f"API response status for {city.name}: {response.status_code}")

            if not response.ok:
                logging.error(f"API request for {city.name} failed with status {response.status_code}")
                self._handle_error_response(response)

            data = response.json()
            return self._parse(city, data)

        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request for {city.name}: {e}")
            raise WeatherProviderError(f"Network error: {str(e)}")
        except (KeyError, ValueError, TypeError) as e:
            logging.error(f"Failed to parse API response for {city.name}: {e}", exc_info=True)
            raise WeatherProviderError(f"Failed to parse response: {str(e)}")

    def _parse(self, city: City, data: dict) -> WeatherRecord:
        weather_array = data.get("weather", [])
        if not weather_array:
            raise WeatherProviderError("Response missing 'weather' array")
        weather = weather_array[0]

        main_data = data.get("main", {})
        if not main_data:
            raise WeatherProviderError("Response missing 'main' block")

        wind_data = data.get("wind") or {}
        description = weather.get("description", "")
        # Visibility is reported in meters, wind speed in m/s
        record = WeatherRecord.for_city(
            city,
            temperature=round_half_up(main_data["temp"]),
            feels_like=round_half_up(main_data["feels_like"]),
            humidity=int(main_data["humidity"]),
            wind_speed=round_half_up(wind_data.get("speed", 0.0) * 3.6),
            pressure=int(main_data["pressure"]),
            visibility=round_half_up(data.get("visibility", 0) / 1000),
            uv_index=0,
            condition=map_condition(weather.get("main", ""), description),
            description=description,
            last_updated=datetime.fromtimestamp(data["dt"], tz=timezone.utc),
        )

        logging.debug(f"Parsed weather for {city.name}: {record.temperature}°C, {record.condition}")
        return record

    def _handle_error_response(self, response: requests.Response) -> None:
        """Parse and raise error from OpenWeather error response."""
        try:
            error_data = response.json()
        except ValueError:
            # Not JSON, use HTTP status
            logging.error(f"Non-JSON error response: HTTP {response.status_code}, body: {response.text[:500]}")
            raise WeatherProviderError(
                f"HTTP {response.status_code}: {response.text[:200]}"
            )

        cod = error_data.get("cod", response.status_code)
        message = error_data.get("message", "Unknown error")
        logging.error(f"OpenWeather API error response: {error_data}")
        raise WeatherProviderError(f"OpenWeather API error {cod}: {message}")
