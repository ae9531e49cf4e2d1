"""Weather service: parallel per-city fetch with caching and per-city fallback."""
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Sequence, Tuple

from cities import CITIES
from fallback import city_fallback
from weather_data import City, WeatherRecord
from weather_provider import WeatherProviderBase


class AggregationError(Exception):
    """Exception raised when the fan-out over all cities cannot be carried out."""
    pass


class WeatherService:
    """
    Service that fetches every configured city from a provider.

    Each city is fetched on its own worker thread. A city that fails is
    replaced by a fixed fallback record, so one bad response never affects
    the others. Live results are cached per city to avoid hammering the API
    (default: 5 minutes).
    """

    def __init__(
        self,
        provider: WeatherProviderBase,
        cities: Sequence[City] = CITIES,
        cache_ttl_seconds: int = 300,
        max_workers: Optional[int] = None
    ):
        """
        Initialize weather service.

        Args:
            provider: Weather provider to use
            cities: Cities to fetch, in display order
            cache_ttl_seconds: How long a city's live result stays fresh
            max_workers: Thread pool size (defaults to one thread per city)
        """
        self.provider = provider
        self.cities = tuple(cities)
        self.cache_ttl_seconds = cache_ttl_seconds
        self.max_workers = max_workers or max(1, len(self.cities))

        self._cache: Dict[str, Tuple[WeatherRecord, float]] = {}
        self._cache_lock = threading.Lock()

    def get_all(self) -> List[WeatherRecord]:
        """
        Get current weather for every city, in configuration order.

        Returns:
            List[WeatherRecord]: One record per configured city

        Raises:
            AggregationError: If the fan-out itself fails
        """
        try:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                futures = [executor.submit(self._fetch_city, city) for city in self.cities]
                results = [future.result() for future in futures]
        except Exception as e:
            logging.error(f"Weather aggregation failed: {e}", exc_info=True)
            raise AggregationError(f"Failed to fetch weather data: {e}") from e

        fallbacks = sum(1 for _, live in results if not live)
        logging.info(f"Fetched weather for {len(results)} cities ({fallbacks} fallback)")
        return [record for record, _ in results]

    def _fetch_city(self, city: City) -> Tuple[WeatherRecord, bool]:
        """Fetch one city; returns the record and whether it is live data."""
        cached = self._get_cached(city)
        if cached is not None:
            return cached, True

        try:
            record = self.provider.get_current(city)
        except Exception as e:
            logging.warning(f"Error fetching weather for {city.name}, using fallback: {e}")
            return city_fallback(city), False

        with self._cache_lock:
            self._cache[city.id] = (record, time.monotonic())
        return record, True

    def _get_cached(self, city: City) -> Optional[WeatherRecord]:
        with self._cache_lock:
            entry = self._cache.get(city.id)
        if entry is None:
            return None

        record, fetched_at = entry
        cache_age = time.monotonic() - fetched_at
        if cache_age < self.cache_ttl_seconds:
            logging.debug(f"Using cached weather for {city.name} (age: {cache_age:.1f}s)")
            return record
        return None

    def clear_cache(self) -> None:
        """Drop all cached results so the next call hits the provider."""
        with self._cache_lock:
            self._cache.clear()
