"""Weather provider abstraction - allows swapping different weather APIs."""
from abc import ABC, abstractmethod
from weather_data import City, WeatherRecord


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def get_current(self, city: City) -> WeatherRecord:
        """
        Fetch current weather data for one city.

        Args:
            city: City to fetch weather for

        Returns:
            WeatherRecord: Normalized current weather for the city

        Raises:
            WeatherProviderError: If the provider fails to fetch data
        """
        pass


class WeatherProviderError(Exception):
    """Exception raised when a weather provider fails."""
    pass
