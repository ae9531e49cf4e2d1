"""Synthetic weather records used when live data is unavailable."""
import random
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from cities import CITIES
from weather_data import CONDITIONS, City, WeatherRecord


def city_fallback(city: City, now: Optional[datetime] = None) -> WeatherRecord:
    """Fixed record substituted when a single city's fetch fails."""
    return WeatherRecord.for_city(
        city,
        temperature=20,
        feels_like=20,
        humidity=50,
        wind_speed=10,
        pressure=1013,
        visibility=10,
        uv_index=5,
        condition="sunny",
        description="Clear sky",
        last_updated=now or datetime.now(timezone.utc),
    )


def fallback_records(
    cities: Iterable[City] = CITIES,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None
) -> List[WeatherRecord]:
    """
    Generate a plausible random record for every city.

    Used by the client when the aggregator endpoint cannot be reached, so the
    dashboard never renders empty.

    Args:
        cities: Cities to generate records for, in display order
        rng: Random source (defaults to a fresh unseeded generator)
        now: Timestamp to stamp on every record (defaults to current time)

    Returns:
        One record per city, in the same order
    """
    rng = rng or random.Random()
    now = now or datetime.now(timezone.utc)
    return [
        WeatherRecord.for_city(
            city,
            temperature=rng.randint(-5, 35),
            feels_like=rng.randint(-5, 35),
            humidity=rng.randint(0, 100),
            wind_speed=rng.randint(0, 30),
            pressure=rng.randint(1000, 1050),
            visibility=rng.randint(5, 25),
            uv_index=rng.randint(0, 11),
            condition=rng.choice(CONDITIONS),
            description="Weather data unavailable",
            last_updated=now,
        )
        for city in cities
    ]
