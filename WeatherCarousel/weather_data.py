"""Weather domain model - pure data structures independent of any API."""
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional


CONDITIONS = ("sunny", "cloudy", "rainy", "snowy", "stormy", "drizzle", "windy", "foggy")
DEFAULT_CONDITION = "sunny"


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def city_id(name: str) -> str:
    """Build the record id for a city name, e.g. "New York" -> "new-york"."""
    return "-".join(name.lower().split())


@dataclass(frozen=True)
class City:
    """A configured city."""
    name: str
    country: str  # ISO 3166 alpha-2
    abbreviation: str
    lat: float
    lon: float

    @property
    def id(self) -> str:
        return city_id(self.name)


@dataclass
class WeatherRecord:
    """Normalized current weather for one city, in metric units."""
    id: str
    name: str
    country: str
    abbreviation: str
    temperature: int  # °C
    feels_like: int  # °C
    humidity: int  # %
    wind_speed: int  # km/h
    pressure: int  # hPa
    visibility: int  # km
    uv_index: int
    condition: str  # one of CONDITIONS
    description: str
    last_updated: datetime

    @classmethod
    def for_city(cls, city: City, **fields) -> "WeatherRecord":
        """Create a record carrying the identity fields of ``city``."""
        return cls(
            id=city.id,
            name=city.name,
            country=city.country,
            abbreviation=city.abbreviation,
            **fields
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON shape served by the aggregator endpoint."""
        return {
            "id": self.id,
            "name": self.name,
            "country": self.country,
            "abbreviation": self.abbreviation,
            "temperature": self.temperature,
            "condition": self.condition,
            "humidity": self.humidity,
            "windSpeed": self.wind_speed,
            "pressure": self.pressure,
            "feelsLike": self.feels_like,
            "uvIndex": self.uv_index,
            "visibility": self.visibility,
            "description": self.description,
            "lastUpdated": self.last_updated.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeatherRecord":
        """
        Parse a record from its JSON shape.

        Args:
            data: Decoded JSON object as produced by to_dict()

        Returns:
            WeatherRecord: Parsed record

        Raises:
            ValueError: If the object is missing fields or has bad values
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        try:
            condition = str(data["condition"]).lower()
            if condition not in CONDITIONS:
                condition = DEFAULT_CONDITION
            return cls(
                id=str(data["id"]),
                name=str(data["name"]),
                country=str(data["country"]),
                abbreviation=str(data["abbreviation"]),
                temperature=int(data["temperature"]),
                feels_like=int(data["feelsLike"]),
                humidity=int(data["humidity"]),
                wind_speed=int(data["windSpeed"]),
                pressure=int(data["pressure"]),
                visibility=int(data["visibility"]),
                uv_index=int(data["uvIndex"]),
                condition=condition,
                description=str(data.get("description") or ""),
                last_updated=_parse_timestamp(data.get("lastUpdated")),
            )
        except KeyError as e:
            raise ValueError(f"Weather record missing field {e}") from e
        except (TypeError, OverflowError) as e:
            raise ValueError(f"Invalid weather record: {e}") from e


def _parse_timestamp(value: Optional[str]) -> datetime:
    if not value:
        return datetime.now(timezone.utc)
    try:
        # fromisoformat() on older interpreters does not accept the "Z" suffix
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return datetime.now(timezone.utc)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
