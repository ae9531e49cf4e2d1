"""Map OpenWeather condition groups onto the dashboard's condition categories."""
import re
from typing import List, Optional


# Checked in order, first match wins. "rain" is handled separately since it
# depends on the description.
_GROUPS = (
    (("clear",), "sunny"),
    (("clouds",), "cloudy"),
    (("rain",), None),
    (("drizzle",), "drizzle"),
    (("thunderstorm",), "stormy"),
    (("snow",), "snowy"),
    (("mist", "fog", "haze"), "foggy"),
    (("dust", "sand", "ash", "squall", "tornado"), "windy"),
)


def _rain_category(description: str) -> str:
    if "drizzle" in description or "light" in description:
        return "drizzle"
    return "rainy"


def _match(keyword: str, description: str) -> Optional[str]:
    for words, category in _GROUPS:
        if keyword in words:
            return category if category is not None else _rain_category(description)
    return None


def map_condition(main: Optional[str], description: Optional[str]) -> str:
    """
    Map a provider condition to one of the dashboard categories.

    Args:
        main: Primary weather keyword, e.g. "Rain" (case-insensitive)
        description: Free-text description, e.g. "light rain"

    Returns:
        One of weather_data.CONDITIONS; "sunny" when nothing matches
    """
    keyword = (main or "").strip().lower()
    desc = (description or "").lower()

    category = _match(keyword, desc)
    if category is not None:
        return category

    # Compound keywords such as "volcanic-ash"
    tokens: List[str] = [t for t in re.split(r"[^a-z]+", keyword) if t]
    if len(tokens) > 1:
        for token in tokens:
            category = _match(token, desc)
            if category is not None:
                return category

    return "sunny"
