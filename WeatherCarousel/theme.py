"""Visual theme per weather condition: icon, colors, gradient and text contrast."""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

RGB = Tuple[int, int, int]

GRADIENT_ANGLE = 135
# Backgrounds dark enough to need white text
DARK_BACKGROUNDS = frozenset({"stormy", "cloudy", "rainy"})


def hex_to_rgb(color: str) -> RGB:
    """Convert "#RRGGBB" to an (r, g, b) tuple."""
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Invalid hex color: {color!r}")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


@dataclass(frozen=True)
class WeatherTheme:
    """How a condition category is drawn."""
    id: str
    name: str
    icon: str  # glyph identifier
    primary: str
    secondary: str

    @property
    def gradient(self) -> str:
        return f"linear-gradient({GRADIENT_ANGLE}deg, {self.primary} 0%, {self.secondary} 100%)"

    @property
    def gradient_stops(self) -> Tuple[RGB, RGB]:
        return hex_to_rgb(self.primary), hex_to_rgb(self.secondary)


THEMES: Mapping[str, WeatherTheme] = MappingProxyType({
    "sunny": WeatherTheme("sunny", "Sunny", "sun", "#FFA500", "#FFD700"),
    "cloudy": WeatherTheme("cloudy", "Cloudy", "cloud", "#708090", "#B0C4DE"),
    "rainy": WeatherTheme("rainy", "Rainy", "cloud-rain", "#4682B4", "#87CEEB"),
    "snowy": WeatherTheme("snowy", "Snowy", "cloud-snow", "#E6E6FA", "#F0F8FF"),
    "stormy": WeatherTheme("stormy", "Stormy", "zap", "#2F4F4F", "#696969"),
    "drizzle": WeatherTheme("drizzle", "Drizzle", "cloud-drizzle", "#778899", "#B0C4DE"),
    "windy": WeatherTheme("windy", "Windy", "wind", "#87CEEB", "#E0F6FF"),
    "foggy": WeatherTheme("foggy", "Foggy", "cloud-fog", "#A9A9A9", "#D3D3D3"),
})


def get_theme(condition: str) -> WeatherTheme:
    """Look up the theme for a condition, falling back to sunny."""
    return THEMES.get(condition, THEMES["sunny"])


def get_text_color(condition: str) -> str:
    """Text color class for a condition: "text-white" on dark backgrounds, else "text-black"."""
    if condition in DARK_BACKGROUNDS:
        return "text-white"
    return "text-black"


def text_rgb(condition: str) -> RGB:
    if get_text_color(condition) == "text-white":
        return (255, 255, 255)
    return (0, 0, 0)


def get_temperature_color(temp: float) -> str:
    """
    Get hex color for a temperature in Celsius.

    Freezing (<= 0) = light blue
    Cold (<= 10) = steel blue
    Mild (<= 20) = lime green
    Warm (<= 30) = gold
    Hot (> 30) = tomato
    """
    if temp <= 0:
        return "#87CEEB"
    elif temp <= 10:
        return "#4682B4"
    elif temp <= 20:
        return "#32CD32"
    elif temp <= 30:
        return "#FFD700"
    return "#FF6347"
