"""Tests for the visual theme table."""
import pytest
from theme import (
    THEMES,
    get_temperature_color,
    get_text_color,
    get_theme,
    hex_to_rgb,
    text_rgb,
)
from weather_data import CONDITIONS


@pytest.mark.parametrize("condition", CONDITIONS)
def test_every_condition_has_visuals(condition):
    """Test each category has icon, gradient and contrast class."""
    theme = get_theme(condition)

    assert theme.id == condition
    assert theme.icon
    assert theme.gradient.startswith("linear-gradient(135deg, ")
    assert theme.primary in theme.gradient
    assert theme.secondary in theme.gradient
    assert get_text_color(condition) in ("text-white", "text-black")


def test_theme_table_is_complete():
    """Test the table covers exactly the known categories."""
    assert set(THEMES) == set(CONDITIONS)


def test_theme_table_is_read_only():
    """Test the table cannot be modified."""
    with pytest.raises(TypeError):
        THEMES["hail"] = THEMES["sunny"]


def test_unknown_condition_falls_back_to_sunny():
    """Test unknown categories get the sunny visuals and dark text."""
    assert get_theme("hail") is THEMES["sunny"]
    assert get_text_color("hail") == "text-black"


def test_text_contrast():
    """Test light text on dark backgrounds only."""
    assert get_text_color("stormy") == "text-white"
    assert get_text_color("cloudy") == "text-white"
    assert get_text_color("rainy") == "text-white"
    for condition in ("sunny", "snowy", "drizzle", "windy", "foggy"):
        assert get_text_color(condition) == "text-black"
    assert text_rgb("stormy") == (255, 255, 255)
    assert text_rgb("sunny") == (0, 0, 0)


def test_gradient_stops():
    """Test gradient stops as RGB."""
    assert THEMES["sunny"].gradient_stops == ((255, 165, 0), (255, 215, 0))


def test_hex_to_rgb():
    """Test hex parsing."""
    assert hex_to_rgb("#4682B4") == (70, 130, 180)
    with pytest.raises(ValueError):
        hex_to_rgb("#fff")


@pytest.mark.parametrize("temp,expected", [
    (-10, "#87CEEB"),
    (0, "#87CEEB"),
    (10, "#4682B4"),
    (15, "#32CD32"),
    (30, "#FFD700"),
    (31, "#FF6347"),
])
def test_temperature_color(temp, expected):
    """Test temperature color bands."""
    assert get_temperature_color(temp) == expected
