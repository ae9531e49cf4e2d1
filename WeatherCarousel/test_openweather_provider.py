"""Tests for OpenWeather provider."""
import pytest
import requests
from datetime import datetime, timezone
from unittest.mock import Mock
from cities import CITIES
from openweather_provider import OpenWeatherProvider, WeatherProviderError
from weather_data import WeatherRecord


@pytest.fixture
def sample_openweather_response():
    """Sample OpenWeather API response."""
    return {
        "coord": {"lon": -74.006, "lat": 40.7128},
        "weather": [
            {
                "id": 500,
                "main": "Rain",
                "description": "light rain",
                "icon": "10d"
            }
        ],
        "base": "stations",
        "main": {
            "temp": 18.55,
            "feels_like": 18.2,
            "pressure": 1014,
            "humidity": 89
        },
        "visibility": 9500,
        "wind": {"speed": 2.78, "deg": 93},
        "rain": {"1h": 0.3},
        "clouds": {"all": 75},
        "dt": 1684929490,
        "sys": {"country": "US"},
        "timezone": -14400,
        "name": "New York",
        "id": 5128581
    }


@pytest.fixture
def session():
    """Mock requests session."""
    return Mock()


@pytest.fixture
def provider(session):
    """Create OpenWeather provider instance."""
    return OpenWeatherProvider(api_key="test_key", session=session)


def _ok(payload):
    response = Mock()
    response.ok = True
    response.status_code = 200
    response.json.return_value = payload
    return response


def test_openweather_provider_success(provider, session, sample_openweather_response):
    """Test successful API call and parsing."""
    session.get.return_value = _ok(sample_openweather_response)

    record = provider.get_current(CITIES[0])

    assert isinstance(record, WeatherRecord)
    assert record.id == "new-york"
    assert record.name == "New York"
    assert record.abbreviation == "NYC"
    assert record.temperature == 19
    assert record.feels_like == 18
    assert record.humidity == 89
    assert record.pressure == 1014
    assert record.wind_speed == 10
    assert record.visibility == 10
    assert record.uv_index == 0
    assert record.condition == "drizzle"
    assert record.description == "light rain"
    assert record.last_updated == datetime.fromtimestamp(1684929490, tz=timezone.utc)


def test_openweather_provider_request_params(provider, session, sample_openweather_response):
    """Test that the request is keyed by the city's coordinates."""
    session.get.return_value = _ok(sample_openweather_response)

    provider.get_current(CITIES[1])

    args, kwargs = session.get.call_args
    assert args[0] == OpenWeatherProvider.BASE_URL
    assert kwargs["params"]["lat"] == 51.5074
    assert kwargs["params"]["lon"] == -0.1278
    assert kwargs["params"]["appid"] == "test_key"
    assert kwargs["params"]["units"] == "metric"
    assert kwargs["timeout"] is None


@pytest.mark.parametrize("speed_mps,expected_kmh", [
    (2.78, 10),
    (0.0, 0),
    (1.0, 4),
    (5.5, 20),
    (13.9, 50),
])
def test_openweather_provider_wind_conversion(provider, session, sample_openweather_response, speed_mps, expected_kmh):
    """Test m/s to km/h conversion."""
    sample_openweather_response["wind"]["speed"] = speed_mps
    session.get.return_value = _ok(sample_openweather_response)

    assert provider.get_current(CITIES[0]).wind_speed == expected_kmh


def test_openweather_provider_missing_wind(provider, session, sample_openweather_response):
    """Test parsing response without wind data."""
    del sample_openweather_response["wind"]
    session.get.return_value = _ok(sample_openweather_response)

    assert provider.get_current(CITIES[0]).wind_speed == 0


def test_openweather_provider_http_error(provider, session):
    """Test handling of HTTP errors."""
    response = Mock()
    response.ok = False
    response.status_code = 401
    response.json.return_value = {
        "cod": 401,
        "message": "Invalid API key"
    }
    session.get.return_value = response

    with pytest.raises(WeatherProviderError) as exc_info:
        provider.get_current(CITIES[0])

    assert "401" in str(exc_info.value)
    assert "Invalid API key" in str(exc_info.value)


def test_openweather_provider_non_json_error(provider, session):
    """Test handling of non-JSON error bodies."""
    response = Mock()
    response.ok = False
    response.status_code = 502
    response.text = "Bad Gateway"
    response.json.side_effect = ValueError("No JSON")
    session.get.return_value = response

    with pytest.raises(WeatherProviderError) as exc_info:
        provider.get_current(CITIES[0])

    assert "HTTP 502" in str(exc_info.value)


def test_openweather_provider_network_error(provider, session):
    """Test handling of network errors."""
    session.get.side_effect = requests.exceptions.ConnectionError("Connection timeout")

    with pytest.raises(WeatherProviderError) as exc_info:
        provider.get_current(CITIES[0])

    assert "Network error" in str(exc_info.value)


def test_openweather_provider_missing_main(provider, session):
    """Test handling of missing main block."""
    session.get.return_value = _ok({
        "weather": [{"main": "Clear", "description": "clear sky"}],
        "dt": 1684929490,
    })

    with pytest.raises(WeatherProviderError) as exc_info:
        provider.get_current(CITIES[0])

    assert "missing 'main' block" in str(exc_info.value)


def test_openweather_provider_missing_weather(provider, session):
    """Test handling of missing 'weather' array."""
    session.get.return_value = _ok({
        "main": {"temp": 20.0},
        "dt": 1684929490,
        "weather": []
    })

    with pytest.raises(WeatherProviderError) as exc_info:
        provider.get_current(CITIES[0])

    assert "missing 'weather' array" in str(exc_info.value)


def test_openweather_provider_incomplete_main(provider, session):
    """Test handling of a main block without required fields."""
    session.get.return_value = _ok({
        "weather": [{"main": "Clear", "description": "clear sky"}],
        "main": {"temp": 20.0},
        "dt": 1684929490,
    })

    with pytest.raises(WeatherProviderError) as exc_info:
        provider.get_current(CITIES[0])

    assert "Failed to parse response" in str(exc_info.value)
