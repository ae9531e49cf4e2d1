"""Tests for the command line entry points."""
import pytest
from unittest.mock import Mock, patch
from cities import CITIES
from fallback import city_fallback
import main


def test_parse_args_serve():
    """Test serve defaults."""
    args = main.parse_args(["serve"])

    assert args.command == "serve"
    assert args.port == 5000
    assert args.cache_ttl == 300
    assert args.timeout is None


def test_parse_args_show():
    """Test show defaults."""
    args = main.parse_args(["show", "--once"])

    assert args.command == "show"
    assert args.interval == 300
    assert args.once is True


def test_load_api_key_missing(monkeypatch):
    """Test that a missing key stops the program."""
    monkeypatch.delenv("WEATHER_API_KEY", raising=False)
    with patch("main.load_dotenv"):
        with pytest.raises(SystemExit):
            main.load_api_key()


def test_load_api_key(monkeypatch):
    """Test reading the key from the environment."""
    monkeypatch.setenv("WEATHER_API_KEY", "abc")
    with patch("main.load_dotenv"):
        assert main.load_api_key() == "abc"


def test_build_weather_service(monkeypatch):
    """Test the service is wired with CLI options."""
    args = main.parse_args(["--timeout", "5", "serve", "--cache-ttl", "60", "--workers", "4"])

    service = main.build_weather_service("abc", args)

    assert service.cache_ttl_seconds == 60
    assert service.max_workers == 4
    assert service.provider.timeout == 5
    assert len(service.cities) == 12


def test_show_once_renders_png(tmp_path):
    """Test a single dashboard render."""
    output = tmp_path / "dashboard.png"
    args = main.parse_args(["show", "--once", "--width", "240", "--height", "60",
                            "--output", str(output), "--url", "http://test/api/weather"])
    client = Mock()
    client.fetch.return_value = [city_fallback(city) for city in CITIES]

    with patch("main.WeatherClient", return_value=client), patch("main.load_dotenv"):
        main.show(args)

    client.fetch.assert_called_once()
    assert output.exists()
