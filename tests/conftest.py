from typing import Callable, Optional

import httpx
import pytest

from tests.helpers import RecordingTransport
from weather_lookup.config.config import Config
from weather_lookup.services.weather_lookup_service import WeatherLookupService


@pytest.fixture
def test_settings():
    """Settings isolated from the environment and any .env file."""
    return Config(
        _env_file=None,
        openweather_api_key="test-weather-key",
        openweather_base_url="https://api.openweathermap.org/data/2.5/weather",
        openweather_country_code="uk",
        build_profile="debug",
        surface_fetch_failures=False,
        discard_stale_responses=False,
        log_level="DEBUG",
        log_format="text",
    )


@pytest.fixture
def light_rain_payload():
    """Trimmed OpenWeatherMap current weather payload for London."""
    return {
        "coord": {"lon": -0.1278, "lat": 51.5074},
        "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
        "base": "stations",
        "main": {"temp": 285.4, "humidity": 81},
        "name": "London",
        "cod": 200,
    }


@pytest.fixture
def make_service(test_settings):
    """Build a lookup service whose requests go to the given handler."""

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        settings: Optional[Config] = None,
        **overrides,
    ):
        settings = settings or test_settings.model_copy(update=overrides)
        transport = RecordingTransport(handler)
        return WeatherLookupService(settings=settings, transport=transport), transport

    return _make
