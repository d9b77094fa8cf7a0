from weather_lookup.exceptions.base import WeatherLookupError


class LookupServiceError(WeatherLookupError):
    """Base exception for errors raised while looking up weather for a city."""

    pass
