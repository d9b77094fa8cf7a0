from weather_lookup.exceptions.lookup.lookup_error import LookupServiceError


class WeatherAPIKeyError(LookupServiceError):
    """Exception for a missing OpenWeatherMap API key."""

    pass
