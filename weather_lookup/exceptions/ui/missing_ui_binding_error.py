from weather_lookup.exceptions.base import WeatherLookupError


class MissingUIBindingError(WeatherLookupError):
    """Exception for a screen composed without its text field or result label."""

    pass
