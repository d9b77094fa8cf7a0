class WeatherLookupError(Exception):
    """Base exception for all weather lookup errors."""

    pass
