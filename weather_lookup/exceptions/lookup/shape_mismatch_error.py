from weather_lookup.exceptions.lookup.lookup_error import LookupServiceError


class ShapeMismatchError(LookupServiceError):
    """Exception for a JSON payload without a usable weather[0].description."""

    pass
