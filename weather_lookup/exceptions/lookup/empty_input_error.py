from weather_lookup.exceptions.lookup.lookup_error import LookupServiceError


class EmptyInputError(LookupServiceError):
    """Exception for an empty or whitespace-only city name."""

    pass
