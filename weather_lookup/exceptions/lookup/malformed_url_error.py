from weather_lookup.exceptions.lookup.lookup_error import LookupServiceError


class MalformedURLError(LookupServiceError):
    """Exception for a request URL that could not be built from the city name."""

    pass
