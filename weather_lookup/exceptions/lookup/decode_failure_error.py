from weather_lookup.exceptions.lookup.lookup_error import LookupServiceError


class DecodeFailureError(LookupServiceError):
    """Exception for a provider response body that is not valid JSON."""

    pass
