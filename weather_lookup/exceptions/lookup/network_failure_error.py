from weather_lookup.exceptions.lookup.lookup_error import LookupServiceError


class NetworkFailureError(LookupServiceError):
    """Exception for transport-level failures talking to the provider."""

    pass
