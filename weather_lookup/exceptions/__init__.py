from weather_lookup.exceptions.base import WeatherLookupError
from weather_lookup.exceptions.lookup import (
    DecodeFailureError,
    EmptyInputError,
    LookupServiceError,
    MalformedURLError,
    NetworkFailureError,
    ShapeMismatchError,
    WeatherAPIKeyError,
)
from weather_lookup.exceptions.ui import MissingUIBindingError

__all__ = [
    "DecodeFailureError",
    "EmptyInputError",
    "LookupServiceError",
    "MalformedURLError",
    "MissingUIBindingError",
    "NetworkFailureError",
    "ShapeMismatchError",
    "WeatherAPIKeyError",
    "WeatherLookupError",
]
