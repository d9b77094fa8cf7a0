from weather_lookup.exceptions.lookup.api_key_error import WeatherAPIKeyError
from weather_lookup.exceptions.lookup.decode_failure_error import DecodeFailureError
from weather_lookup.exceptions.lookup.empty_input_error import EmptyInputError
from weather_lookup.exceptions.lookup.lookup_error import LookupServiceError
from weather_lookup.exceptions.lookup.malformed_url_error import MalformedURLError
from weather_lookup.exceptions.lookup.network_failure_error import NetworkFailureError
from weather_lookup.exceptions.lookup.shape_mismatch_error import ShapeMismatchError

__all__ = [
    "DecodeFailureError",
    "EmptyInputError",
    "LookupServiceError",
    "MalformedURLError",
    "NetworkFailureError",
    "ShapeMismatchError",
    "WeatherAPIKeyError",
]
