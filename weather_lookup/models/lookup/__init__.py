from weather_lookup.models.lookup.city_query import CityQuery
from weather_lookup.models.lookup.display_result import (
    CITY_NOT_FOUND_MESSAGE,
    EMPTY_INPUT_MESSAGE,
    FETCH_FAILED_MESSAGE,
    MISSING_BINDINGS_NOTICE,
    DisplayResult,
)
from weather_lookup.models.lookup.weather_response import WeatherCondition, WeatherResponse

__all__ = [
    "CITY_NOT_FOUND_MESSAGE",
    "CityQuery",
    "DisplayResult",
    "EMPTY_INPUT_MESSAGE",
    "FETCH_FAILED_MESSAGE",
    "MISSING_BINDINGS_NOTICE",
    "WeatherCondition",
    "WeatherResponse",
]
