from weather_lookup.ui.city_weather_view import (
    CityWeatherView,
    UnboundCityWeatherView,
    compose_city_weather_view,
)
from weather_lookup.ui.screen import Screen
from weather_lookup.ui.widgets import NoticePresenter, ResultLabel, TextField

__all__ = [
    "CityWeatherView",
    "NoticePresenter",
    "ResultLabel",
    "Screen",
    "TextField",
    "UnboundCityWeatherView",
    "compose_city_weather_view",
]
