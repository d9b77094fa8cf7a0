from typing import Optional, Union

from weather_lookup.models.screen import ScreenState
from weather_lookup.services.weather_lookup_service import (
    WeatherLookupService,
    weather_lookup_service,
)
from weather_lookup.ui.city_weather_view import (
    CityWeatherView,
    UnboundCityWeatherView,
    compose_city_weather_view,
)
from weather_lookup.ui.widgets import NoticePresenter, ResultLabel, TextField


class Screen:
    """The app's only screen: a city field, a result label and a submit action."""

    def __init__(self, lookup: Optional[WeatherLookupService] = None):
        self.lookup = lookup or weather_lookup_service
        self.city_field = TextField()
        self.result_label = ResultLabel()
        self.presenter = NoticePresenter()
        self.view: Union[CityWeatherView, UnboundCityWeatherView] = compose_city_weather_view(
            self.result_label, self.city_field, self.presenter, lookup=self.lookup
        )

    def submit(self, city: Optional[str]):
        self.city_field.text = city
        return self.view.submit()

    def state(self) -> ScreenState:
        return ScreenState(
            city=self.city_field.text,
            result=self.result_label.text,
            notice=self.presenter.latest,
            in_flight=self.lookup.in_flight,
        )
