import asyncio
from typing import Optional, Union

import structlog

from weather_lookup.config.config import config
from weather_lookup.exceptions.ui import MissingUIBindingError
from weather_lookup.models.lookup import MISSING_BINDINGS_NOTICE
from weather_lookup.services.weather_lookup_service import (
    WeatherLookupService,
    weather_lookup_service,
)
from weather_lookup.ui.widgets import NoticePresenter, ResultLabel, TextField

logger = structlog.get_logger(__name__)


class CityWeatherView:
    """The weather screen with every binding in place."""

    def __init__(
        self,
        result_label: ResultLabel,
        city_field: TextField,
        lookup: WeatherLookupService,
    ):
        self.result_label = result_label
        self.city_field = city_field
        self.lookup = lookup

    def submit(self) -> Optional[asyncio.Task]:
        """Look up the weather for the city currently in the text field."""
        return self.lookup.lookup(self.city_field.text, self.show_result)

    def show_result(self, text: str):
        self.result_label.text = text


class UnboundCityWeatherView:
    """Stand-in used by release builds when a binding is missing."""

    def __init__(self, presenter: NoticePresenter):
        self.presenter = presenter

    def submit(self) -> None:
        self.presenter.present(MISSING_BINDINGS_NOTICE)
        return None


def compose_city_weather_view(
    result_label: Optional[ResultLabel],
    city_field: Optional[TextField],
    presenter: NoticePresenter,
    lookup: Optional[WeatherLookupService] = None,
    debug_build: Optional[bool] = None,
) -> Union[CityWeatherView, UnboundCityWeatherView]:
    """
    Wire the weather screen, checking its bindings once.

    Args:
        result_label: Label that receives results
        city_field: Field the city name is read from
        presenter: Where user-facing notices go
        lookup: Lookup service (defaults to the shared instance)
        debug_build: Override for the configured build profile

    Returns:
        A working view, or in release builds with a missing binding a view
        whose submit only presents a notice

    Raises:
        MissingUIBindingError: In debug builds when a binding is missing
    """
    if debug_build is None:
        debug_build = config.is_debug_build

    missing = [
        name
        for name, binding in (("result_label", result_label), ("city_field", city_field))
        if binding is None
    ]
    if missing:
        if debug_build:
            raise MissingUIBindingError(
                f"All UI bindings need to be hooked up, missing: {', '.join(missing)}"
            )
        logger.error("Weather screen composed without bindings", missing=missing)
        return UnboundCityWeatherView(presenter)

    return CityWeatherView(result_label, city_field, lookup or weather_lookup_service)
