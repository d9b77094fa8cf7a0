from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class WeatherCondition(BaseModel):
    """The one part of a weather condition entry the screen shows."""

    model_config = ConfigDict(extra="ignore")

    description: StrictStr = Field(..., description="Detailed weather description")


class WeatherResponse(BaseModel):
    """
    OpenWeatherMap current weather payload, reduced to what is displayed.

    Only the first ``weather`` entry has to be a well-formed condition;
    later entries are never looked at.
    """

    model_config = ConfigDict(extra="ignore")

    weather: List[Any] = Field(..., min_length=1, description="Weather conditions")
    name: Optional[Any] = Field(None, description="City name resolved by the provider")

    @property
    def primary_condition(self) -> WeatherCondition:
        return WeatherCondition.model_validate(self.weather[0])

    @property
    def description(self) -> str:
        return self.primary_condition.description
