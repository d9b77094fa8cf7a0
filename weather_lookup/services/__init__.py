from weather_lookup.services.weather_lookup_service import (
    WeatherLookupService,
    weather_lookup_service,
)

__all__ = ["WeatherLookupService", "weather_lookup_service"]
