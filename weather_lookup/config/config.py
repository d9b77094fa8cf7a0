from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_lookup.exceptions.lookup.api_key_error import WeatherAPIKeyError


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    Every field has a default so the app runs out of the box: the provider
    key and country code are fixed constants that can still be overridden
    per environment.
    """

    # OpenWeatherMap Configuration
    openweather_api_key: str = Field(
        default="08e64df2d3f3bc0822de1f0fc22fcb2d",
        description="OpenWeatherMap API key embedded in every request",
    )
    openweather_base_url: str = Field(
        default="https://api.openweathermap.org/data/2.5/weather",
        description="OpenWeatherMap current weather endpoint",
    )
    openweather_country_code: str = Field(
        default="uk", description="Country code appended to every city query"
    )

    # Screen Behaviour
    build_profile: str = Field(
        default="debug", description="Build profile (debug/release) for UI binding checks"
    )
    surface_fetch_failures: bool = Field(
        default=False,
        description="Show a message when the request, decode or payload shape fails",
    )
    discard_stale_responses: bool = Field(
        default=False, description="Only let the most recent lookup update the screen"
    )

    # API Configuration
    api_host: str = Field(default="127.0.0.1", description="FastAPI host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="FastAPI port")

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json/text)")

    @field_validator("openweather_api_key")
    def validate_openweather_api_key(cls, v):
        if not v:
            raise WeatherAPIKeyError("Weather API key is required")
        return v

    @field_validator("build_profile")
    def validate_build_profile(cls, v):
        """Validate build profile."""
        valid_profiles = ["debug", "release"]
        if v.lower() not in valid_profiles:
            raise ValueError(f"Invalid build profile: {v}. Must be one of {valid_profiles}")
        return v.lower()

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        valid_formats = ["json", "text"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {valid_formats}")
        return v.lower()

    @property
    def is_debug_build(self) -> bool:
        """Whether missing UI bindings should abort instead of showing a notice."""
        return self.build_profile == "debug"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


config = Config()
