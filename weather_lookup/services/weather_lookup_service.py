import asyncio
import itertools
from typing import Callable, Optional, Set

import httpx
import structlog
from pydantic import ValidationError

from weather_lookup.config.config import Config, config
from weather_lookup.exceptions.lookup import (
    DecodeFailureError,
    EmptyInputError,
    MalformedURLError,
    NetworkFailureError,
    ShapeMismatchError,
)
from weather_lookup.models.lookup import (
    CITY_NOT_FOUND_MESSAGE,
    EMPTY_INPUT_MESSAGE,
    FETCH_FAILED_MESSAGE,
    CityQuery,
    DisplayResult,
    WeatherResponse,
)

logger = structlog.get_logger(__name__)

ResultCallback = Callable[[DisplayResult], None]


class WeatherLookupService:
    """
    Looks up the current weather description for a city on OpenWeatherMap.

    ``lookup`` is called from the event loop that owns the screen. Input and
    URL problems are answered synchronously; everything else happens in a
    task, and a description is handed back to that same loop. Transport,
    decode and payload shape failures are logged and, unless
    ``surface_fetch_failures`` is set, never reach the caller.
    """

    def __init__(
        self,
        settings: Optional[Config] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the lookup service.

        Args:
            settings: Configuration to read provider and behaviour flags from
            transport: Optional httpx transport used instead of the network
        """
        settings = settings or config

        self.base_url = settings.openweather_base_url
        self.api_key = settings.openweather_api_key
        self.country_code = settings.openweather_country_code
        self.surface_fetch_failures = settings.surface_fetch_failures
        self.discard_stale_responses = settings.discard_stale_responses

        self._transport = transport
        self._sequence = itertools.count(1)
        self._latest_sequence = 0
        self._in_flight: Set[asyncio.Task] = set()

    @property
    def in_flight(self) -> int:
        """Number of dispatched requests that have not finished yet."""
        return len(self._in_flight)

    def build_url(self, query: CityQuery) -> httpx.URL:
        """
        Build the current weather request URL for a city.

        Args:
            query: Validated city query

        Returns:
            Request URL with the encoded city, country code and API key

        Raises:
            MalformedURLError: If the resulting URL cannot be parsed
        """
        raw_url = (
            f"{self.base_url}?q={query.encoded},{self.country_code}&appid={self.api_key}"
        )
        try:
            return httpx.URL(raw_url)
        except httpx.InvalidURL as e:
            raise MalformedURLError(f"Could not build request URL: {str(e)}") from e

    def lookup(self, city_name: Optional[str], callback: ResultCallback) -> Optional[asyncio.Task]:
        """
        Start a weather lookup for a city.

        Args:
            city_name: Raw text from the city field
            callback: Receives the text to show; always called on this loop

        Returns:
            The task performing the request, or None when the lookup was
            answered synchronously
        """
        sequence = next(self._sequence)
        self._latest_sequence = sequence

        try:
            query = CityQuery.from_text(city_name)
        except EmptyInputError:
            logger.info("Lookup rejected empty city name", sequence=sequence)
            callback(EMPTY_INPUT_MESSAGE)
            return None

        try:
            url = self.build_url(query)
        except MalformedURLError as e:
            logger.warning("Lookup rejected malformed URL", city=query.text, error=str(e))
            callback(CITY_NOT_FOUND_MESSAGE)
            return None

        loop = asyncio.get_running_loop()
        task = loop.create_task(self._fetch(url, query, sequence, callback, loop))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

        logger.info("Weather lookup dispatched", city=query.text, sequence=sequence)
        return task

    async def _fetch(
        self,
        url: httpx.URL,
        query: CityQuery,
        sequence: int,
        callback: ResultCallback,
        loop: asyncio.AbstractEventLoop,
    ) -> Optional[str]:
        try:
            description = await self._request_description(url, query)
        except (NetworkFailureError, DecodeFailureError, ShapeMismatchError) as e:
            logger.error(
                "Weather lookup failed",
                city=query.text,
                sequence=sequence,
                error_type=type(e).__name__,
                error=str(e),
            )
            if self.surface_fetch_failures:
                loop.call_soon_threadsafe(self._deliver, callback, FETCH_FAILED_MESSAGE, sequence)
            return None

        loop.call_soon_threadsafe(self._deliver, callback, description, sequence)
        return description

    async def _request_description(self, url: httpx.URL, query: CityQuery) -> str:
        """
        Fetch the provider payload and pull out ``weather[0].description``.

        Raises:
            NetworkFailureError: If the request could not be completed
            DecodeFailureError: If the body is not JSON
            ShapeMismatchError: If the JSON has no usable description
        """
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(url)
        except httpx.RequestError as e:
            raise NetworkFailureError(f"Request failed: {str(e)}") from e

        logger.debug(
            "Received weather response", city=query.text, status_code=response.status_code
        )

        try:
            payload = response.json()
        except (ValueError, RecursionError) as e:
            raise DecodeFailureError(f"JSON processing failed: {str(e)}") from e

        try:
            weather = WeatherResponse.model_validate(payload)
            description = weather.description
        except ValidationError as e:
            raise ShapeMismatchError(f"Unexpected weather payload: {str(e)}") from e

        logger.debug("Parsed weather response", city=query.text, provider_name=weather.name)
        return description

    def _deliver(self, callback: ResultCallback, result: DisplayResult, sequence: int):
        if self.discard_stale_responses and sequence != self._latest_sequence:
            logger.info(
                "Discarding stale weather result",
                sequence=sequence,
                latest_sequence=self._latest_sequence,
            )
            return
        callback(result)


weather_lookup_service = WeatherLookupService()
