import asyncio
from typing import Any, Callable, List

import httpx

from weather_lookup.services.weather_lookup_service import WeatherLookupService


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def json_response(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status_code, json=payload)


async def wait_for_idle(service: WeatherLookupService, attempts: int = 100):
    """Let in-flight lookups finish and their results reach the loop."""
    for _ in range(attempts):
        if service.in_flight == 0:
            break
        await asyncio.sleep(0.01)
    await asyncio.sleep(0)
