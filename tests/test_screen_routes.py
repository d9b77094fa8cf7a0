from unittest.mock import MagicMock

import httpx
import pytest

from main import create_app
from tests.helpers import json_response, wait_for_idle
from weather_lookup.models.lookup import EMPTY_INPUT_MESSAGE
from weather_lookup.ui.screen import Screen


def make_client(app, raise_app_exceptions: bool = True) -> httpx.AsyncClient:
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
    return httpx.AsyncClient(transport=transport, base_url="http://test")


class TestScreenRoutes:
    """Test cases for the screen API."""

    @pytest.mark.asyncio
    async def test_submit_empty_city(self, make_service):
        """Test that an empty submit returns the prompt in the same response."""
        service, transport = make_service(json_response({}))
        app = create_app()
        app.state.screen = Screen(lookup=service)

        async with make_client(app) as client:
            response = await client.post("/api/v1/screen/submit", json={"city": "  "})

        assert response.status_code == 202
        body = response.json()
        assert body["result"] == EMPTY_INPUT_MESSAGE
        assert body["city"] == "  "
        assert body["in_flight"] == 0
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_submit_city_then_poll(self, make_service, light_rain_payload):
        """Test that the label shows the description once the lookup completes."""
        service, transport = make_service(json_response(light_rain_payload))
        app = create_app()
        app.state.screen = Screen(lookup=service)

        async with make_client(app) as client:
            response = await client.post("/api/v1/screen/submit", json={"city": "London"})

            assert response.status_code == 202
            assert response.json()["result"] == ""

            await wait_for_idle(service)
            state = await client.get("/api/v1/screen")

        assert state.status_code == 200
        assert state.json() == {
            "city": "London",
            "result": "light rain",
            "notice": None,
            "in_flight": 0,
        }
        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_screen_not_ready(self):
        """Test that the screen API answers 503 before the screen is composed."""
        app = create_app()

        async with make_client(app) as client:
            response = await client.get("/api/v1/screen")

        assert response.status_code == 503
        assert response.json()["error"] == "Weather screen is not ready"


    @pytest.mark.asyncio
    async def test_unexpected_error_returns_json_500(self):
        """Test that an unhandled error becomes the generic JSON 500 body."""
        app = create_app()
        app.state.screen = MagicMock()
        app.state.screen.state.side_effect = RuntimeError("label exploded")

        async with make_client(app, raise_app_exceptions=False) as client:
            response = await client.get("/api/v1/screen")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Internal server error"
        assert body["message"] == "An unexpected error occurred. Please try again later."
        assert "label exploded" not in response.text


class TestServiceRoutes:
    """Test cases for health and root endpoints."""

    @pytest.mark.asyncio
    async def test_health(self):
        """Test the health check endpoint."""
        async with make_client(create_app()) as client:
            response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["message"] == "Weather Lookup API is running"

    @pytest.mark.asyncio
    async def test_root(self):
        """Test the root endpoint."""
        async with make_client(create_app()) as client:
            response = await client.get("/")

        assert response.status_code == 200
        assert response.json()["screen"] == "/api/v1/screen"
