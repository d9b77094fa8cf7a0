from weather_lookup.api.v1.screen.screen_routes import router as screen_router

__all__ = ["screen_router"]
