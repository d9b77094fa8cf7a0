from fastapi import APIRouter

from weather_lookup.api.v1.screen import screen_router

# Create main router
router = APIRouter(prefix="/api/v1")

# Include all sub-routers
router.include_router(screen_router)
