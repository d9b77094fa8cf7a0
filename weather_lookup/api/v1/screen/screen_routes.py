import structlog
from fastapi import APIRouter, Depends, HTTPException, Request, status

from weather_lookup.models.screen import ScreenState, SubmitRequest
from weather_lookup.ui.screen import Screen

logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(prefix="/screen", tags=["Screen"])


def get_screen(request: Request) -> Screen:
    """Return the screen composed at startup."""
    screen = getattr(request.app.state, "screen", None)
    if screen is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Weather screen is not ready",
        )
    return screen


@router.get("", response_model=ScreenState, summary="Get Screen State")
async def get_screen_state(screen: Screen = Depends(get_screen)):
    """Current city field text, result label text and latest notice."""
    return screen.state()


@router.post(
    "/submit",
    response_model=ScreenState,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Submit City",
)
async def submit_city(body: SubmitRequest, screen: Screen = Depends(get_screen)):
    """
    Put a city name in the text field and press submit.

    Empty input is answered straight away in the returned state. Otherwise
    the lookup runs in the background and the result label changes once the
    provider answers; poll ``GET /api/v1/screen`` to see it.

    Args:
        body: City text to submit.
        screen: The composed weather screen.

    Returns:
        Screen state right after the submit.
    """
    logger.info("API request: Submit city", city=body.city)
    screen.submit(body.city)
    return screen.state()
