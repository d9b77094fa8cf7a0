from weather_lookup.models.screen.screen_state import ScreenState
from weather_lookup.models.screen.submit_request import SubmitRequest

__all__ = ["ScreenState", "SubmitRequest"]
