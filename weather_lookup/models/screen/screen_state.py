from typing import Optional

from pydantic import BaseModel, Field


class ScreenState(BaseModel):
    """Snapshot of the single weather screen."""

    city: Optional[str] = Field(None, description="Current city field text")
    result: str = Field(..., description="Current result label text")
    notice: Optional[str] = Field(None, description="Last notice presented to the user")
    in_flight: int = Field(..., ge=0, description="Lookups dispatched but not yet finished")
