from typing import Optional

from pydantic import BaseModel, Field


class SubmitRequest(BaseModel):
    city: Optional[str] = Field(None, description="Text to place in the city field before submitting")
