from typing import Optional
from urllib.parse import quote

from pydantic import BaseModel, Field

from weather_lookup.exceptions.lookup import EmptyInputError


class CityQuery(BaseModel):
    """A city name exactly as the user typed it."""

    text: str = Field(..., description="Raw city name from the text field")

    @classmethod
    def from_text(cls, text: Optional[str]) -> "CityQuery":
        """
        Build a query from raw field text.

        Args:
            text: Current contents of the city text field (may be None)

        Returns:
            CityQuery wrapping the untrimmed text

        Raises:
            EmptyInputError: If the text is missing, empty or only whitespace
        """
        if text is None or not text.strip():
            raise EmptyInputError("City name is empty")
        return cls(text=text)

    @property
    def encoded(self) -> str:
        """Percent-encoded city name, safe to embed in a query string."""
        return quote(self.text, safe="")
