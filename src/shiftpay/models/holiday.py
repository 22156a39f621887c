"""Holiday entry as returned by a holiday provider."""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictInt


class HolidayDate(BaseModel):
    """Numeric fields are strict: "5", 5.0 or True are rejected, not coerced."""

    year: StrictInt
    month: StrictInt = Field(ge=1, le=12)
    day: StrictInt = Field(ge=1, le=31)
    name: str = ""
