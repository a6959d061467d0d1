from pydantic import Field, field_validator
from typing import Optional

from .base import ClubModel


class Tee(ClubModel):
    """A rated tee box: course rating and slope for one set of markers."""
    name: str = Field(..., min_length=1)  # "White", "Yellow", "Blue", "Red"
    course_rating: float = Field(..., ge=55.0, le=85.0)
    slope_rating: int = Field(..., ge=55, le=155)
    course_id: Optional[str] = None

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Tee name is required")
        return v

    @field_validator('course_rating')
    @classmethod
    def one_decimal(cls, v):
        return round(v, 1)
