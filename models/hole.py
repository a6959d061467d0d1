from pydantic import Field
from typing import Optional

from .base import ClubModel


class Hole(ClubModel):
    """A single hole on a course.

    ``handicap`` is the stroke index: 1 is the hardest hole and receives
    handicap strokes first.
    """
    number: int = Field(..., ge=1, le=18)
    par: int = Field(..., ge=3, le=6)
    handicap: int = Field(..., ge=1, le=18)
    course_id: Optional[str] = None
