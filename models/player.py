from datetime import datetime
from pydantic import Field
from typing import Optional

from .base import ClubModel
from .course import Gender


class Player(ClubModel):
    """A club member and their portable Handicap Index."""
    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    handicap_index: float = Field(0.0, ge=-10, le=54)  # negative for plus handicaps
    gender: Gender = "Male"
    tee: Optional[str] = None  # preferred tee name
    created_at: Optional[datetime] = None
