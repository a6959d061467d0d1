from datetime import datetime
from pydantic import Field
from typing import List, Optional

from .base import ClubModel
from .course import Course
from .team import Team


class Event(ClubModel):
    """One playing day: a course snapshot, an allowance and the teams entered."""
    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    date: Optional[datetime] = None
    course: Optional[Course] = None
    handicap_allowance: float = Field(100, ge=0, le=100)
    teams: List[Team] = Field(default_factory=list)

    def get_team(self, name: str) -> Optional[Team]:
        for team in self.teams:
            if team.name == name:
                return team
        return None


class Tournament(ClubModel):
    """A series of events whose standings are summed."""
    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    event_ids: List[str] = Field(default_factory=list)
