from pydantic import Field
from typing import List, Optional

from .base import ClubModel


class TeamMember(ClubModel):
    """A player's seat on a team.

    ``handicap`` is a cached Playing Handicap. It goes stale when the player's
    index, the tee or the allowance changes; see
    ``scoring.handicap.refresh_playing_handicaps``.
    """
    player_id: str
    is_captain: bool = False
    handicap: Optional[int] = None
    tee: Optional[str] = None


class Team(ClubModel):
    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    members: List[TeamMember] = Field(default_factory=list)

    def captain(self) -> Optional[TeamMember]:
        for member in self.members:
            if member.is_captain:
                return member
        return None
