from datetime import datetime
from pydantic import Field, model_validator
from typing import List, Literal, Optional

from .base import ClubModel

Winner = Literal["player1", "player2", "tie"]


class MatchPlayer(ClubModel):
    """One side of a head-to-head match."""
    name: str = Field(..., min_length=1)
    team_name: str = Field(..., min_length=1)
    handicap: float = 0  # playing handicap for this match
    score: int = 0       # match total including the hole-win bonus
    hole_wins: int = Field(0, ge=0)
    putts: int = Field(0, ge=0)  # one-putt greens


class HoleResult(ClubModel):
    """Scores for one hole of a match. A raw score of 0 means not entered yet."""
    hole: int = Field(..., ge=1, le=18)
    handicap: int = Field(..., ge=1, le=18)
    par: int = Field(4, ge=3, le=6)
    pace: int = Field(15, ge=0)  # minutes allotted to play the hole
    player1_score: int = Field(0, ge=0, le=20)
    player2_score: int = Field(0, ge=0, le=20)
    player1_putt: bool = False
    player2_putt: bool = False
    player1_strokes: int = Field(0, ge=0)
    player2_strokes: int = Field(0, ge=0)
    player1_net: int = 0
    player2_net: int = 0
    winner: Winner = "tie"

    @property
    def is_played(self) -> bool:
        return self.player1_score > 0 and self.player2_score > 0


class Match(ClubModel):
    """Two players, their tee time and starting hole, and the hole-by-hole card."""
    id: Optional[str] = None
    event_id: Optional[str] = None
    player1: MatchPlayer
    player2: MatchPlayer
    tee_time: Optional[datetime] = None
    tee: int = Field(1, ge=1)  # starting hole
    holes: List[HoleResult] = Field(default_factory=list)
    completed: bool = False

    @model_validator(mode='after')
    def validate_opponents(self):
        if self.player1.name == self.player2.name:
            raise ValueError("A match needs two different players")
        return self

    def get_hole(self, number: int) -> Optional[HoleResult]:
        for hole in self.holes:
            if hole.hole == number:
                return hole
        return None

    @property
    def holes_played(self) -> int:
        return sum(1 for h in self.holes if h.is_played)

    @property
    def round_minutes(self) -> int:
        """Total pace-of-play allowance for the card."""
        return sum(h.pace for h in self.holes)
