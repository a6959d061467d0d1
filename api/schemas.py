"""API request and response models.

Form inputs arrive as strings; empty or non-numeric scores and handicaps are
read as 0 here, before they reach the scoring engine.
"""

import math
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import List, Literal, Optional, Union

from models import Event, HoleResult, Match, Player, Team


def coerce_number(value, cast):
    if value is None:
        return cast(0)
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
    try:
        number = float(value)
    except (TypeError, ValueError):
        return cast(0)
    if math.isnan(number) or math.isinf(number):
        return cast(0)
    return cast(number)


class CourseHandicapRequest(BaseModel):
    handicap_index: float
    slope: float
    course_rating: float
    par: int
    allowance_percent: Optional[float] = Field(None, ge=0, le=100)

    @field_validator('handicap_index', mode='before')
    @classmethod
    def coerce_index(cls, v):
        return coerce_number(v, float)


class CourseHandicapResponse(BaseModel):
    playing_handicap: int


class StrokeAllocationResponse(BaseModel):
    strokes1: int
    strokes2: int


class HoleScoreRequest(BaseModel):
    eff1: int = 0
    raw1: int = 0
    one_putt1: bool = False
    eff2: int = 0
    raw2: int = 0
    one_putt2: bool = False
    par: int = 4

    @field_validator('eff1', 'raw1', 'eff2', 'raw2', mode='before')
    @classmethod
    def coerce_strokes(cls, v):
        return coerce_number(v, int)


class HoleScoreResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    net1: int
    net2: int
    winner: Literal["player1", "player2", "tie"]


class MatchTotalsRequest(BaseModel):
    holes: List[HoleResult]


class MatchTotalsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total1: int
    total2: int
    wins1: int
    wins2: int


class HoleEditRequest(BaseModel):
    """One keystroke or checkbox change on a match card."""
    match: Match
    hole_number: int
    player1_score: Optional[int] = None
    player2_score: Optional[int] = None
    player1_putt: Optional[bool] = None
    player2_putt: Optional[bool] = None

    @field_validator('player1_score', 'player2_score', mode='before')
    @classmethod
    def coerce_scores(cls, v):
        if v is None:
            return None
        return coerce_number(v, int)


class StandingEntry(BaseModel):
    name: str
    score: Union[int, float]


class RankedEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    score: Union[int, float]
    rank: int


class EventStandingsRequest(BaseModel):
    matches: List[Match] = Field(default_factory=list)
    teams: List[Team] = Field(default_factory=list)


class TeamStandingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    team: str
    team_id: Optional[str] = None
    total_score: int
    match_count: int
    rank: int


class EventResults(BaseModel):
    event_id: str
    teams: List[Team] = Field(default_factory=list)
    matches: List[Match] = Field(default_factory=list)


class TournamentStandingsRequest(BaseModel):
    events: List[EventResults] = Field(default_factory=list)

    @model_validator(mode='after')
    def unique_event_ids(self):
        ids = [e.event_id for e in self.events]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate event_id: {', '.join(duplicates)}")
        return self


class AggregateStandingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    total_score: int
    match_count: int
    event_count: int
    rank: int


class PlayerStandingResponse(AggregateStandingResponse):
    team_name: str


class MatchProgressResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    completed: int
    registered: int
    percent: int


class TournamentStandingsResponse(BaseModel):
    teams: List[AggregateStandingResponse]
    players: List[PlayerStandingResponse]
    progress: MatchProgressResponse


class HandicapRefreshRequest(BaseModel):
    event: Event
    players: List[Player]


class HandicapChange(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    team_name: str
    player_id: str
    cached: Optional[int] = None
    recomputed: int


class HandicapRefreshResponse(BaseModel):
    event: Event
    changes: List[HandicapChange]


class PairingsRequest(BaseModel):
    event: Event
    players: List[Player]
    tee_time: Optional[datetime] = None
    seed: Optional[int] = None
