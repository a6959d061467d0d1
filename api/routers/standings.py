"""Leaderboard endpoints."""

from fastapi import APIRouter
from typing import List
from api.schemas import (
    AggregateStandingResponse,
    EventStandingsRequest,
    MatchProgressResponse,
    PlayerStandingResponse,
    RankedEntryResponse,
    StandingEntry,
    TeamStandingResponse,
    TournamentStandingsRequest,
    TournamentStandingsResponse,
)
from scoring.standings import (
    match_progress,
    player_standings,
    ranked_standings,
    team_standings,
    tournament_team_standings,
)

router = APIRouter()


@router.post("/rank", response_model=List[RankedEntryResponse])
async def rank_entries(entries: List[StandingEntry]):
    """Competition ranks for entries already sorted by score."""
    return [RankedEntryResponse.model_validate(e) for e in ranked_standings(entries)]


@router.post("/event", response_model=List[TeamStandingResponse])
async def get_event_standings(req: EventStandingsRequest):
    return [
        TeamStandingResponse.model_validate(s)
        for s in team_standings(req.matches, req.teams)
    ]


@router.post("/tournament", response_model=TournamentStandingsResponse)
async def get_tournament_standings(req: TournamentStandingsRequest):
    per_event = [team_standings(e.matches, e.teams) for e in req.events]
    by_event = {e.event_id: e.matches for e in req.events}
    return TournamentStandingsResponse(
        teams=[AggregateStandingResponse.model_validate(s) for s in tournament_team_standings(per_event)],
        players=[PlayerStandingResponse.model_validate(s) for s in player_standings(by_event)],
        progress=MatchProgressResponse.model_validate(match_progress(by_event)),
    )
