from .exceptions import HoleNotFoundError, InvalidHoleRankError, ScoringError
from .handicap import (
    HandicapRefresh,
    course_handicap,
    playing_handicap_for,
    refresh_playing_handicaps,
    round_half_up,
    stale_playing_handicaps,
)
from .holes import HoleOutcome, hole_net_score, score_hole
from .match import (
    MatchTotals,
    match_totals,
    new_match_holes,
    record_hole_score,
    score_match,
    total_strokes,
)
from .pairing import PairingEntry, event_entries, random_pairings
from .settings import ScoringSettings, load_settings
from .standings import (
    AggregateStanding,
    MatchProgress,
    PlayerStanding,
    RankedEntry,
    TeamStanding,
    competition_ranks,
    match_progress,
    player_standings,
    ranked_standings,
    team_standings,
    tournament_team_standings,
)
from .strokes import match_stroke_allocation, stroke_table

__all__ = [
    "ScoringError",
    "InvalidHoleRankError",
    "HoleNotFoundError",
    "course_handicap",
    "playing_handicap_for",
    "stale_playing_handicaps",
    "refresh_playing_handicaps",
    "HandicapRefresh",
    "round_half_up",
    "match_stroke_allocation",
    "stroke_table",
    "HoleOutcome",
    "hole_net_score",
    "score_hole",
    "MatchTotals",
    "match_totals",
    "new_match_holes",
    "score_match",
    "record_hole_score",
    "total_strokes",
    "PairingEntry",
    "event_entries",
    "random_pairings",
    "ScoringSettings",
    "load_settings",
    "RankedEntry",
    "TeamStanding",
    "AggregateStanding",
    "PlayerStanding",
    "MatchProgress",
    "competition_ranks",
    "ranked_standings",
    "team_standings",
    "tournament_team_standings",
    "player_standings",
    "match_progress",
]
