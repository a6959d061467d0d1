from .base import ClubModel
from .course import Course
from .event import Event, Tournament
from .hole import Hole
from .match import HoleResult, Match, MatchPlayer, Winner
from .player import Player
from .team import Team, TeamMember
from .tee import Tee

__all__ = [
    "ClubModel",
    "Course",
    "Event",
    "Hole",
    "HoleResult",
    "Match",
    "MatchPlayer",
    "Player",
    "Team",
    "TeamMember",
    "Tee",
    "Tournament",
    "Winner",
]
