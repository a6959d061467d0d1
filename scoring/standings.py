"""Team and player leaderboards with competition ("1, 1, 3") ranking."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, TypeVar, Union

from models import Match, Team
from scoring.handicap import round_half_up

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RankedEntry:
    name: str
    score: Union[int, float]
    rank: int


@dataclass(frozen=True)
class TeamStanding:
    team: str
    total_score: int = 0
    match_count: int = 0
    team_id: Optional[str] = None
    rank: int = 0


@dataclass(frozen=True)
class AggregateStanding:
    name: str
    total_score: int = 0
    match_count: int = 0
    event_count: int = 0
    rank: int = 0


@dataclass(frozen=True)
class PlayerStanding:
    name: str
    team_name: str
    total_score: int = 0
    match_count: int = 0
    event_count: int = 0
    rank: int = 0


@dataclass(frozen=True)
class MatchProgress:
    completed: int
    registered: int
    percent: int


def competition_ranks(scores: Sequence[float]) -> List[int]:
    """Ranks for an already-sorted score sequence.

    A score equal to the previous one shares its rank; any other score takes
    its 1-based position, so ranks skip past a tie block.
    """
    ranks: List[int] = []
    for index, score in enumerate(scores):
        if index > 0 and score == scores[index - 1]:
            ranks.append(ranks[index - 1])
        else:
            ranks.append(index + 1)
    return ranks


def _value(entry: Any, key: str) -> Any:
    if isinstance(entry, Mapping):
        return entry[key]
    return getattr(entry, key)


def ranked_standings(entries: Iterable[Any]) -> List[RankedEntry]:
    """Attach competition ranks to sorted ``{name, score}`` entries (mappings or objects)."""
    rows = list(entries)
    scores = [_value(row, "score") for row in rows]
    return [
        RankedEntry(name=_value(row, "name"), score=score, rank=rank)
        for row, score, rank in zip(rows, scores, competition_ranks(scores))
    ]


def _with_ranks(standings: List[T]) -> List[T]:
    ranks = competition_ranks([s.total_score for s in standings])
    return [replace(s, rank=rank) for s, rank in zip(standings, ranks)]


def team_standings(matches: Iterable[Match], teams: Iterable[Team]) -> List[TeamStanding]:
    """One event's team leaderboard from its completed matches."""
    snapshot = list(matches)
    totals: Dict[str, Dict[str, Any]] = {}
    for team in teams:
        totals.setdefault(team.name, {"total_score": 0, "match_count": 0, "team_id": team.id})

    for match in snapshot:
        if not match.completed:
            continue
        for player in (match.player1, match.player2):
            entry = totals.get(player.team_name)
            if entry is None:
                logger.debug(
                    "Skipping %s in match %s: unknown team %r",
                    player.name, match.id, player.team_name,
                )
                continue
            entry["total_score"] += player.score
            entry["match_count"] += 1

    standings = [TeamStanding(team=name, **stats) for name, stats in totals.items()]
    standings.sort(key=lambda s: -s.total_score)
    return _with_ranks(standings)


def tournament_team_standings(
    event_standings: Iterable[Iterable[TeamStanding]],
) -> List[AggregateStanding]:
    """Fold per-event team leaderboards into one tournament leaderboard."""
    totals: Dict[str, AggregateStanding] = {}
    for standings in list(event_standings):
        for standing in standings:
            current = totals.get(standing.team, AggregateStanding(name=standing.team))
            totals[standing.team] = replace(
                current,
                total_score=current.total_score + standing.total_score,
                match_count=current.match_count + standing.match_count,
                event_count=current.event_count + 1,
            )

    ordered = sorted(totals.values(), key=lambda s: (-s.total_score, -s.match_count))
    return _with_ranks(ordered)


def player_standings(event_matches: Mapping[str, Iterable[Match]]) -> List[PlayerStanding]:
    """Individual leaderboard across events, keyed by player name."""
    totals: Dict[str, Dict[str, Any]] = {}
    for event_id, matches in list(event_matches.items()):
        for match in list(matches):
            if not match.completed:
                continue
            for player in (match.player1, match.player2):
                entry = totals.setdefault(
                    player.name,
                    {"team_name": player.team_name, "total_score": 0, "match_count": 0, "events": set()},
                )
                entry["total_score"] += player.score
                entry["match_count"] += 1
                entry["events"].add(event_id)

    standings = [
        PlayerStanding(
            name=name,
            team_name=entry["team_name"],
            total_score=entry["total_score"],
            match_count=entry["match_count"],
            event_count=len(entry["events"]),
        )
        for name, entry in totals.items()
    ]
    standings.sort(key=lambda s: (-s.total_score, -s.match_count))
    return _with_ranks(standings)


def match_progress(event_matches: Mapping[str, Iterable[Match]]) -> MatchProgress:
    """Completed versus registered matches across events."""
    registered = completed = 0
    for matches in list(event_matches.values()):
        for match in list(matches):
            registered += 1
            if match.completed:
                completed += 1
    if not registered:
        return MatchProgress(0, 0, 0)
    percent = min(100, round_half_up(completed * 100 / registered))
    return MatchProgress(completed, registered, percent)
