"""Course/Playing Handicap calculation and refresh of cached values."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal
from typing import Iterable, List, Optional, Union

from models import Event, Player, Tee
from scoring.exceptions import ScoringError

logger = logging.getLogger(__name__)

Number = Union[int, float, Decimal]

SLOPE_NEUTRAL = Decimal(113)
_HALF = Decimal("0.5")


def to_decimal(value: Number) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def round_half_up(value: Number) -> int:
    """Round to the nearest integer with halves going up (12.5 -> 13, -2.5 -> -2)."""
    return int((to_decimal(value) + _HALF).to_integral_value(rounding=ROUND_FLOOR))


def course_handicap(
    handicap_index: Number,
    slope: Number,
    course_rating: Number,
    par: Number,
    allowance_percent: Number = 100,
) -> int:
    """Playing Handicap for one tee.

    index * (slope / 113) + (course rating - par), scaled by the allowance
    and rounded half up. Decimal arithmetic keeps 0.5 boundaries exact.
    """
    if to_decimal(slope) <= 0:
        raise ScoringError(f"Slope must be positive, got {slope}")
    allowance = to_decimal(allowance_percent)
    if not 0 <= allowance <= 100:
        raise ScoringError(f"Allowance {allowance_percent} outside 0-100")

    raw = to_decimal(handicap_index) * to_decimal(slope) / SLOPE_NEUTRAL + (to_decimal(course_rating) - to_decimal(par))
    return round_half_up(raw * allowance / 100)


def playing_handicap_for(
    player: Player,
    tee: Optional[Tee],
    par: Optional[int],
    allowance_percent: Number = 100,
) -> Optional[int]:
    """Playing Handicap, or None when no tee (or par) is known yet."""
    if tee is None or par is None:
        return None
    return course_handicap(
        player.handicap_index,
        tee.slope_rating,
        tee.course_rating,
        par,
        allowance_percent,
    )


@dataclass(frozen=True)
class HandicapRefresh:
    """A cached team-member handicap that no longer matches its inputs."""
    team_name: str
    player_id: str
    cached: Optional[int]
    recomputed: int


def stale_playing_handicaps(event: Event, players: Iterable[Player]) -> List[HandicapRefresh]:
    """List every cached member handicap that differs from a fresh calculation."""
    course = event.course
    if course is None or course.par is None:
        return []

    by_id = {p.id: p for p in players if p.id is not None}
    stale: List[HandicapRefresh] = []
    for team in event.teams:
        for member in team.members:
            player = by_id.get(member.player_id)
            if player is None:
                continue
            tee_name = member.tee or player.tee
            if not tee_name:
                continue
            tee = course.get_tee(tee_name, player.gender)
            recomputed = playing_handicap_for(player, tee, course.par, event.handicap_allowance)
            if recomputed is None or recomputed == member.handicap:
                continue
            logger.debug(
                "Stale playing handicap for %s on %s: cached=%s recomputed=%s",
                member.player_id, team.name, member.handicap, recomputed,
            )
            stale.append(HandicapRefresh(team.name, member.player_id, member.handicap, recomputed))
    return stale


def refresh_playing_handicaps(event: Event, players: Iterable[Player]) -> Event:
    """Return a copy of the event with every stale cached handicap overwritten."""
    changes = stale_playing_handicaps(event, players)
    updated = event.model_copy(deep=True)
    for change in changes:
        team = updated.get_team(change.team_name)
        for member in team.members:
            if member.player_id == change.player_id:
                member.handicap = change.recomputed
    return updated
