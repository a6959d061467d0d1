"""Match totals and the edit-then-recompute workflow for a match card."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from models import Course, HoleResult, Match, Winner
from scoring.exceptions import HoleNotFoundError, ScoringError
from scoring.holes import score_hole
from scoring.settings import DEFAULT_SETTINGS, HOLE_WIN_BONUS, ScoringSettings

logger = logging.getLogger(__name__)

# Layout used when a match is scheduled without a course snapshot.
DEFAULT_HOLE_HANDICAPS = [13, 11, 9, 17, 1, 15, 7, 5, 3, 12, 2, 14, 18, 4, 8, 6, 16, 10]
DEFAULT_HOLE_PARS = [5, 4, 4, 3, 4, 3, 4, 5, 3, 5, 4, 4, 3, 5, 4, 3, 4, 4]
DEFAULT_HOLE_PACE = [15, 15, 15, 12, 15, 12, 15, 17, 12, 17, 15, 17, 12, 17, 15, 12, 15, 15]


@dataclass(frozen=True)
class MatchTotals:
    total1: int
    total2: int
    wins1: int
    wins2: int

    @property
    def leader(self) -> Winner:
        if self.wins1 > self.wins2:
            return "player1"
        if self.wins2 > self.wins1:
            return "player2"
        return "tie"


def match_totals(holes: Iterable[HoleResult], *, bonus: int = HOLE_WIN_BONUS) -> MatchTotals:
    """Sum net scores over played holes and add the bonus for more holes won.

    Reads the scored result stored on each hole (nets and ``winner``), so the
    holes must have been through the hole scorer first; ``score_match`` does
    that for a whole card.
    """
    total1 = total2 = wins1 = wins2 = 0
    for hole in list(holes):
        if not hole.is_played:
            continue
        total1 += hole.player1_net
        total2 += hole.player2_net
        if hole.winner == "player1":
            wins1 += 1
        elif hole.winner == "player2":
            wins2 += 1

    if wins1 > wins2:
        total1 += bonus
    elif wins2 > wins1:
        total2 += bonus
    return MatchTotals(total1, total2, wins1, wins2)


def new_match_holes(course: Optional[Course] = None) -> List[HoleResult]:
    """Blank card (all scores 0) for the course, or the default layout."""
    if course is not None and course.holes:
        return [
            HoleResult(hole=h.number, handicap=h.handicap, par=h.par)
            for h in sorted(course.holes, key=lambda h: h.number)
        ]
    return [
        HoleResult(hole=number, handicap=handicap, par=par, pace=pace)
        for number, (handicap, par, pace) in enumerate(
            zip(DEFAULT_HOLE_HANDICAPS, DEFAULT_HOLE_PARS, DEFAULT_HOLE_PACE), start=1
        )
    ]


def score_match(match: Match, settings: Optional[ScoringSettings] = None) -> Match:
    """Recompute every hole and both players' totals from the full card."""
    settings = settings or DEFAULT_SETTINGS
    hole_count = len(match.holes) or 18
    holes = [
        score_hole(
            hole,
            match.player1.handicap,
            match.player2.handicap,
            hole_count=hole_count,
            settings=settings,
        )
        for hole in match.holes
    ]
    totals = match_totals(holes, bonus=settings.hole_win_bonus)
    player1 = match.player1.model_copy(
        update={
            "score": totals.total1,
            "hole_wins": totals.wins1,
            "putts": sum(1 for h in holes if h.is_played and h.player1_putt),
        }
    )
    player2 = match.player2.model_copy(
        update={
            "score": totals.total2,
            "hole_wins": totals.wins2,
            "putts": sum(1 for h in holes if h.is_played and h.player2_putt),
        }
    )
    logger.debug(
        "Scored match %s: %s %d (%d holes) vs %s %d (%d holes)",
        match.id, player1.name, totals.total1, totals.wins1,
        player2.name, totals.total2, totals.wins2,
    )
    return match.model_copy(update={"holes": holes, "player1": player1, "player2": player2})


def record_hole_score(
    match: Match,
    hole_number: int,
    *,
    player1_score: Optional[int] = None,
    player2_score: Optional[int] = None,
    player1_putt: Optional[bool] = None,
    player2_putt: Optional[bool] = None,
    settings: Optional[ScoringSettings] = None,
) -> Match:
    """Apply one scorecard edit and rescore the whole match."""
    target = match.get_hole(hole_number)
    if target is None:
        raise HoleNotFoundError(f"Hole {hole_number} is not on this card")

    edits = {
        "player1_score": player1_score,
        "player2_score": player2_score,
        "player1_putt": player1_putt,
        "player2_putt": player2_putt,
    }
    edited = HoleResult.model_validate(
        {**target.model_dump(), **{k: v for k, v in edits.items() if v is not None}}
    )
    holes = [edited if h.hole == hole_number else h for h in match.holes]
    return score_match(match.model_copy(update={"holes": holes}), settings)


def total_strokes(
    strokes: Sequence[int],
    putts: Sequence[bool],
    received: Sequence[int],
    pars: Sequence[int] = (),
    *,
    stroke_value: int = 1,
    one_putt_value: int = 1,
) -> int:
    """One player's net total over parallel per-hole sequences.

    With ``pars`` the total is relative to par. Holes with no strokes
    entered are left out.
    """
    if len(strokes) != len(putts) or len(strokes) != len(received) or (
        pars and len(pars) != len(strokes)
    ):
        raise ScoringError("Input sequences must have the same length")

    total = 0
    for index, raw in enumerate(strokes):
        if raw == 0:
            continue
        total += raw * stroke_value - received[index]
        if putts[index]:
            total -= one_putt_value
        if pars:
            total -= pars[index]
    return total
