"""Net score and winner for a single hole."""

from dataclasses import dataclass
from typing import Optional

from models import HoleResult, Winner
from scoring.settings import DEFAULT_SETTINGS, ScoringSettings
from scoring.strokes import match_stroke_allocation


@dataclass(frozen=True)
class HoleOutcome:
    net1: int
    net2: int
    winner: Winner


UNPLAYED = HoleOutcome(0, 0, "tie")


def _net(raw: int, received: int, one_putt: bool, stroke_value: int, one_putt_value: int) -> int:
    net = raw * stroke_value - received
    if one_putt:
        net -= one_putt_value
    return net


def hole_net_score(
    eff1: int,
    raw1: int,
    one_putt1: bool,
    eff2: int,
    raw2: int,
    one_putt2: bool,
    par: int,
    *,
    stroke_value: int = 1,
    one_putt_value: int = 1,
) -> HoleOutcome:
    """Net scores and winner for one hole.

    Until both players have a raw score the hole is unplayed: nets are 0 and
    the hole is halved, whatever the putt flags say. ``par`` is part of the
    scorecard row but does not move either net score.
    """
    if raw1 == 0 or raw2 == 0:
        return UNPLAYED

    net1 = _net(raw1, eff1, one_putt1, stroke_value, one_putt_value)
    net2 = _net(raw2, eff2, one_putt2, stroke_value, one_putt_value)
    if net1 < net2:
        winner = "player1"
    elif net2 < net1:
        winner = "player2"
    else:
        winner = "tie"
    return HoleOutcome(net1, net2, winner)


def score_hole(
    hole: HoleResult,
    handicap1: float,
    handicap2: float,
    *,
    hole_count: int = 18,
    settings: Optional[ScoringSettings] = None,
) -> HoleResult:
    """Recompute strokes received, nets and winner for a stored hole."""
    settings = settings or DEFAULT_SETTINGS
    eff1, eff2 = match_stroke_allocation(handicap1, handicap2, hole.handicap, hole_count)
    outcome = hole_net_score(
        eff1, hole.player1_score, hole.player1_putt,
        eff2, hole.player2_score, hole.player2_putt,
        hole.par,
        stroke_value=settings.stroke_value,
        one_putt_value=settings.one_putt_value,
    )
    return hole.model_copy(
        update={
            "player1_strokes": eff1,
            "player2_strokes": eff2,
            "player1_net": outcome.net1,
            "player2_net": outcome.net2,
            "winner": outcome.winner,
        }
    )
