"""Hole-by-hole allocation of handicap strokes between two opponents."""

from typing import Dict, Tuple

from scoring.exceptions import InvalidHoleRankError, ScoringError
from scoring.handicap import Number, round_half_up, to_decimal


def _strokes_on_rank(differential: int, rank: int, hole_count: int) -> int:
    # One stroke per hole from rank 1, wrapping round for every full pass.
    full_passes, remainder = divmod(differential, hole_count)
    return full_passes + (1 if rank <= remainder else 0)


def match_stroke_allocation(
    handicap1: Number,
    handicap2: Number,
    hole_rank: int,
    hole_count: int = 18,
) -> Tuple[int, int]:
    """Strokes (player1, player2) receive on the hole with the given difficulty rank.

    Only the rounded differential matters: the higher handicap gets it, the
    lower handicap gets nothing. Plus (negative) handicaps sit on the same scale.
    """
    if hole_count <= 0:
        raise ScoringError(f"hole_count must be positive, got {hole_count}")
    if not 1 <= hole_rank <= hole_count:
        raise InvalidHoleRankError(f"Hole rank {hole_rank} outside 1-{hole_count}")

    differential = round_half_up(abs(to_decimal(handicap1) - to_decimal(handicap2)))
    if differential == 0:
        return 0, 0

    strokes = _strokes_on_rank(differential, hole_rank, hole_count)
    if to_decimal(handicap1) > to_decimal(handicap2):
        return strokes, 0
    return 0, strokes


def stroke_table(
    handicap1: Number,
    handicap2: Number,
    hole_count: int = 18,
) -> Dict[int, Tuple[int, int]]:
    """Allocation for every difficulty rank on the course."""
    return {
        rank: match_stroke_allocation(handicap1, handicap2, rank, hole_count)
        for rank in range(1, hole_count + 1)
    }
