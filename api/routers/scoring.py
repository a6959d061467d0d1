"""Hole and match scoring endpoints."""

from fastapi import APIRouter, Depends, Query
from api.dependencies import get_settings
from api.schemas import (
    HoleEditRequest,
    HoleScoreRequest,
    HoleScoreResponse,
    MatchTotalsRequest,
    MatchTotalsResponse,
    StrokeAllocationResponse,
)
from models import Match
from scoring.holes import hole_net_score
from scoring.match import match_totals, record_hole_score, score_match
from scoring.settings import ScoringSettings
from scoring.strokes import match_stroke_allocation

router = APIRouter()


@router.get("/strokes", response_model=StrokeAllocationResponse)
async def get_stroke_allocation(
    handicap1: float = Query(...),
    handicap2: float = Query(...),
    rank: int = Query(..., ge=1, le=18),
    hole_count: int = Query(18, ge=9, le=18),
):
    strokes1, strokes2 = match_stroke_allocation(handicap1, handicap2, rank, hole_count)
    return StrokeAllocationResponse(strokes1=strokes1, strokes2=strokes2)


@router.post("/hole", response_model=HoleScoreResponse)
async def score_single_hole(
    req: HoleScoreRequest,
    settings: ScoringSettings = Depends(get_settings),
):
    outcome = hole_net_score(
        req.eff1, req.raw1, req.one_putt1,
        req.eff2, req.raw2, req.one_putt2,
        req.par,
        stroke_value=settings.stroke_value,
        one_putt_value=settings.one_putt_value,
    )
    return HoleScoreResponse.model_validate(outcome)


@router.post("/totals", response_model=MatchTotalsResponse)
async def get_match_totals(
    req: MatchTotalsRequest,
    settings: ScoringSettings = Depends(get_settings),
):
    totals = match_totals(req.holes, bonus=settings.hole_win_bonus)
    return MatchTotalsResponse.model_validate(totals)


@router.post("/match", response_model=Match)
async def rescore_match(
    match: Match,
    settings: ScoringSettings = Depends(get_settings),
):
    """Recompute every hole and both totals for a match card."""
    return score_match(match, settings)


@router.post("/match/hole", response_model=Match)
async def edit_match_hole(
    req: HoleEditRequest,
    settings: ScoringSettings = Depends(get_settings),
):
    """Apply one score or putt edit, then rescore the whole card."""
    return record_hole_score(
        req.match,
        req.hole_number,
        player1_score=req.player1_score,
        player2_score=req.player2_score,
        player1_putt=req.player1_putt,
        player2_putt=req.player2_putt,
        settings=settings,
    )
