"""Event scheduling endpoints."""

import random

from fastapi import APIRouter
from typing import List
from api.schemas import PairingsRequest
from models import Match
from scoring.pairing import event_entries, random_pairings

router = APIRouter()


@router.post("/pairings", response_model=List[Match])
async def create_random_pairings(req: PairingsRequest):
    """Random cross-team pairings with blank cards. Pass ``seed`` for a repeatable draw."""
    rng = random.Random(req.seed) if req.seed is not None else None
    return random_pairings(
        event_entries(req.event, req.players),
        event_id=req.event.id,
        tee_time=req.tee_time,
        course=req.event.course,
        rng=rng,
    )
