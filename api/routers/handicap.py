"""Playing Handicap endpoints."""

from fastapi import APIRouter, Depends
from api.dependencies import get_settings
from api.schemas import (
    CourseHandicapRequest,
    CourseHandicapResponse,
    HandicapChange,
    HandicapRefreshRequest,
    HandicapRefreshResponse,
)
from scoring.handicap import course_handicap, refresh_playing_handicaps, stale_playing_handicaps
from scoring.settings import ScoringSettings

router = APIRouter()


@router.post("/course", response_model=CourseHandicapResponse)
async def calculate_course_handicap(
    req: CourseHandicapRequest,
    settings: ScoringSettings = Depends(get_settings),
):
    allowance = req.allowance_percent
    if allowance is None:
        allowance = settings.default_allowance
    return CourseHandicapResponse(
        playing_handicap=course_handicap(
            req.handicap_index, req.slope, req.course_rating, req.par, allowance
        )
    )


@router.post("/refresh", response_model=HandicapRefreshResponse)
async def refresh_event_handicaps(req: HandicapRefreshRequest):
    """Recompute cached team-member handicaps after an index, tee or allowance change."""
    changes = stale_playing_handicaps(req.event, req.players)
    return HandicapRefreshResponse(
        event=refresh_playing_handicaps(req.event, req.players),
        changes=[HandicapChange.model_validate(c) for c in changes],
    )
