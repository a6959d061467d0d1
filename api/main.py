"""FastAPI application for the match-play scoring engine."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from scoring.exceptions import ScoringError
from scoring.settings import load_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load scoring settings once on startup."""
    app.state.settings = load_settings()
    logger.info(
        "Scoring settings: bonus=%s stroke_value=%s one_putt_value=%s",
        app.state.settings.hole_win_bonus,
        app.state.settings.stroke_value,
        app.state.settings.one_putt_value,
    )
    yield


async def scoring_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    return JSONResponse({"detail": str(exc)}, status_code=422)


def create_app() -> FastAPI:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Match Play Scoring API",
        version="1.0.0",
        lifespan=lifespan,
    )

    origins = os.environ.get("CORS_ORIGINS", "http://localhost:3000")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ScoringError, scoring_error_handler)
    # edits re-validated inside the engine, e.g. a score above 20
    app.add_exception_handler(ValidationError, scoring_error_handler)

    from api.routers import events, handicap, scoring, standings
    app.include_router(handicap.router, prefix="/api/handicap", tags=["handicap"])
    app.include_router(scoring.router, prefix="/api/scoring", tags=["scoring"])
    app.include_router(standings.router, prefix="/api/standings", tags=["standings"])
    app.include_router(events.router, prefix="/api/events", tags=["events"])

    @app.get("/api/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
