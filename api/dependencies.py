from fastapi import Request
from scoring.settings import ScoringSettings, load_settings


def get_settings(request: Request) -> ScoringSettings:
    """FastAPI dependency that provides the loaded ScoringSettings."""
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        settings = request.app.state.settings = load_settings()
    return settings
