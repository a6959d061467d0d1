"""Scoring constants, overridable from the environment or a .env file."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

HOLE_WIN_BONUS = 32


class ScoringSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    hole_win_bonus: int = Field(HOLE_WIN_BONUS, ge=0)
    stroke_value: int = Field(1, ge=1)
    one_putt_value: int = Field(1, ge=0)
    default_allowance: float = Field(100, ge=0, le=100)


_ENV_VARS = {
    "hole_win_bonus": "MATCHPLAY_HOLE_WIN_BONUS",
    "stroke_value": "MATCHPLAY_STROKE_VALUE",
    "one_putt_value": "MATCHPLAY_ONE_PUTT_VALUE",
    "default_allowance": "MATCHPLAY_DEFAULT_ALLOWANCE",
}


def load_settings(env_file: Optional[str] = None) -> ScoringSettings:
    """Build settings from MATCHPLAY_* variables. Raises ValidationError on bad values.

    Variables already set in the environment win over the .env file.
    """
    load_dotenv(env_file)
    values = {
        field: os.environ[var]
        for field, var in _ENV_VARS.items()
        if os.environ.get(var)
    }
    return ScoringSettings(**values)


DEFAULT_SETTINGS = ScoringSettings()
