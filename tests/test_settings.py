import os

import pytest
from pydantic import ValidationError

from scoring.settings import DEFAULT_SETTINGS, HOLE_WIN_BONUS, ScoringSettings, load_settings

_VARS = (
    "MATCHPLAY_HOLE_WIN_BONUS",
    "MATCHPLAY_STROKE_VALUE",
    "MATCHPLAY_ONE_PUTT_VALUE",
    "MATCHPLAY_DEFAULT_ALLOWANCE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in _VARS:
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings == DEFAULT_SETTINGS
    assert settings.hole_win_bonus == HOLE_WIN_BONUS == 32
    assert (settings.stroke_value, settings.one_putt_value, settings.default_allowance) == (1, 1, 100)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MATCHPLAY_HOLE_WIN_BONUS", "20")
    monkeypatch.setenv("MATCHPLAY_DEFAULT_ALLOWANCE", "85")

    settings = load_settings()

    assert settings.hole_win_bonus == 20
    assert settings.default_allowance == 85
    assert settings.stroke_value == 1


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("MATCHPLAY_ONE_PUTT_VALUE=2\n")
    try:
        assert load_settings(str(tmp_path / ".env")).one_putt_value == 2
    finally:
        # load_dotenv writes into os.environ
        os.environ.pop("MATCHPLAY_ONE_PUTT_VALUE", None)


def test_invalid_values(monkeypatch):
    monkeypatch.setenv("MATCHPLAY_DEFAULT_ALLOWANCE", "120")
    with pytest.raises(ValidationError):
        load_settings()

    monkeypatch.setenv("MATCHPLAY_DEFAULT_ALLOWANCE", "90")
    monkeypatch.setenv("MATCHPLAY_STROKE_VALUE", "lots")
    with pytest.raises(ValidationError):
        load_settings()


def test_settings_are_frozen():
    with pytest.raises(ValidationError):
        ScoringSettings().hole_win_bonus = 5
