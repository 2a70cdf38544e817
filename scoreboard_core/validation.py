"""
Input validation schemas using Pydantic v2
Validates team names, score updates and repository keys
"""
from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError, field_validator

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

TEAM_NAMES_MESSAGE = "Team names cannot be empty"
NEGATIVE_SCORE_MESSAGE = "Scores cannot be negative"
SCORE_TYPE_MESSAGE = "Scores must be integers"


class TeamNames(BaseModel):
    """Home and away team names for a new game"""

    home_team: StrictStr = Field(..., description="Home team name")
    away_team: StrictStr = Field(..., description="Away team name")

    @field_validator("home_team", "away_team")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only names; the value itself is kept as given"""
        if not v.strip():
            raise ValueError("team name cannot be blank")
        return v

    model_config = ConfigDict(frozen=True)


class ScoreUpdate(BaseModel):
    """New running score for a started game"""

    home_score: StrictInt = Field(..., ge=0, description="Home team score")
    away_score: StrictInt = Field(..., ge=0, description="Away team score")

    model_config = ConfigDict(frozen=True)


def _first_param(exc: ValidationError) -> str | None:
    errors = exc.errors()
    if errors and errors[0].get("loc"):
        return str(errors[0]["loc"][0])
    return None


def validate_team_names(home_team: object, away_team: object) -> TeamNames:
    """
    Validate both team names

    Raises:
        InvalidArgumentError: If either name is missing, not a string or blank
    """
    try:
        return TeamNames(home_team=home_team, away_team=away_team)
    except ValidationError as e:
        logger.warning(f"Team name validation failed: {e}")
        raise InvalidArgumentError(TEAM_NAMES_MESSAGE, param=_first_param(e)) from e


def validate_score_update(home_score: object, away_score: object) -> ScoreUpdate:
    """
    Validate a score pair

    Raises:
        InvalidArgumentError: If either score is negative or not an integer
    """
    try:
        return ScoreUpdate(home_score=home_score, away_score=away_score)
    except ValidationError as e:
        logger.warning(f"Score validation failed: {e}")
        negative = any(err.get("type") == "greater_than_equal" for err in e.errors())
        message = NEGATIVE_SCORE_MESSAGE if negative else SCORE_TYPE_MESSAGE
        raise InvalidArgumentError(message, param=_first_param(e)) from e


def validate_identity(game_id: object) -> str:
    """Repository keys must be non-empty strings"""
    if not isinstance(game_id, str) or not game_id:
        raise InvalidArgumentError("Game id cannot be empty", param="game_id")
    return game_id


__all__ = [
    "TeamNames",
    "ScoreUpdate",
    "validate_team_names",
    "validate_score_update",
    "validate_identity",
]
