import pytest
from pydantic import ValidationError

from scoreboard_core import InvalidArgumentError, ScoreUpdate, TeamNames
from scoreboard_core.validation import validate_identity, validate_score_update, validate_team_names


def test_team_names_model_keeps_values_verbatim():
    names = TeamNames(home_team=" Spain ", away_team="Brazil")
    assert names.home_team == " Spain "


def test_team_names_model_rejects_blank():
    with pytest.raises(ValidationError):
        TeamNames(home_team=" ", away_team="Brazil")


def test_score_update_model_is_strict():
    assert ScoreUpdate(home_score=0, away_score=7).away_score == 7
    with pytest.raises(ValidationError):
        ScoreUpdate(home_score="1", away_score=0)
    with pytest.raises(ValidationError):
        ScoreUpdate(home_score=False, away_score=0)


def test_validate_team_names_reports_param():
    with pytest.raises(InvalidArgumentError) as exc_info:
        validate_team_names("Spain", "")
    assert exc_info.value.param == "away_team"
    assert str(exc_info.value) == "Team names cannot be empty"


def test_validate_score_update_messages():
    with pytest.raises(InvalidArgumentError, match="Scores cannot be negative") as exc_info:
        validate_score_update(-1, 0)
    assert exc_info.value.param == "home_score"
    with pytest.raises(InvalidArgumentError, match="Scores must be integers"):
        validate_score_update(1, "2")


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        validate_score_update(0, -5)


def test_validate_identity():
    assert validate_identity("A|B") == "A|B"
    with pytest.raises(InvalidArgumentError):
        validate_identity("")
    with pytest.raises(InvalidArgumentError):
        validate_identity(7)
