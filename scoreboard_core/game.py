"""Single game entity: identity, running score and start time.

A game is created "not started" with a 0-0 score. ``start()`` stamps the
start time exactly once; ``update_score()`` is only legal afterwards. There is
no finished state on the game itself: finishing removes it from the board.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from .clock import utc_now
from .errors import InvalidStateError
from .validation import validate_score_update, validate_team_names

logger = logging.getLogger(__name__)

ID_SEPARATOR = "|"


def game_id(home_team: str, away_team: str) -> str:
    """Identity of the game between two teams, e.g. ``"Mexico|Canada"``.

    Separators inside team names are not escaped; colliding pairs are the same game.
    """
    return f"{home_team}{ID_SEPARATOR}{away_team}"


class Game:
    def __init__(
        self,
        home_team: str,
        away_team: str,
        *,
        clock: Callable[[], datetime] | None = None,
    ):
        names = validate_team_names(home_team, away_team)
        self._home_team = names.home_team
        self._away_team = names.away_team
        self._id = game_id(names.home_team, names.away_team)
        self._home_score = 0
        self._away_score = 0
        self._start_time: datetime | None = None
        self._clock = clock or utc_now

    @property
    def id(self) -> str:
        return self._id

    @property
    def home_team(self) -> str:
        return self._home_team

    @property
    def away_team(self) -> str:
        return self._away_team

    @property
    def home_score(self) -> int:
        return self._home_score

    @property
    def away_score(self) -> int:
        return self._away_score

    @property
    def start_time(self) -> datetime | None:
        return self._start_time

    @property
    def is_started(self) -> bool:
        return self._start_time is not None

    @property
    def total_score(self) -> int:
        return self._home_score + self._away_score

    def start(self) -> None:
        """Stamp the start time.

        Raises:
            InvalidStateError: If the game has already started
        """
        if self._start_time is not None:
            raise InvalidStateError("The game has already started")
        self._start_time = self._clock()
        logger.debug(f"Game {self._id} started at {self._start_time.isoformat()}")

    def update_score(self, home_score: int, away_score: int) -> None:
        """Replace both scores.

        Raises:
            InvalidStateError: If the game has not started
            InvalidArgumentError: If either score is negative or not an int
        """
        if self._start_time is None:
            raise InvalidStateError("The game must have started to update the result")
        score = validate_score_update(home_score, away_score)
        self._home_score = score.home_score
        self._away_score = score.away_score
        logger.debug(f"Game {self._id} score is now {self._home_score}-{self._away_score}")

    def __str__(self) -> str:
        return f"{self._home_team} {self._home_score} - {self._away_team} {self._away_score}"

    def __repr__(self) -> str:
        return (
            f"Game(id={self._id!r}, score={self._home_score}-{self._away_score}, "
            f"start_time={self._start_time!r})"
        )
