"""Live scoreboard: the registry of games currently in progress.

Callers work only through ``ScoreBoard``:
- start_game(): starts the game and begins tracking it under its id
- update_score(): applies a new score to the tracked game with the same id
- finish_game(): stops tracking the game with the same id
- get_summary(): ranked list of every tracked game

Lookups go by ``game.id`` only, so a caller may pass any game object carrying
the right id; mutations always land on the tracked instance.

Every operation holds one re-entrant lock, so the duplicate/not-found checks
and the mutation that follows them are atomic with respect to other callers.
Direct calls on a Game held outside the board are not covered by that lock.
"""
from __future__ import annotations

import logging
import threading
from typing import List

from .errors import InvalidArgumentError, InvalidStateError
from .ranking import DefaultRankingPolicy, as_ranking_policy
from .repository import InMemoryGameRepository
from .types import GameLike, GameRepository, RankingPolicy

logger = logging.getLogger(__name__)


def _require_game(game: GameLike | None) -> GameLike:
    if game is None:
        raise InvalidArgumentError("Game cannot be None.", param="game")
    return game


class ScoreBoard:
    def __init__(
        self,
        repository: GameRepository | None = None,
        ranking_policy: RankingPolicy | None = None,
    ):
        """
        Args:
          repository: game storage; defaults to InMemoryGameRepository.
          ranking_policy: object with ``sort(games)`` or a plain callable;
            defaults to DefaultRankingPolicy.
        """
        if repository is None:
            repository = InMemoryGameRepository()
        elif not isinstance(repository, GameRepository):
            raise InvalidArgumentError(
                "Game repository must provide add, remove, get_by_id and get_all.",
                param="repository",
            )
        self._repository = repository
        self._ranking_policy = (
            DefaultRankingPolicy() if ranking_policy is None else as_ranking_policy(ranking_policy)
        )
        self._lock = threading.RLock()

    def start_game(self, game: GameLike) -> None:
        """Start ``game`` and track it.

        Raises:
            InvalidArgumentError: If game is None
            InvalidStateError: If a game with the same id is tracked, or the game already started
        """
        game = _require_game(game)
        with self._lock:
            # Checked before start() so a rejected game is left unstarted.
            if self._repository.get_by_id(game.id) is not None:
                raise InvalidStateError("Game already exists.")
            game.start()
            self._repository.add(game)
        logger.debug(f"Tracking game {game.id}")

    def finish_game(self, game: GameLike) -> None:
        """Stop tracking the game with ``game.id``.

        Raises:
            InvalidArgumentError: If game is None
            InvalidStateError: If no game with that id is tracked
        """
        game = _require_game(game)
        with self._lock:
            self._repository.remove(game.id)
        logger.debug(f"Finished game {game.id}")

    def update_score(self, game: GameLike, home_score: int, away_score: int) -> None:
        """Set the score of the tracked game with ``game.id``.

        Raises:
            InvalidArgumentError: If game is None or a score is invalid
            InvalidStateError: If no game with that id is tracked
        """
        game = _require_game(game)
        with self._lock:
            tracked = self._repository.get_by_id(game.id)
            if tracked is None:
                raise InvalidStateError("Game not found.")
            tracked.update_score(home_score, away_score)

    def get_summary(self) -> List[GameLike]:
        """All tracked games, ranked by the configured policy."""
        with self._lock:
            games = list(self._repository.get_all())
            return list(self._ranking_policy.sort(games))
