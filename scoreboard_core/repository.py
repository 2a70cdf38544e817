"""In-memory game storage (no persistence, no I/O)."""
from __future__ import annotations

from typing import Dict, List

from .errors import InvalidArgumentError, InvalidStateError
from .types import GameLike
from .validation import validate_identity


class InMemoryGameRepository:
    def __init__(self):
        self._games: Dict[str, GameLike] = {}

    def add(self, game: GameLike) -> None:
        if game is None:
            raise InvalidArgumentError("Game cannot be None.", param="game")
        if game.id in self._games:
            raise InvalidStateError("Game already exists.")
        self._games[game.id] = game

    def remove(self, game_id: str) -> None:
        validate_identity(game_id)
        if game_id not in self._games:
            raise InvalidStateError("Game not found.")
        del self._games[game_id]

    def get_by_id(self, game_id: str) -> GameLike | None:
        validate_identity(game_id)
        return self._games.get(game_id)

    def get_all(self) -> List[GameLike]:
        return list(self._games.values())

    def __len__(self) -> int:
        return len(self._games)

    def __contains__(self, game_id: object) -> bool:
        return game_id in self._games
