"""Capability definitions shared by games, storage, ranking and the board."""
from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class GameLike(Protocol):
    """Anything the board can store and rank.

    ``start_time`` is None until the game has started.
    """

    @property
    def id(self) -> str: ...

    @property
    def home_team(self) -> str: ...

    @property
    def away_team(self) -> str: ...

    @property
    def home_score(self) -> int: ...

    @property
    def away_score(self) -> int: ...

    @property
    def start_time(self) -> Optional[datetime]: ...

    def start(self) -> None: ...

    def update_score(self, home_score: int, away_score: int) -> None: ...


class RankingPolicy(Protocol):
    def sort(self, games: Iterable[GameLike]) -> Sequence[GameLike]:
        ...


@runtime_checkable
class GameRepository(Protocol):
    """Key-unique storage of tracked games, keyed by game id."""

    def add(self, game: GameLike) -> None: ...

    def remove(self, game_id: str) -> None: ...

    def get_by_id(self, game_id: str) -> Optional[GameLike]: ...

    def get_all(self) -> Iterable[GameLike]: ...


@runtime_checkable
class ScoreBoardProtocol(Protocol):
    def start_game(self, game: GameLike) -> None: ...

    def finish_game(self, game: GameLike) -> None: ...

    def update_score(self, game: GameLike, home_score: int, away_score: int) -> None: ...

    def get_summary(self) -> List[GameLike]: ...
