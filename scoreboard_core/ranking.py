"""Summary ordering for live games.

Default comparator: total goals (home + away), highest first; equal totals put
the most recently started game first. Games that compare equal on both keys
keep their input order (``sorted`` is stable, including with ``reverse=True``).
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, List, Sequence

from .errors import InvalidArgumentError
from .types import GameLike, RankingPolicy


def _summary_sort_key(game: GameLike) -> tuple[int, bool, datetime | None]:
    # Unstarted games (start_time None) sort after started ones with the same total.
    start_time = game.start_time
    return (game.home_score + game.away_score, start_time is not None, start_time)


class DefaultRankingPolicy:
    """Total score descending, then start time descending."""

    def sort(self, games: Iterable[GameLike] | None) -> List[GameLike]:
        if games is None:
            raise InvalidArgumentError("The collection of games cannot be None.", param="games")
        return sorted(games, key=_summary_sort_key, reverse=True)


@dataclass(frozen=True)
class _CallableRankingPolicy:
    func: Callable[[Iterable[GameLike]], Sequence[GameLike]]

    def sort(self, games: Iterable[GameLike]) -> Sequence[GameLike]:
        return self.func(games)


def as_ranking_policy(policy: object) -> RankingPolicy:
    """Accept either an object with ``sort(games)`` or a plain callable."""
    if isinstance(policy, type):
        raise InvalidArgumentError("Ranking policy must be an instance, not a class.", param="ranking_policy")
    if callable(getattr(policy, "sort", None)):
        return policy  # type: ignore[return-value]
    if callable(policy):
        return _CallableRankingPolicy(func=policy)
    raise InvalidArgumentError("Ranking policy must provide sort(games).", param="ranking_policy")
