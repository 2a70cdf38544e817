from .errors import InvalidArgumentError, InvalidStateError, ScoreboardError
from .game import ID_SEPARATOR, Game, game_id
from .ranking import DefaultRankingPolicy, as_ranking_policy
from .repository import InMemoryGameRepository
from .scoreboard import ScoreBoard
from .types import GameLike, GameRepository, RankingPolicy, ScoreBoardProtocol
from .validation import ScoreUpdate, TeamNames

__all__ = [
    "ScoreboardError",
    "InvalidArgumentError",
    "InvalidStateError",
    "ID_SEPARATOR",
    "Game",
    "game_id",
    "DefaultRankingPolicy",
    "as_ranking_policy",
    "InMemoryGameRepository",
    "ScoreBoard",
    "GameLike",
    "GameRepository",
    "RankingPolicy",
    "ScoreBoardProtocol",
    "ScoreUpdate",
    "TeamNames",
]
