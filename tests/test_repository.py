from dataclasses import dataclass

import pytest

from scoreboard_core import InMemoryGameRepository, InvalidArgumentError, InvalidStateError


@dataclass
class _StubGame:
    home_team: str
    away_team: str
    home_score: int = 0
    away_score: int = 0

    @property
    def id(self) -> str:
        return f"{self.home_team}|{self.away_team}"


def test_add_none_rejected():
    repository = InMemoryGameRepository()
    with pytest.raises(InvalidArgumentError) as exc_info:
        repository.add(None)
    assert exc_info.value.param == "game"


def test_add_then_get_by_id():
    repository = InMemoryGameRepository()
    game = _StubGame("Mexico", "Canada")
    repository.add(game)
    assert repository.get_by_id("Mexico|Canada") is game
    assert "Mexico|Canada" in repository
    assert len(repository) == 1


def test_add_duplicate_id_rejected_and_original_kept():
    repository = InMemoryGameRepository()
    first = _StubGame("Mexico", "Canada")
    repository.add(first)
    with pytest.raises(InvalidStateError, match="Game already exists."):
        repository.add(_StubGame("Mexico", "Canada", 9, 9))
    assert repository.get_by_id("Mexico|Canada") is first


def test_remove():
    repository = InMemoryGameRepository()
    repository.add(_StubGame("Mexico", "Canada"))
    repository.remove("Mexico|Canada")
    assert repository.get_by_id("Mexico|Canada") is None
    assert len(repository) == 0


def test_remove_missing_rejected():
    repository = InMemoryGameRepository()
    with pytest.raises(InvalidStateError, match="Game not found."):
        repository.remove("Nobody|Else")


def test_get_by_id_missing_returns_none():
    assert InMemoryGameRepository().get_by_id("Nobody|Else") is None


@pytest.mark.parametrize("bad_id", ["", None])
def test_empty_id_rejected(bad_id):
    repository = InMemoryGameRepository()
    with pytest.raises(InvalidArgumentError):
        repository.get_by_id(bad_id)
    with pytest.raises(InvalidArgumentError):
        repository.remove(bad_id)


def test_get_all_is_a_snapshot():
    repository = InMemoryGameRepository()
    g1 = _StubGame("Mexico", "Canada")
    g2 = _StubGame("Argentina", "Australia")
    repository.add(g1)
    repository.add(g2)
    snapshot = repository.get_all()
    assert len(snapshot) == 2
    assert g1 in snapshot and g2 in snapshot
    repository.remove(g1.id)
    assert len(snapshot) == 2
    assert repository.get_all() == [g2]
