"""Pytest fixtures for MapCraft tests."""
import pytest

from mapcraft.core.entities import Army
from mapcraft.core.events import event_bus
from mapcraft.core.player import Player


class FakePlayer:
    """Player double that records every call made by the interactions."""

    def __init__(self, player_id: int = 7, wins: bool = True):
        self.id = player_id
        self.wins = wins
        self.calls = []  # ("can_beat", army) / ("die",) / ("consume", treasure)

    def can_beat(self, army) -> bool:
        self.calls.append(("can_beat", army))
        return self.wins

    def die(self) -> None:
        self.calls.append(("die",))

    def consume(self, treasure) -> None:
        self.calls.append(("consume", treasure))

    def count(self, name: str) -> int:
        return sum(1 for call in self.calls if call[0] == name)


@pytest.fixture(autouse=True)
def clean_event_bus():
    """Every test starts and ends with an empty global EventBus."""
    event_bus.clear()
    yield event_bus
    event_bus.clear()


@pytest.fixture
def winner():
    """A fake player that wins every fight."""
    return FakePlayer(player_id=7, wins=True)


@pytest.fixture
def loser():
    """A fake player that loses every fight."""
    return FakePlayer(player_id=7, wins=False)


@pytest.fixture
def hero():
    """A reference player with a medium army."""
    return Player(player_id=1, army=Army(10))
