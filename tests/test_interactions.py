"""Test interaction policies and the dispatcher."""
import pytest

from mapcraft.config import NEUTRAL_OWNER
from mapcraft.core.entities import Army, Treasure, Dwelling, Mine, Creeps, Wolves, ResourcePile
from mapcraft.core.interactions import (
    BEATABLE, CONSUMABLE, CAPTURABLE, Interaction, interact, make_interaction,
)
from mapcraft.core.player import Player


class TestBeatableInteraction:
    """Tests for BeatableInteraction."""

    def test_win_has_no_side_effect(self, winner):
        wolves = Wolves(army=Army(5))
        assert BEATABLE.make(winner, wolves)
        assert winner.calls == [("can_beat", Army(5))]

    def test_loss_kills_player(self, loser):
        assert not BEATABLE.make(loser, Wolves())
        assert loser.count("die") == 1


class TestConsumableInteraction:
    """Tests for ConsumableInteraction."""

    def test_consume_passes_treasure(self, winner):
        pile = ResourcePile(treasure=Treasure("wood", 5))
        assert CONSUMABLE.make(winner, pile)
        assert winner.calls == [("consume", Treasure("wood", 5))]

    def test_treasure_is_not_removed(self, hero):
        """Consuming the same pile again gives the treasure again."""
        pile = ResourcePile(treasure=Treasure("wood", 5))
        for _ in range(3):
            assert interact(pile, hero)
        assert pile.treasure == Treasure("wood", 5)
        assert hero.treasures["wood"] == 15


class TestCapturableInteraction:
    """Tests for CapturableInteraction."""

    def test_capture_sets_owner(self, winner):
        dwelling = Dwelling()
        assert CAPTURABLE.make(winner, dwelling)
        assert dwelling.owner == winner.id

    def test_recapture_is_idempotent(self, winner):
        dwelling = Dwelling()
        CAPTURABLE.make(winner, dwelling)
        assert CAPTURABLE.make(winner, dwelling)
        assert dwelling.owner == winner.id

    def test_capture_from_other_player(self, winner):
        dwelling = Dwelling(owner=99)
        CAPTURABLE.make(winner, dwelling)
        assert dwelling.owner == winner.id

    def test_base_interaction_is_abstract(self, winner):
        with pytest.raises(NotImplementedError):
            Interaction().make(winner, Dwelling())


class TestDispatchWolves:
    """Beatable only."""

    def test_win(self, winner):
        assert interact(Wolves(), winner)
        assert winner.count("die") == 0

    def test_loss(self, loser):
        assert not interact(Wolves(), loser)
        assert loser.count("die") == 1


class TestDispatchCreeps:
    """Beatable then Consumable."""

    def test_loss_skips_consume(self, loser):
        assert not interact(Creeps(), loser)
        assert loser.count("die") == 1
        assert loser.count("consume") == 0

    def test_win_consumes_once(self, winner):
        creeps = Creeps(treasure=Treasure("gold", 500))
        assert interact(creeps, winner)
        assert winner.calls[-1] == ("consume", Treasure("gold", 500))
        assert winner.count("consume") == 1


class TestDispatchMine:
    """Beatable, Consumable, Capturable."""

    def test_loss_skips_consume_and_capture(self, loser):
        mine = Mine()
        assert not interact(mine, loser)
        assert loser.count("consume") == 0
        assert mine.owner == NEUTRAL_OWNER

    def test_win_consumes_then_captures(self, winner):
        mine = Mine()
        assert interact(mine, winner)
        assert [call[0] for call in winner.calls] == ["can_beat", "consume"]
        assert mine.owner == winner.id


class TestDispatchDwelling:
    """Capturable only."""

    @pytest.mark.parametrize("previous_owner", [NEUTRAL_OWNER, 1, 7, 42])
    def test_always_captured(self, winner, previous_owner):
        dwelling = Dwelling(owner=previous_owner)
        assert interact(dwelling, winner)
        assert dwelling.owner == winner.id

    def test_no_fight_needed(self, loser):
        dwelling = Dwelling()
        assert interact(dwelling, loser)
        assert loser.calls == []
        assert dwelling.owner == loser.id


class TestDispatchWithReferencePlayer:
    """End-to-end with the reference Player."""

    def test_strong_hero_takes_mine(self):
        hero = Player(player_id=3, army=Army(20))
        mine = Mine(army=Army(12), treasure=Treasure("ore", 2))
        assert interact(mine, hero)
        assert hero.alive
        assert hero.treasures == {"ore": 2}
        assert mine.owner == 3

    def test_weak_hero_dies_at_mine(self):
        hero = Player(player_id=3, army=Army(1))
        mine = Mine(army=Army(12))
        assert not interact(mine, hero)
        assert not hero.alive
        assert hero.treasures == {}
        assert mine.owner == NEUTRAL_OWNER

    def test_equal_strength_wins(self):
        hero = Player(player_id=3, army=Army(8))
        assert interact(Wolves(army=Army(8)), hero)
        assert hero.alive

    def test_dead_hero_cannot_beat_anything(self):
        hero = Player(player_id=3, army=Army(100))
        hero.die()
        assert not hero.can_beat(Army(0))

    def test_make_interaction_returns_nothing(self, hero):
        dwelling = Dwelling()
        assert make_interaction(hero, dwelling) is None
        assert dwelling.owner == hero.id


class TestDuckTypedMapObject:
    """The dispatcher only needs `interactions` and the capability data."""

    def test_plain_object(self, winner):
        class Shrine:
            interactions = (CONSUMABLE, CAPTURABLE)
            treasure = Treasure("mana", 1)
            owner = NEUTRAL_OWNER

        shrine = Shrine()
        assert interact(shrine, winner)
        assert winner.calls == [("consume", Treasure("mana", 1))]
        assert shrine.owner == winner.id
