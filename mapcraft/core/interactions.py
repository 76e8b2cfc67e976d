"""
MapCraft Interactions

One stateless policy per capability, shared by every map object that has
the capability. A policy performs one effect and reports success.

interact() runs a map object's policies in their fixed order and stops at
the first failure: a hero who loses the fight against a Mine neither loots
nor captures it.
"""
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .capabilities import Capability, HasArmy, HasTreasure, HasOwner
from .events import (
    event_bus,
    EventBus,
    InteractionResolvedEvent,
    InteractionCompletedEvent,
    PlayerDefeatedEvent,
    TreasureConsumedEvent,
    MapObjectCapturedEvent,
)


class Interaction:
    """Base class for interaction policies.

    Subclasses set `capability` and implement make(). Policies hold no
    state, so one instance serves all map objects. Events go to `bus`,
    or to the global event_bus when none is given.
    """

    capability: Capability

    def make(self, player: Any, map_object: Any, bus: Optional[EventBus] = None) -> bool:
        """Apply the effect to player/map_object. Returns True on success."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class BeatableInteraction(Interaction):
    """Fight the map object's army. Losing kills the player."""

    capability = Capability.BEATABLE

    def make(self, player: Any, map_object: HasArmy, bus: Optional[EventBus] = None) -> bool:
        if player.can_beat(map_object.army):
            return True

        player.die()
        (bus or event_bus).publish(PlayerDefeatedEvent(
            player_id=player.id,
            kind=type(map_object).__name__,
            army=map_object.army,
        ))
        return False


class ConsumableInteraction(Interaction):
    """Hand the map object's treasure to the player. Never fails.

    The treasure stays on the map object; removing it is up to whoever
    owns the map.
    """

    capability = Capability.CONSUMABLE

    def make(self, player: Any, map_object: HasTreasure, bus: Optional[EventBus] = None) -> bool:
        player.consume(map_object.treasure)
        (bus or event_bus).publish(TreasureConsumedEvent(
            player_id=player.id,
            kind=type(map_object).__name__,
            treasure=map_object.treasure,
        ))
        return True


class CapturableInteraction(Interaction):
    """Make the player the map object's owner. Never fails."""

    capability = Capability.CAPTURABLE

    def make(self, player: Any, map_object: HasOwner, bus: Optional[EventBus] = None) -> bool:
        previous_owner = map_object.owner
        map_object.owner = player.id
        (bus or event_bus).publish(MapObjectCapturedEvent(
            player_id=player.id,
            kind=type(map_object).__name__,
            previous_owner=previous_owner,
            new_owner=map_object.owner,
        ))
        return True


# Shared policy instances
BEATABLE = BeatableInteraction()
CONSUMABLE = ConsumableInteraction()
CAPTURABLE = CapturableInteraction()

POLICIES: Dict[Capability, Interaction] = {
    Capability.BEATABLE: BEATABLE,
    Capability.CONSUMABLE: CONSUMABLE,
    Capability.CAPTURABLE: CAPTURABLE,
}


def policies_for(capabilities: Iterable[Capability]) -> Tuple[Interaction, ...]:
    """Shared policies for the given capabilities, in the same order."""
    return tuple(POLICIES[capability] for capability in capabilities)


class _PendingEvents:
    """Collects events during a dispatch; flushed once all effects are done."""

    def __init__(self):
        self.events: List[Any] = []

    def publish(self, event: Any) -> None:
        self.events.append(event)


def interact(map_object: Any, player: Any, bus: Optional[EventBus] = None) -> bool:
    """Run all interactions of map_object for player, in order.

    Stops at the first interaction that fails. Returns True only if
    every interaction succeeded.

    Events are held back until the last interaction ran and then
    published to `bus` (default: the global event_bus) in effect order.
    A failing handler therefore never interrupts the effects themselves.
    """
    bus = bus or event_bus
    pending = _PendingEvents()
    kind = type(map_object).__name__
    interactions = map_object.interactions
    steps_run = 0
    success = True

    for interaction in interactions:
        steps_run += 1
        ok = interaction.make(player, map_object, bus=pending)
        pending.publish(InteractionResolvedEvent(
            kind=kind,
            capability=interaction.capability.name,
            player_id=player.id,
            success=ok,
        ))
        if not ok:
            success = False
            break

    pending.publish(InteractionCompletedEvent(
        kind=kind,
        player_id=player.id,
        success=success,
        steps_run=steps_run,
        steps_total=len(interactions),
    ))
    for event in pending.events:
        bus.publish(event)
    return success


def make_interaction(player: Any, map_object: Any) -> None:
    """Fire-and-forget entry point: visit map_object with player."""
    interact(map_object, player)
