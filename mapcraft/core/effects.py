"""
MapCraft Effects - Event Handlers

Handlers subscribe to interaction events on the EventBus.
The interactions never call them directly.
"""
from dataclasses import dataclass
from typing import List, Optional

from .events import (
    event_bus,
    EventBus,
    InteractionResolvedEvent,
    InteractionCompletedEvent,
    PlayerDefeatedEvent,
    TreasureConsumedEvent,
    MapObjectCapturedEvent,
)


class LoggerHandler:
    """Simple handler that logs interaction events to console."""

    def __init__(self, verbose: bool = False, bus: Optional[EventBus] = None):
        self.verbose = verbose
        self.bus = bus or event_bus
        self._subscriptions = [(PlayerDefeatedEvent, self.on_defeat)]
        if verbose:
            self._subscriptions += [
                (InteractionResolvedEvent, self.on_interaction),
                (TreasureConsumedEvent, self.on_loot),
                (MapObjectCapturedEvent, self.on_capture),
            ]
        for event_type, handler in self._subscriptions:
            self.bus.subscribe(event_type, handler)

    def detach(self) -> None:
        """Stop listening to the bus."""
        for event_type, handler in self._subscriptions:
            self.bus.unsubscribe(event_type, handler)

    def on_defeat(self, event: PlayerDefeatedEvent) -> None:
        print(f"[DEFEAT] Player {event.player_id} was beaten by {event.kind} ({event.army})")

    def on_interaction(self, event: InteractionResolvedEvent) -> None:
        status = "ok" if event.success else "failed"
        print(f"[INTERACT] Player {event.player_id} -> {event.kind}: {event.capability} {status}")

    def on_loot(self, event: TreasureConsumedEvent) -> None:
        print(f"[LOOT] Player {event.player_id} took {event.treasure} from {event.kind}")

    def on_capture(self, event: MapObjectCapturedEvent) -> None:
        print(f"[CAPTURE] Player {event.player_id} captured {event.kind} (was owner {event.previous_owner})")


@dataclass
class VisitOutcome:
    """Result of one dispatch, as seen on the bus."""
    kind: str
    player_id: int
    success: bool
    steps_run: int
    steps_total: int


class OutcomeRecorder:
    """Keeps the results of all dispatches for summaries."""

    def __init__(self, bus: Optional[EventBus] = None):
        self.bus = bus or event_bus
        self.outcomes: List[VisitOutcome] = []
        self.bus.subscribe(InteractionCompletedEvent, self.on_completed)

    def detach(self) -> None:
        self.bus.unsubscribe(InteractionCompletedEvent, self.on_completed)

    def on_completed(self, event: InteractionCompletedEvent) -> None:
        self.outcomes.append(VisitOutcome(
            kind=event.kind,
            player_id=event.player_id,
            success=event.success,
            steps_run=event.steps_run,
            steps_total=event.steps_total,
        ))

    def get_recent(self, count: int = 10) -> List[VisitOutcome]:
        """Get most recent outcomes."""
        return self.outcomes[-count:]

    def success_rate(self) -> float:
        """Share of successful dispatches, 0.0 if nothing was recorded."""
        if not self.outcomes:
            return 0.0
        return sum(1 for o in self.outcomes if o.success) / len(self.outcomes)
