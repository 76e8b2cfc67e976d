"""
MapCraft Events

Interactions publish events, handlers subscribe and react.
The dispatcher never knows who is listening.
"""
from dataclasses import dataclass
from collections import defaultdict
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, List, Any, Optional


# === Event Dataclasses ===

@dataclass
class InteractionResolvedEvent:
    """Fired after a single interaction policy ran."""
    kind: str          # "Mine", "Wolves", ...
    capability: str    # "BEATABLE", "CONSUMABLE", "CAPTURABLE"
    player_id: int
    success: bool


@dataclass
class InteractionCompletedEvent:
    """Fired once per dispatch, after the last policy that ran."""
    kind: str
    player_id: int
    success: bool
    steps_run: int     # Policies executed before stopping
    steps_total: int


@dataclass
class PlayerDefeatedEvent:
    """Fired when a player loses a fight against a map object."""
    player_id: int
    kind: str
    army: Any


@dataclass
class TreasureConsumedEvent:
    """Fired when a player loots a map object."""
    player_id: int
    kind: str
    treasure: Any


@dataclass
class MapObjectCapturedEvent:
    """Fired when a map object changes hands."""
    player_id: int
    kind: str
    previous_owner: int
    new_owner: int


# === EventBus ===

class EventBus:
    """Routes each event to the handlers registered for its exact type.

    Handlers run synchronously, in subscription order. While recording,
    every published event is also kept in `history`.
    """

    def __init__(self):
        self._handlers: Dict[type, List[Callable]] = defaultdict(list)
        self.history: Optional[List[Any]] = None  # None = not recording

    def subscribe(self, event_type: type, handler: Callable) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type, handler: Callable) -> None:
        """Unknown handlers are ignored."""
        if handler in self._handlers.get(event_type, ()):
            self._handlers[event_type].remove(handler)

    def subscriber_count(self, event_type: type) -> int:
        return len(self._handlers.get(event_type, ()))

    def publish(self, event: Any) -> None:
        if self.history is not None:
            self.history.append(event)
        # Copy: a handler may unsubscribe itself
        for handler in tuple(self._handlers.get(type(event), ())):
            handler(event)

    def clear(self) -> None:
        """Drop all handlers. A running recording keeps going."""
        self._handlers.clear()

    def start_recording(self) -> None:
        self.history = []

    def stop_recording(self) -> List[Any]:
        """Stop recording and return what was published meanwhile."""
        recorded, self.history = self.history or [], None
        return recorded

    @contextmanager
    def recording(self) -> Iterator[List[Any]]:
        """Record events published inside the with-block.

            with bus.recording() as history:
                interact(mine, player, bus=bus)
        """
        self.start_recording()
        history = self.history
        try:
            yield history
        finally:
            self.stop_recording()


# Global EventBus instance
event_bus = EventBus()
