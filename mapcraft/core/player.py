"""
MapCraft Player - reference implementation

The interaction core only needs `id`, can_beat(), die() and consume().
Any object with those members works as a player.
"""
from typing import Dict, Optional


class Player:
    """A hero visiting map objects."""

    def __init__(self, player_id: int, army, treasures: Optional[Dict[str, int]] = None):
        self.id = player_id
        self.army = army
        self.alive = True
        self.treasures: Dict[str, int] = dict(treasures or {})

    def can_beat(self, army) -> bool:
        """True if our army is at least as strong as theirs."""
        return self.alive and self.army.strength >= army.strength

    def die(self) -> None:
        self.alive = False

    def consume(self, treasure) -> None:
        """Add treasure to our holdings."""
        self.treasures[treasure.resource] = self.treasures.get(treasure.resource, 0) + treasure.amount
