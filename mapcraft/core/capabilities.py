"""
MapCraft Capabilities

A capability is one facet a map object may have. Interactions only look at
the attribute the capability guarantees, never at the concrete object type:

    BEATABLE   -> army      (fight it)
    CONSUMABLE -> treasure  (loot it)
    CAPTURABLE -> owner     (take it over)

The enum order is the effect order: combat resolves before looting,
looting before capture.
"""
from enum import IntEnum
from typing import Any, Dict, Protocol, runtime_checkable


class Capability(IntEnum):
    """Closed set of capability tags, in effect order."""
    BEATABLE = 1
    CONSUMABLE = 2
    CAPTURABLE = 3


@runtime_checkable
class HasArmy(Protocol):
    """Anything with an army that can be fought."""
    army: Any


@runtime_checkable
class HasTreasure(Protocol):
    """Anything with a treasure that can be taken."""
    treasure: Any


@runtime_checkable
class HasOwner(Protocol):
    """Anything whose owner can be reassigned."""
    owner: int


PROJECTIONS: Dict[Capability, type] = {
    Capability.BEATABLE: HasArmy,
    Capability.CONSUMABLE: HasTreasure,
    Capability.CAPTURABLE: HasOwner,
}
