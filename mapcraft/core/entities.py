"""
MapCraft Entities - Map Objects

Each map object declares its capabilities and the matching interactions,
in effect order:

    MapObject (Basis)
    ├── Dwelling      capturable
    ├── Mine          beatable, consumable, capturable
    ├── Creeps        beatable, consumable
    ├── Wolves        beatable
    └── ResourcePile  consumable

Default armies and treasures are loaded from map_objects.json.
"""
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ..config import MAP_OBJECT_STATS, NEUTRAL_OWNER
from .capabilities import Capability, PROJECTIONS
from .interactions import Interaction, policies_for


@dataclass(frozen=True)
class Army:
    """Guards of a map object. Only the player knows how to compare it."""
    strength: int


@dataclass(frozen=True)
class Treasure:
    """Loot of a map object."""
    resource: str  # "gold", "ore", "wood", ...
    amount: int


def _default_army(kind: str) -> Army:
    return Army(**MAP_OBJECT_STATS[kind]["army"])


def _default_treasure(kind: str) -> Treasure:
    return Treasure(**MAP_OBJECT_STATS[kind]["treasure"])


class MapObject:
    """Base class for everything a player can visit on the map.

    Subclasses declare CAPABILITIES and INTERACTIONS (same order) and set
    their capability data before calling super().__init__(), which checks
    that the interactions match the capabilities exactly.
    """

    CAPABILITIES: Tuple[Capability, ...] = ()
    INTERACTIONS: Tuple[Interaction, ...] = ()

    def __init__(self, interactions: Optional[Iterable[Interaction]] = None):
        if interactions is None:
            interactions = self.INTERACTIONS
        self._interactions = tuple(interactions)
        self._check_interactions()

    @property
    def interactions(self) -> Tuple[Interaction, ...]:
        """Interactions in effect order. Fixed at construction."""
        return self._interactions

    @property
    def capabilities(self) -> Tuple[Capability, ...]:
        return self.CAPABILITIES

    @property
    def kind(self) -> str:
        return self.__class__.__name__

    def has(self, capability: Capability) -> bool:
        return capability in self.CAPABILITIES

    def _check_interactions(self) -> None:
        """Raise ValueError unless there is exactly one interaction per
        capability, in capability order, and the data for each is present."""
        declared = self.CAPABILITIES
        if list(declared) != sorted(set(declared)):
            raise ValueError(
                f"{self.kind}: capabilities must be unique and in effect order, "
                f"got {[c.name for c in declared]}"
            )

        actual = tuple(getattr(i, "capability", None) for i in self._interactions)
        if actual != declared:
            raise ValueError(
                f"{self.kind}: interactions {list(self._interactions)} "
                f"do not match capabilities {[c.name for c in declared]}"
            )

        for capability in declared:
            if not isinstance(self, PROJECTIONS[capability]):
                raise ValueError(f"{self.kind}: {capability.name} without its data")


class Dwelling(MapObject):
    """Recruitment building. Whoever visits it owns it."""

    CAPABILITIES = (Capability.CAPTURABLE,)
    INTERACTIONS = policies_for(CAPABILITIES)

    def __init__(self, owner: int = NEUTRAL_OWNER,
                 interactions: Optional[Iterable[Interaction]] = None):
        self.owner = owner
        super().__init__(interactions)


class Mine(MapObject):
    """Guarded mine: beat the guards, take the output, capture it."""

    CAPABILITIES = (Capability.BEATABLE, Capability.CONSUMABLE, Capability.CAPTURABLE)
    INTERACTIONS = policies_for(CAPABILITIES)

    def __init__(self, army: Optional[Army] = None, treasure: Optional[Treasure] = None,
                 owner: int = NEUTRAL_OWNER,
                 interactions: Optional[Iterable[Interaction]] = None):
        self.army = army if army is not None else _default_army("Mine")
        self.treasure = treasure if treasure is not None else _default_treasure("Mine")
        self.owner = owner
        super().__init__(interactions)


class Creeps(MapObject):
    """Wandering monsters guarding some loot."""

    CAPABILITIES = (Capability.BEATABLE, Capability.CONSUMABLE)
    INTERACTIONS = policies_for(CAPABILITIES)

    def __init__(self, army: Optional[Army] = None, treasure: Optional[Treasure] = None,
                 interactions: Optional[Iterable[Interaction]] = None):
        self.army = army if army is not None else _default_army("Creeps")
        self.treasure = treasure if treasure is not None else _default_treasure("Creeps")
        super().__init__(interactions)


class Wolves(MapObject):
    """A pack of wolves. Nothing to gain, only a fight to survive."""

    CAPABILITIES = (Capability.BEATABLE,)
    INTERACTIONS = policies_for(CAPABILITIES)

    def __init__(self, army: Optional[Army] = None,
                 interactions: Optional[Iterable[Interaction]] = None):
        self.army = army if army is not None else _default_army("Wolves")
        super().__init__(interactions)


class ResourcePile(MapObject):
    """Unguarded pile of resources."""

    CAPABILITIES = (Capability.CONSUMABLE,)
    INTERACTIONS = policies_for(CAPABILITIES)

    def __init__(self, treasure: Optional[Treasure] = None,
                 interactions: Optional[Iterable[Interaction]] = None):
        self.treasure = treasure if treasure is not None else _default_treasure("ResourcePile")
        super().__init__(interactions)


MAP_OBJECT_CLASSES = {
    "Dwelling": Dwelling,
    "Mine": Mine,
    "Creeps": Creeps,
    "Wolves": Wolves,
    "ResourcePile": ResourcePile,
}


# Factory function for creating map objects
def create_map_object(kind: str, **data) -> MapObject:
    """Factory function to create map objects by kind name."""
    if kind not in MAP_OBJECT_CLASSES:
        raise ValueError(f"Unknown map object kind: {kind}")
    return MAP_OBJECT_CLASSES[kind](**data)
