"""MapCraft Core - Interaction Logic"""
from .capabilities import Capability, HasArmy, HasTreasure, HasOwner
from .interactions import (
    Interaction,
    BeatableInteraction,
    ConsumableInteraction,
    CapturableInteraction,
    interact,
    make_interaction,
)
from .entities import (
    Army,
    Treasure,
    MapObject,
    Dwelling,
    Mine,
    Creeps,
    Wolves,
    ResourcePile,
    create_map_object,
)
from .player import Player
from .events import (
    event_bus,
    InteractionResolvedEvent,
    InteractionCompletedEvent,
    PlayerDefeatedEvent,
    TreasureConsumedEvent,
    MapObjectCapturedEvent,
)
