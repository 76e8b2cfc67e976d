"""Test that all modules can be imported."""


def test_core_imports():
    """Core modules should import cleanly."""
    from mapcraft.core.capabilities import Capability, HasArmy, HasTreasure, HasOwner
    from mapcraft.core.entities import Dwelling, Mine, Creeps, Wolves, ResourcePile
    from mapcraft.core.interactions import interact, make_interaction
    from mapcraft.core.events import event_bus, InteractionCompletedEvent
    from mapcraft.core.effects import LoggerHandler, OutcomeRecorder
    from mapcraft.core.player import Player


def test_package_reexports():
    """The core package should re-export the public names."""
    import mapcraft.core as core
    assert core.interact is not None
    assert core.Mine is not None
    assert core.Player is not None


def test_main_import():
    """Main module should import."""
    from mapcraft.main import main, Expedition


def test_default_stats_loaded():
    """Default stats should be available for every map object kind."""
    from mapcraft.config import MAP_OBJECT_STATS
    from mapcraft.core.entities import MAP_OBJECT_CLASSES
    assert set(MAP_OBJECT_STATS) == set(MAP_OBJECT_CLASSES)
