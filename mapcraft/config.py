"""
MapCraft Configuration
Contains game constants, file paths, and default map object stats.
"""
import json
from pathlib import Path

# Paths
PROJECT_ROOT = Path(__file__).parent
DATA_DIR = PROJECT_ROOT / "data"

# Owners
NEUTRAL_OWNER = 0  # Nobody has captured the object yet
PLAYER_ONE = 1

# Reference player
DEFAULT_PLAYER_STRENGTH = 10


def load_map_object_stats() -> dict:
    """Load default army/treasure per kind from map_objects.json"""
    with open(DATA_DIR / "map_objects.json", "r") as f:
        return json.load(f)


# Pre-load stats for convenience (used by entities.py)
MAP_OBJECT_STATS = load_map_object_stats()
