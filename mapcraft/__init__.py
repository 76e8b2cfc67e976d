"""
MapCraft
Map objects a hero can fight, loot and capture.

Features:
- 3 capabilities (Beatable, Consumable, Capturable)
- 5 map objects (Dwelling, Mine, Creeps, Wolves, ResourcePile)
- Ordered interaction dispatch with short-circuit on a lost fight
- Interaction events on the EventBus
"""

__version__ = "0.1.0"
