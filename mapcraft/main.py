#!/usr/bin/env python3
"""
MapCraft - Expedition Demo
==========================

Run with: python -m mapcraft.main [--strength N] [--verbose] KIND [KIND ...]

Sends one hero through a row of map objects, in the given order.
The expedition ends early if the hero loses a fight.
"""
import argparse
import sys
from typing import List, Optional

from mapcraft.config import DEFAULT_PLAYER_STRENGTH, PLAYER_ONE
from mapcraft.core.entities import Army, MapObject, MAP_OBJECT_CLASSES, create_map_object
from mapcraft.core.effects import LoggerHandler, OutcomeRecorder
from mapcraft.core.events import EventBus
from mapcraft.core.interactions import interact
from mapcraft.core.player import Player


class Expedition:
    """One player visiting a list of map objects.

    Each expedition has its own EventBus, so its handlers only see its
    own visits.
    """

    def __init__(self, player: Player, map_objects: List[MapObject], verbose: bool = False,
                 bus: Optional[EventBus] = None):
        self.player = player
        self.map_objects = map_objects
        self.bus = bus or EventBus()
        self.logger = LoggerHandler(verbose=verbose, bus=self.bus)
        self.recorder = OutcomeRecorder(bus=self.bus)
        self.results: List[bool] = []  # One entry per visited map object

    def run(self) -> bool:
        """Visit every map object until the player dies. True if all visits succeeded."""
        for map_object in self.map_objects:
            if not self.player.alive:
                break
            ok = interact(map_object, self.player, bus=self.bus)
            self.results.append(ok)
            print(f"{map_object.kind}: {'success' if ok else 'failure'}")
        return all(self.results) and self.player.alive

    @property
    def visited(self) -> int:
        return len(self.results)

    def cleanup(self) -> None:
        """Detach handlers from the event bus."""
        self.logger.detach()
        self.recorder.detach()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='MapCraft expedition demo')
    parser.add_argument('kinds', nargs='+', choices=sorted(MAP_OBJECT_CLASSES),
                        metavar='KIND', help='Map objects to visit, in order')
    parser.add_argument('--strength', type=int, default=DEFAULT_PLAYER_STRENGTH,
                        help='Army strength of the hero')
    parser.add_argument('--player-id', type=int, default=PLAYER_ONE,
                        help='Id stamped on captured map objects')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log every interaction')
    args = parser.parse_args(argv)

    player = Player(args.player_id, Army(args.strength))
    expedition = Expedition(
        player,
        [create_map_object(kind) for kind in args.kinds],
        verbose=args.verbose,
    )
    try:
        expedition.run()
    finally:
        expedition.cleanup()

    visited = expedition.visited
    print(f"\nVisited {visited}/{len(args.kinds)} map objects")
    if player.treasures:
        loot = ", ".join(f"{amount} {resource}" for resource, amount in sorted(player.treasures.items()))
        print(f"Loot: {loot}")

    if player.alive:
        print("The hero survived!")
        return 0
    print("The hero was defeated.")
    return 1


if __name__ == '__main__':
    sys.exit(main())
