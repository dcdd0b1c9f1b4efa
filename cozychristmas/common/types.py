from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

Tile = Tuple[int, int]

NO_LINK: Tile = (-1, -1)


class TileKind(str, Enum):
    EMPTY = "empty"
    PICKUP = "pickup"
    HAZARD = "hazard"
    CHAIN_LINK = "chain_link"


class Direction(str, Enum):
    NORTH = "north"
    SOUTH = "south"
    WEST = "west"
    EAST = "east"


class EffectIntent(str, Enum):
    STEP = "step"
    PICKUP = "pickup"
    DELIVERED = "delivered"
    HURT = "hurt"
    SPAWN = "spawn"


class Scene(str, Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Cell:
    """Contents of one grid tile.

    ``link`` is only meaningful on chain cells; every other kind carries
    ``NO_LINK``.
    """

    kind: TileKind = TileKind.EMPTY
    link: Tile = NO_LINK


EMPTY_CELL = Cell()
