from __future__ import annotations

from cozychristmas.common.types import Direction, Tile
from cozychristmas.engine.grid import Grid

OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
    Direction.EAST: Direction.WEST,
}

KEY_MAP = {
    "n": Direction.NORTH,
    "s": Direction.SOUTH,
    "w": Direction.WEST,
    "e": Direction.EAST,
    "up": Direction.NORTH,
    "down": Direction.SOUTH,
    "left": Direction.WEST,
    "right": Direction.EAST,
}


def opposite(direction: Direction) -> Direction:
    return OPPOSITES[direction]


def resolve(facing: Direction, pos: Tile, grid: Grid) -> Tile:
    return grid.neighbor(pos, facing)


def request_facing(current: Direction, requested: Direction | None, chain_length: int) -> Direction:
    """Apply a direction request under the anti-reversal rule.

    While carrying anything, turning straight back would walk into the first
    chain link, so the exact opposite of ``current`` is ignored.
    """
    if requested is None:
        return current
    if chain_length > 0 and requested == opposite(current):
        return current
    return requested


def parse_direction(value: str | None) -> Direction | None:
    """Translate a direction name, n/s/e/w letter, or arrow name."""
    if not value:
        return None
    key = value.strip().lower()
    try:
        return Direction(key)
    except ValueError:
        return KEY_MAP.get(key)
