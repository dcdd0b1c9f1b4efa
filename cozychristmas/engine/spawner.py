from __future__ import annotations

import logging
import random

from cozychristmas.common.constants import (
    PICKUP_ROLL_MAX,
    SPAWN_DIFFICULTY_COEFFICIENT,
    SPAWN_INTERVAL_MIN,
)
from cozychristmas.common.types import Cell, Tile, TileKind
from cozychristmas.engine.grid import Grid
from cozychristmas.engine.state import SpawnClock

logger = logging.getLogger(__name__)


def maybe_spawn(
    clock: SpawnClock, grid: Grid, actor_pos: Tile, rng: random.Random
) -> tuple[Tile, TileKind] | None:
    """Place a pickup or hazard once the spawn clock runs out.

    The clock always decays and resets when it fires, even if the grid has
    no free tile to place anything on.
    """
    if clock.elapsed < clock.interval:
        return None
    placed: tuple[Tile, TileKind] | None = None
    candidates = grid.empty_tiles(exclude=actor_pos)
    if candidates:
        tile = candidates[rng.randint(0, len(candidates) - 1)]
        kind = TileKind.PICKUP if rng.randint(1, 100) <= PICKUP_ROLL_MAX else TileKind.HAZARD
        grid.set(tile, Cell(kind))
        placed = (tile, kind)
        logger.debug("Spawned %s at %s", kind.value, tile)
    clock.interval = shrink_interval(clock.interval)
    clock.elapsed = 0.0
    return placed


def shrink_interval(interval: float) -> float:
    interval -= SPAWN_DIFFICULTY_COEFFICIENT * interval
    return max(interval, SPAWN_INTERVAL_MIN)
