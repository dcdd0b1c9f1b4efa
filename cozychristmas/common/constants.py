from __future__ import annotations

from cozychristmas.common.types import Direction, EffectIntent, Tile

GRID_SIZE = 8

SEC_PER_TICK = 0.5

SPAWN_INTERVAL_START = 2.0
SPAWN_DIFFICULTY_COEFFICIENT = 0.01
SPAWN_INTERVAL_MIN = 0.5

# 1..100 roll at or below this places a pickup, otherwise a hazard
PICKUP_ROLL_MAX = 50

ACTOR_START: Tile = (0, 0)
ACTOR_START_FACING = Direction.EAST

DIRECTION_DELTAS: dict[Direction, Tile] = {
    Direction.NORTH: (-1, 0),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
    Direction.EAST: (0, 1),
}

SOUND_CUES: dict[EffectIntent, str] = {
    EffectIntent.STEP: "step.wav",
    EffectIntent.PICKUP: "gift.wav",
    EffectIntent.DELIVERED: "house.wav",
    EffectIntent.HURT: "hurt.wav",
    EffectIntent.SPAWN: "spawn.wav",
}
