from __future__ import annotations

from dataclasses import dataclass, field

from cozychristmas.common.constants import (
    ACTOR_START,
    ACTOR_START_FACING,
    GRID_SIZE,
    SPAWN_INTERVAL_START,
)
from cozychristmas.common.types import Direction, Tile
from cozychristmas.engine.chain import Chain
from cozychristmas.engine.grid import Grid


@dataclass
class Actor:
    pos: Tile = ACTOR_START
    facing: Direction = ACTOR_START_FACING


@dataclass
class SpawnClock:
    interval: float = SPAWN_INTERVAL_START
    elapsed: float = 0.0


@dataclass
class RoundState:
    grid: Grid = field(default_factory=lambda: Grid(GRID_SIZE))
    actor: Actor = field(default_factory=Actor)
    clock: SpawnClock = field(default_factory=SpawnClock)
    chain: Chain = field(init=False)
    terminal: bool = False
    tick: int = 0
    delivered: int = 0

    def __post_init__(self) -> None:
        self.chain = Chain(self.grid)
