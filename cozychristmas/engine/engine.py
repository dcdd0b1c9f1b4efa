from __future__ import annotations

import logging
import random

from cozychristmas.common.constants import GRID_SIZE, SEC_PER_TICK
from cozychristmas.common.errors import InvariantError
from cozychristmas.common.types import EMPTY_CELL, Direction, EffectIntent, Tile, TileKind
from cozychristmas.engine import motion
from cozychristmas.engine.grid import Grid
from cozychristmas.engine.spawner import maybe_spawn
from cozychristmas.engine.state import Actor, RoundState, SpawnClock

logger = logging.getLogger(__name__)

TILE_LABELS = {
    TileKind.EMPTY: ".",
    TileKind.PICKUP: "$",
    TileKind.HAZARD: "^",
    TileKind.CHAIN_LINK: "@",
}

ACTOR_LABELS = {
    Direction.NORTH: "A",
    Direction.SOUTH: "V",
    Direction.WEST: "<",
    Direction.EAST: ">",
}


class TickEngine:
    """Per-tick state machine for a single round.

    The engine holds only the injected random source; all round data lives in
    the ``RoundState`` passed to ``tick``.
    """

    def __init__(self, seed: int | None = 42, tick_seconds: float = SEC_PER_TICK) -> None:
        self.rng = random.Random(seed)
        self.tick_seconds = tick_seconds

    def initialize_round(self) -> RoundState:
        """Fresh round: empty grid, actor at the start tile, empty chain."""
        state = RoundState(grid=Grid(GRID_SIZE), actor=Actor(), clock=SpawnClock())
        logger.debug("Round initialized at %s facing %s", state.actor.pos, state.actor.facing.value)
        return state

    def tick(
        self,
        state: RoundState,
        facing_request: Direction | None = None,
        dt: float | None = None,
    ) -> list[EffectIntent]:
        """Advance the round by one tick and return the effect intents it produced."""
        if state.terminal:
            return []
        if dt is None:
            dt = self.tick_seconds
        effects: list[EffectIntent] = []
        state.tick += 1

        actor = state.actor
        actor.facing = motion.request_facing(actor.facing, facing_request, state.chain.length)
        old = actor.pos
        actor.pos = motion.resolve(actor.facing, old, state.grid)

        kind = state.grid.kind_at(actor.pos)
        if kind == TileKind.EMPTY:
            self._step(state, old, effects)
        elif kind == TileKind.PICKUP:
            self._pickup(state, old, effects)
        elif kind == TileKind.CHAIN_LINK:
            self._end_round(state, "ran into own chain")
        elif kind == TileKind.HAZARD:
            self._hazard(state, old, effects)
        else:
            raise InvariantError(f"unmapped tile kind {kind!r} at {actor.pos}")

        state.clock.elapsed += dt
        spawned = maybe_spawn(state.clock, state.grid, actor.pos, self.rng)
        if spawned is not None:
            effects.append(EffectIntent.SPAWN)
        return effects

    def _step(self, state: RoundState, old: Tile, effects: list[EffectIntent]) -> None:
        if state.chain.length > 0:
            self._shift_chain(state, old)
        effects.append(EffectIntent.STEP)

    def _pickup(self, state: RoundState, old: Tile, effects: list[EffectIntent]) -> None:
        state.grid.set(state.actor.pos, EMPTY_CELL)
        state.chain.push_head(old)
        effects.append(EffectIntent.PICKUP)

    def _hazard(self, state: RoundState, old: Tile, effects: list[EffectIntent]) -> None:
        chain = state.chain
        if chain.length == 0:
            self._end_round(state, "entered a hazard empty-handed")
            effects.append(EffectIntent.HURT)
            return
        state.grid.set(state.actor.pos, EMPTY_CELL)
        carried = chain.length
        chain.drop_tail()
        # Delivering while still carrying also drags the remaining body forward.
        if carried > 1:
            self._shift_chain(state, old)
        state.delivered += 1
        effects.append(EffectIntent.DELIVERED)

    def _shift_chain(self, state: RoundState, old: Tile) -> None:
        state.chain.push_head(old)
        state.chain.drop_tail()

    def _end_round(self, state: RoundState, reason: str) -> None:
        state.terminal = True
        logger.info(
            "Round over after %s ticks (%s); delivered=%s", state.tick, reason, state.delivered
        )

    def render_view(self, state: RoundState) -> dict:
        """Render-layer snapshot of a round."""
        chain = state.chain
        return {
            "tick": state.tick,
            "terminal": state.terminal,
            "grid": render_grid(state),
            "actor": {
                "pos": state.actor.pos,
                "facing": state.actor.facing.value,
                "mirrored": state.actor.facing == Direction.EAST,
            },
            "chain": {
                "length": chain.length,
                "head": chain.head,
                "tail": chain.tail,
            },
            "delivered": state.delivered,
            "spawn": {
                "interval": state.clock.interval,
                "elapsed": state.clock.elapsed,
            },
        }


def render_grid(state: RoundState) -> list[list[str]]:
    """Text labels per tile, with the actor drawn over its tile."""
    rows = [[TILE_LABELS[kind] for kind in row] for row in state.grid.rows()]
    row, col = state.actor.pos
    rows[row][col] = ACTOR_LABELS[state.actor.facing]
    return rows
