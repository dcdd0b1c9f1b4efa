from __future__ import annotations

import logging

from cozychristmas.common.constants import SEC_PER_TICK
from cozychristmas.common.types import Direction, EffectIntent, Scene
from cozychristmas.engine.engine import TickEngine
from cozychristmas.engine.state import RoundState

logger = logging.getLogger(__name__)


class TickScheduler:
    """Fixed-period tick gate decoupled from the frame rate.

    Starts due so the first frame of a round ticks immediately. At most one
    tick is issued per frame; the accumulator resets to zero on each tick.
    """

    def __init__(self, period: float = SEC_PER_TICK) -> None:
        self.period = period
        self.accumulated = period
        self.since_last_tick = 0.0

    def reset(self) -> None:
        self.accumulated = self.period
        self.since_last_tick = 0.0

    def advance(self, dt: float) -> float | None:
        """Return the real time covered by the tick that is due, if any."""
        due: float | None = None
        if self.accumulated >= self.period:
            due = self.since_last_tick
            self.accumulated = 0.0
            self.since_last_tick = 0.0
        self.accumulated += dt
        self.since_last_tick += dt
        return due


class GameSession:
    """One player's sequence of rounds, switching between play and game over."""

    def __init__(self, engine: TickEngine) -> None:
        self.engine = engine
        self.scheduler = TickScheduler(engine.tick_seconds)
        self.state: RoundState = engine.initialize_round()
        self.state.terminal = True
        self.scene = Scene.GAME_OVER
        self.pending_direction: Direction | None = None
        self.rounds_played = 0

    def start_round(self) -> RoundState:
        self.state = self.engine.initialize_round()
        self.scheduler.reset()
        self.pending_direction = None
        self.scene = Scene.PLAYING
        self.rounds_played += 1
        logger.info("Round %s started", self.rounds_played)
        return self.state

    def request(self, direction: Direction | None) -> None:
        """Remember the latest direction; it is applied at the next tick."""
        if direction is not None:
            self.pending_direction = direction

    def advance(self, dt: float) -> list[EffectIntent]:
        """Feed one frame's worth of real time; ticks when the period elapsed."""
        if self.scene != Scene.PLAYING:
            return []
        due = self.scheduler.advance(dt)
        if due is None:
            return []
        return self._run_tick(due)

    def step(self) -> list[EffectIntent]:
        """Force a single tick covering exactly one tick period."""
        if self.scene != Scene.PLAYING:
            return []
        self.scheduler.accumulated = 0.0
        self.scheduler.since_last_tick = 0.0
        return self._run_tick(self.engine.tick_seconds)

    def snapshot(self) -> dict:
        view = self.engine.render_view(self.state)
        view["scene"] = self.scene.value
        view["round"] = self.rounds_played
        return view

    def _run_tick(self, dt: float) -> list[EffectIntent]:
        direction = self.pending_direction
        self.pending_direction = None
        effects = self.engine.tick(self.state, direction, dt)
        if self.state.terminal:
            self.scene = Scene.GAME_OVER
        return effects
