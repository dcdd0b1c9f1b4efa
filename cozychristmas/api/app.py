from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from typing import Dict, List

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect, status
from fastapi.middleware.cors import CORSMiddleware

from cozychristmas.api.models import InputRequest, RoundStateResponse, TickResponse
from cozychristmas.common.config import settings
from cozychristmas.common.constants import SOUND_CUES
from cozychristmas.common.types import EffectIntent
from cozychristmas.engine.engine import TickEngine
from cozychristmas.engine.motion import parse_direction
from cozychristmas.engine.session import GameSession

app = FastAPI(title="Cozy Christmas")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger = logging.getLogger(__name__)

STATE_SEND_TIMEOUT = 1.0

session: GameSession | None = None
session_lock = asyncio.Lock()

state_clients: set[WebSocket] = set()
state_clients_lock = asyncio.Lock()


def _get_session() -> GameSession:
    assert session is not None
    return session


def _tick_payload(game: GameSession, effects: List[EffectIntent]) -> Dict[str, object]:
    return {
        "effects": [effect.value for effect in effects],
        "sounds": [SOUND_CUES[effect] for effect in effects],
        "state": game.snapshot(),
    }


@app.on_event("startup")
async def _startup() -> None:
    global session
    session = GameSession(TickEngine(seed=settings.random_seed))
    if settings.enable_tick_loop:
        asyncio.create_task(tick_loop())
    else:
        logger.warning("Tick loop disabled via COZY_ENABLE_TICK_LOOP")


async def tick_loop(clock: Callable[[], float] = time.monotonic) -> None:
    game = _get_session()
    last = clock()
    while True:
        now = clock()
        dt = now - last
        last = now
        async with session_lock:
            before = game.state.tick
            effects = game.advance(dt)
            ticked = game.state.tick != before
            payload = _tick_payload(game, effects) if ticked else None
        if payload is not None:
            await _broadcast_state(payload)
        await asyncio.sleep(settings.frame_seconds)


async def _send_state(ws: WebSocket, payload: Dict[str, object]) -> bool:
    try:
        await asyncio.wait_for(ws.send_json(payload), timeout=STATE_SEND_TIMEOUT)
        return True
    except Exception:
        logger.exception("Failed to send state update")
        return False


async def _broadcast_state(payload: Dict[str, object]) -> None:
    async with state_clients_lock:
        clients = list(state_clients)
    if not clients:
        return
    results = await asyncio.gather(
        *(_send_state(ws, payload) for ws in clients),
        return_exceptions=True,
    )
    stale = [ws for ws, ok in zip(clients, results) if ok is not True]
    if stale:
        async with state_clients_lock:
            for ws in stale:
                state_clients.discard(ws)


@app.post("/round", response_model=RoundStateResponse)
async def start_round() -> RoundStateResponse:
    game = _get_session()
    async with session_lock:
        game.start_round()
        data = game.snapshot()
    return RoundStateResponse(**data)


@app.post("/input")
async def send_input(req: InputRequest) -> Dict[str, str]:
    direction = parse_direction(req.direction)
    if direction is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid direction")
    game = _get_session()
    async with session_lock:
        game.request(direction)
    return {"status": "ok", "direction": direction.value}


@app.post("/tick", response_model=TickResponse)
async def force_tick() -> TickResponse:
    game = _get_session()
    async with session_lock:
        effects = game.step()
        payload = _tick_payload(game, effects)
    await _broadcast_state(payload)
    return TickResponse(**payload)


@app.get("/state", response_model=RoundStateResponse)
async def round_state() -> RoundStateResponse:
    game = _get_session()
    async with session_lock:
        data = game.snapshot()
    return RoundStateResponse(**data)


@app.websocket("/ws/state")
async def state_ws(ws: WebSocket) -> None:
    await ws.accept()
    game = _get_session()
    async with session_lock:
        initial = _tick_payload(game, [])
    async with state_clients_lock:
        state_clients.add(ws)
    try:
        await ws.send_json(initial)
        while True:
            try:
                await ws.receive_text()
            except WebSocketDisconnect:
                break
            except Exception:
                logger.exception("State websocket receive failed")
                break
    finally:
        async with state_clients_lock:
            state_clients.discard(ws)
