from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class InputRequest(BaseModel):
    direction: str


class ActorView(BaseModel):
    pos: Tuple[int, int]
    facing: str
    mirrored: bool = False


class ChainView(BaseModel):
    length: int
    head: Optional[Tuple[int, int]] = None
    tail: Optional[Tuple[int, int]] = None


class SpawnView(BaseModel):
    interval: float
    elapsed: float


class RoundStateResponse(BaseModel):
    tick: int
    terminal: bool
    scene: str
    round: int
    grid: List[List[str]]
    actor: ActorView
    chain: ChainView
    delivered: int
    spawn: SpawnView


class TickResponse(BaseModel):
    effects: List[str] = Field(default_factory=list)
    sounds: List[str] = Field(default_factory=list)
    state: RoundStateResponse
