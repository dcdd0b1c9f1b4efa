from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env_bool(value: str, default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off"}


def _parse_origins(value: str | None) -> list[str]:
    if not value:
        return [
            "http://localhost:8000",
            "http://127.0.0.1:8000",
        ]
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the local front-end bridge, loaded from env vars.

    Gameplay constants (grid size, tick period, spawn pacing) are fixed in
    ``cozychristmas.common.constants`` and are not configurable here.
    """

    random_seed: int = int(os.getenv("COZY_RANDOM_SEED", "42"))
    frame_seconds: float = float(os.getenv("COZY_FRAME_SECONDS", str(1.0 / 60.0)))
    enable_tick_loop: bool = _env_bool(os.getenv("COZY_ENABLE_TICK_LOOP", "1"))
    cors_origins: list[str] = field(
        default_factory=lambda: _parse_origins(os.getenv("COZY_CORS_ORIGINS"))
    )


settings = Settings()
