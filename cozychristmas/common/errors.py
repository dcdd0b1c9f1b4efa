from __future__ import annotations


class InvariantError(RuntimeError):
    """A programming error in the simulation state (never a gameplay outcome)."""
