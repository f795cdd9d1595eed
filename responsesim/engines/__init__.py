"""Simulation engines (RNG, dispatch, incident generation, scheduler)."""

from .dispatch import DispatchOutcome, DispatchResult, ScoreBoard, find_handler_unit, resolve_dispatch
from .rng import RNG

__all__ = [
    "RNG",
    "DispatchOutcome",
    "DispatchResult",
    "ScoreBoard",
    "find_handler_unit",
    "resolve_dispatch",
]
