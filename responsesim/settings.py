from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator

from responsesim import config


class SimulationSettings(BaseModel):
    """Knobs for a single simulation run."""

    rounds: int = Field(default=config.TOTAL_ROUNDS, ge=1, description="Number of rounds to play")
    random_batch_size: int = Field(default=config.RANDOM_BATCH_SIZE, ge=1)
    miss_chance_denominator: int = Field(
        default=config.MISS_CHANCE_DENOMINATOR,
        ge=1,
        description="A capable unit misses the dispatch with probability 1/N",
    )
    incident_delay: float = Field(default=config.INCIDENT_DELAY, ge=0.0)
    round_delay: float = Field(default=config.ROUND_DELAY, ge=0.0)
    seed: Optional[int] = Field(default=None, description="Seed for deterministic RNG")
    locations_path: Optional[Path] = Field(default=None, description="YAML location catalogue")

    @field_validator("locations_path", mode="before")
    @classmethod
    def _blank_path_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


def _int_or_none(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    return int(raw)


def load_settings(env: Dict[str, str] | None = None) -> SimulationSettings:
    env = env if env is not None else os.environ
    return SimulationSettings(
        rounds=int(env.get("RESPONSESIM_ROUNDS", str(config.TOTAL_ROUNDS))),
        miss_chance_denominator=int(
            env.get("RESPONSESIM_MISS_CHANCE", str(config.MISS_CHANCE_DENOMINATOR))
        ),
        incident_delay=float(env.get("RESPONSESIM_INCIDENT_DELAY", str(config.INCIDENT_DELAY))),
        round_delay=float(env.get("RESPONSESIM_ROUND_DELAY", str(config.ROUND_DELAY))),
        seed=_int_or_none(env.get("RESPONSESIM_SEED")),
        locations_path=env.get("RESPONSESIM_LOCATIONS") or None,
    )


__all__ = ["SimulationSettings", "load_settings"]
