from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from responsesim import config
from responsesim.engines.rng import RNG
from responsesim.entities import EmergencyUnit, Incident

logger = logging.getLogger(__name__)


class DispatchOutcome(str, Enum):
    HANDLED = "handled"
    MISSED = "missed"
    UNHANDLED = "unhandled"

    @property
    def points(self) -> int:
        if self is DispatchOutcome.HANDLED:
            return config.HANDLED_POINTS
        if self is DispatchOutcome.MISSED:
            return config.MISSED_PENALTY
        return config.UNHANDLED_PENALTY


@dataclass(frozen=True)
class DispatchResult:
    incident: Incident
    outcome: DispatchOutcome
    unit: Optional[EmergencyUnit] = None

    @property
    def points(self) -> int:
        return self.outcome.points


@dataclass
class ScoreBoard:
    score: int = 0
    handled: int = 0
    missed: int = 0
    unhandled: int = 0

    def apply(self, result: DispatchResult) -> int:
        self.score += result.points
        if result.outcome is DispatchOutcome.HANDLED:
            self.handled += 1
        elif result.outcome is DispatchOutcome.MISSED:
            self.missed += 1
        else:
            self.unhandled += 1
        return self.score

    @property
    def total(self) -> int:
        return self.handled + self.missed + self.unhandled


def find_handler_unit(incident: Incident, roster: Sequence[EmergencyUnit]) -> Optional[EmergencyUnit]:
    """Return the first unit in roster order able to take the incident, if any."""
    for unit in roster:
        if unit.can_handle(incident.type):
            return unit
    return None


def resolve_dispatch(
    incident: Incident,
    roster: Sequence[EmergencyUnit],
    rng: RNG,
    *,
    miss_chance_denominator: int = config.MISS_CHANCE_DENOMINATOR,
) -> DispatchResult:
    """Pick a handler and roll the miss chance.

    The RNG is only consulted when a handler exists, so an unhandled incident
    never consumes a draw.
    """
    unit = find_handler_unit(incident, roster)
    if unit is None:
        result = DispatchResult(incident=incident, outcome=DispatchOutcome.UNHANDLED)
    elif rng.randrange(miss_chance_denominator) == 0:
        result = DispatchResult(incident=incident, outcome=DispatchOutcome.MISSED, unit=unit)
    else:
        result = DispatchResult(incident=incident, outcome=DispatchOutcome.HANDLED, unit=unit)
    logger.debug(
        "incident.dispatched",
        extra={
            "incident": str(incident),
            "unit": unit.name if unit else None,
            "outcome": result.outcome.value,
        },
    )
    return result


__all__ = [
    "DispatchOutcome",
    "DispatchResult",
    "ScoreBoard",
    "find_handler_unit",
    "resolve_dispatch",
]
