from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from responsesim.engines.dispatch import DispatchOutcome, DispatchResult, ScoreBoard, resolve_dispatch
from responsesim.engines.generation import generate_round_incidents
from responsesim.engines.rng import RNG
from responsesim.entities import EmergencyUnit, Incident, default_roster
from responsesim.output.render import ConsoleRenderer
from responsesim.settings import SimulationSettings
from responsesim.time import Pacer

logger = logging.getLogger(__name__)


class RoundState(str, Enum):
    AWAITING_CHOICE = "awaiting_choice"
    GENERATING_INCIDENTS = "generating_incidents"
    PROCESSING_INCIDENT = "processing_incident"
    ROUND_COMPLETE = "round_complete"
    FINISHED = "finished"


@dataclass
class RoundSummary:
    number: int
    results: List[DispatchResult]
    score: int

    @property
    def points(self) -> int:
        return sum(result.points for result in self.results)

    def count(self, outcome: DispatchOutcome) -> int:
        return sum(1 for result in self.results if result.outcome is outcome)


@dataclass
class SimulationResult:
    score: int
    handled: int
    missed: int
    unhandled: int
    rounds: List[RoundSummary] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "score": self.score,
            "handled": self.handled,
            "missed": self.missed,
            "unhandled": self.unhandled,
            "rounds": [{"number": r.number, "points": r.points, "score": r.score} for r in self.rounds],
        }


@dataclass
class RoundScheduler:
    """Drives the rounds: asks for incidents, dispatches them and keeps score."""

    renderer: ConsoleRenderer
    rng: RNG
    locations: Sequence[str]
    settings: SimulationSettings = field(default_factory=SimulationSettings)
    pacer: Pacer = field(default_factory=Pacer)
    roster: Tuple[EmergencyUnit, ...] = field(default_factory=default_roster)

    def __post_init__(self) -> None:
        self.roster = tuple(self.roster)
        self.locations = tuple(self.locations)
        if not self.locations:
            raise ValueError("RoundScheduler needs at least one location")
        self.board = ScoreBoard()
        self.state: Optional[RoundState] = None

    @property
    def score(self) -> int:
        return self.board.score

    def run(self) -> SimulationResult:
        self.board = ScoreBoard()
        logger.info(
            "simulation.run.start",
            extra={"rounds": self.settings.rounds, "seed": self.rng.seed},
        )
        self.renderer.present_banner(
            self.roster,
            rounds=self.settings.rounds,
            miss_chance_denominator=self.settings.miss_chance_denominator,
        )

        summaries = [self.run_round(number) for number in range(1, self.settings.rounds + 1)]
        self.state = RoundState.FINISHED

        self.renderer.present_final_summary(self.board)
        logger.info("simulation.run.finished", extra={"score": self.board.score})
        return SimulationResult(
            score=self.board.score,
            handled=self.board.handled,
            missed=self.board.missed,
            unhandled=self.board.unhandled,
            rounds=summaries,
        )

    def run_round(self, number: int) -> RoundSummary:
        logger.info("round.start", extra={"round": number})
        self.renderer.present_round_header(number)

        self.state = RoundState.AWAITING_CHOICE
        choice = self.renderer.read_round_choice(self.settings.random_batch_size)

        self.state = RoundState.GENERATING_INCIDENTS
        incidents = generate_round_incidents(
            choice,
            rng=self.rng,
            locations=self.locations,
            renderer=self.renderer,
            batch_size=self.settings.random_batch_size,
        )

        self.renderer.write(f"Processing {len(incidents)} incident(s) for Round {number}:")
        results: List[DispatchResult] = []
        for index, incident in enumerate(incidents, start=1):
            self.state = RoundState.PROCESSING_INCIDENT
            self.renderer.present_incident(index, len(incidents), incident)
            result = self.process_incident(incident)
            results.append(result)
            if len(incidents) > 1:
                self.pacer.pause(self.settings.incident_delay)

        self.state = RoundState.ROUND_COMPLETE
        self.renderer.present_round_summary(number, self.board.score)
        logger.info("round.complete", extra={"round": number, "score": self.board.score})
        self.pacer.pause(self.settings.round_delay)
        return RoundSummary(number=number, results=results, score=self.board.score)

    def process_incident(self, incident: Incident) -> DispatchResult:
        result = resolve_dispatch(
            incident,
            self.roster,
            self.rng,
            miss_chance_denominator=self.settings.miss_chance_denominator,
        )
        self.board.apply(result)
        self.renderer.present_dispatch(result)
        return result


__all__ = ["RoundScheduler", "RoundState", "RoundSummary", "SimulationResult"]
