from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from responsesim.engines.dispatch import DispatchOutcome, DispatchResult, ScoreBoard
from responsesim.entities import EmergencyUnit, Incident


class ConsoleClosedError(RuntimeError):
    """Raised when input ends while a required answer is still outstanding."""


class ConsoleRenderer:
    """Line-oriented console used by the scheduler for prompts and reports.

    ``reader`` and ``writer`` default to :func:`input` and :func:`print`; tests
    swap them for scripted callables. Every emitted line (prompts included) is
    kept in ``lines`` so a run can be inspected afterwards.
    """

    def __init__(
        self,
        *,
        reader: Callable[[str], str] = input,
        writer: Callable[[str], None] = print,
    ) -> None:
        self._reader = reader
        self._writer = writer
        self.lines: List[str] = []

    # ------------------------------------------------------------------
    # Raw I/O
    # ------------------------------------------------------------------
    def write(self, text: str = "") -> None:
        self.lines.append(text)
        self._writer(text)

    def prompt(self, text: str) -> Optional[str]:
        """Ask for one line of input; ``None`` once input is exhausted."""
        self.lines.append(text)
        try:
            answer = self._reader(text)
        except EOFError:
            return None
        return answer.strip()

    # ------------------------------------------------------------------
    # Simulation views
    # ------------------------------------------------------------------
    def present_banner(self, roster: Sequence[EmergencyUnit], *, rounds: int, miss_chance_denominator: int) -> None:
        self.write("--- Emergency Response Simulation Starting ---")
        self.write(f"Available Units: {', '.join(unit.name for unit in roster)}")
        self.write(f"Simulation will run for {rounds} rounds.")
        self.write(
            f"There is a 1 in {miss_chance_denominator} chance a unit might fail to respond even if available."
        )
        self.write()

    def present_round_header(self, number: int) -> None:
        self.write(f"--- Round {number} ---")

    def read_round_choice(self, batch_size: int) -> Optional[str]:
        self.write("Choose incident generation method for this round:")
        self.write(f"  1. Generate {batch_size} Random Incidents")
        self.write("  2. Enter 1 Custom Incident")
        choice = self.prompt("Enter choice (1 or 2): ")
        self.write()
        return choice

    def present_incident(self, index: int, count: int, incident: Incident) -> None:
        self.write()
        self.write(f"Processing Incident {index}/{count}: {incident}")

    def present_dispatch(self, result: DispatchResult) -> None:
        if result.outcome is DispatchOutcome.HANDLED:
            result.unit.respond(result.incident, self)
            self.write(f"  Incident handled correctly! +{result.points} points.")
        elif result.outcome is DispatchOutcome.MISSED:
            self.write(f"  -> {result.unit.name} was available but FAILED to respond to the dispatch!")
            self.write(f"  Missed response! {result.points} points.")
        else:
            self.write(f"  -> No available unit can handle a {result.incident.type} incident!")
            self.write(f"  Incident could not be handled. {result.points} points.")

    def present_round_summary(self, number: int, score: int) -> None:
        self.write()
        self.write(f"--- End of Round {number} ---")
        self.write(f"Current Score: {score}")
        self.write()

    def present_final_summary(self, board: ScoreBoard) -> None:
        self.write("--- Simulation Ended ---")
        self.write(f"Final Score: {board.score}")
        self.write(
            f"Incidents: {board.total} | Handled: {board.handled} | "
            f"Missed: {board.missed} | Unhandled: {board.unhandled}"
        )

    def wait_for_exit(self) -> None:
        self.prompt("Press Enter to exit.")


__all__ = ["ConsoleRenderer", "ConsoleClosedError"]
