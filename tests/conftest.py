from __future__ import annotations

from typing import Callable, Iterable, List, Sequence

import pytest

from responsesim.engines.rng import RNG
from responsesim.output.render import ConsoleRenderer
from responsesim.settings import SimulationSettings
from responsesim.time import Pacer


class SequenceRNG(RNG):
    """RNG stand-in that replays a fixed list of draws."""

    def __init__(self, draws: Iterable[int]) -> None:
        super().__init__(seed=None)
        self.draws: List[int] = list(draws)
        self.calls: List[int] = []

    def randrange(self, stop: int) -> int:
        if not self.draws:
            raise AssertionError("SequenceRNG ran out of draws")
        self.calls.append(stop)
        return self.draws.pop(0) % stop

    def choice(self, items: Sequence):
        items = list(items)
        return items[self.randrange(len(items))]


def scripted_reader(answers: Iterable[str]) -> Callable[[str], str]:
    pending = list(answers)

    def _read(_prompt: str) -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return _read


@pytest.fixture()
def make_renderer() -> Callable[..., ConsoleRenderer]:
    def _make(*answers: str) -> ConsoleRenderer:
        return ConsoleRenderer(reader=scripted_reader(answers), writer=lambda _line: None)

    return _make


@pytest.fixture()
def quiet_pacer() -> Pacer:
    return Pacer(enabled=False)


@pytest.fixture()
def settings() -> SimulationSettings:
    return SimulationSettings()


@pytest.fixture()
def sequence_rng() -> Callable[[Iterable[int]], SequenceRNG]:
    return SequenceRNG
