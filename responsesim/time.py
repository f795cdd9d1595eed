from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, List


@dataclass
class Pacer:
    """Blocking display pauses between incidents and rounds.

    With ``enabled=False`` pauses are only recorded, which keeps tests and
    ``--fast`` runs instant.
    """

    enabled: bool = True
    sleep: Callable[[float], None] = time.sleep
    history: List[float] = field(default_factory=list)

    def pause(self, seconds: float) -> None:
        self.history.append(seconds)
        if self.enabled and seconds > 0:
            self.sleep(seconds)
