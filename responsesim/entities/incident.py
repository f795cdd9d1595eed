from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Incident:
    type: str
    location: str

    def __str__(self) -> str:
        return f"{self.type} incident at {self.location}"
