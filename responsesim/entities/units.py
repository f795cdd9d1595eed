from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Tuple

from .incident import Incident

if TYPE_CHECKING:
    from responsesim.output.render import ConsoleRenderer


class EmergencyUnit(ABC):
    """A responder that handles exactly one kind of incident."""

    specialty: str = ""
    action: str = ""

    def __init__(self, name: str, speed: int) -> None:
        self.name = name
        # Display only; dispatch ignores it.
        self.speed = speed

    @abstractmethod
    def can_handle(self, incident_type: str) -> bool:
        ...

    def respond(self, incident: Incident, renderer: "ConsoleRenderer") -> None:
        renderer.write(f"  -> {self.name} responding to {incident}. {self.action}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, speed={self.speed})"


class _SpecialistUnit(EmergencyUnit):
    def can_handle(self, incident_type: str) -> bool:
        return incident_type.casefold() == self.specialty.casefold()


class Police(_SpecialistUnit):
    specialty = "Crime"
    action = "Securing the area."

    def __init__(self) -> None:
        super().__init__("Police Unit", 80)


class Firefighter(_SpecialistUnit):
    specialty = "Fire"
    action = "Extinguishing the fire."

    def __init__(self) -> None:
        super().__init__("Fire Engine", 60)


class Ambulance(_SpecialistUnit):
    specialty = "Medical"
    action = "Providing medical assistance."

    def __init__(self) -> None:
        super().__init__("Ambulance", 70)


def default_roster() -> Tuple[EmergencyUnit, ...]:
    """One unit of each kind, in dispatch order."""
    return (Police(), Firefighter(), Ambulance())
