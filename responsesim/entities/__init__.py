"""Entity definitions for the simulation."""

from .incident import Incident
from .units import Ambulance, EmergencyUnit, Firefighter, Police, default_roster

__all__ = [
    "Incident",
    "EmergencyUnit",
    "Police",
    "Firefighter",
    "Ambulance",
    "default_roster",
]
