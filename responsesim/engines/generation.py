from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from responsesim import config
from responsesim.engines.rng import RNG
from responsesim.entities import Incident
from responsesim.output.render import ConsoleClosedError, ConsoleRenderer

logger = logging.getLogger(__name__)


def generate_random_incident(rng: RNG, locations: Sequence[str]) -> Incident:
    incident_type = rng.choice(config.INCIDENT_TYPES)
    location = rng.choice(locations)
    return Incident(incident_type, location)


def generate_random_incidents(
    rng: RNG,
    locations: Sequence[str],
    count: int = config.RANDOM_BATCH_SIZE,
) -> List[Incident]:
    return [generate_random_incident(rng, locations) for _ in range(count)]


def normalise_incident_type(raw: str) -> Optional[str]:
    """Map user input onto a canonical incident type, or ``None``."""
    cleaned = raw.strip()
    for incident_type in config.INCIDENT_TYPES:
        if cleaned.casefold() == incident_type.casefold():
            return incident_type
    return None


def read_custom_incident(renderer: ConsoleRenderer) -> Incident:
    allowed = ", ".join(config.INCIDENT_TYPES)
    incident_type: Optional[str] = None
    while incident_type is None:
        answer = renderer.prompt(f"Enter Incident Type ({allowed}): ")
        if answer is None:
            raise ConsoleClosedError("Input closed before a valid incident type was entered.")
        incident_type = normalise_incident_type(answer)
        if incident_type is None:
            renderer.write(f"Invalid incident type. Please enter one of: {allowed}.")

    location = renderer.prompt("Enter Incident Location: ")
    if not location:
        location = config.UNKNOWN_LOCATION
        renderer.write(f"Location not specified, using '{config.UNKNOWN_LOCATION}'.")
        logger.info("incident.location.defaulted", extra={"incident_type": incident_type})
    return Incident(incident_type, location)


def generate_round_incidents(
    choice: Optional[str],
    *,
    rng: RNG,
    locations: Sequence[str],
    renderer: ConsoleRenderer,
    batch_size: int = config.RANDOM_BATCH_SIZE,
) -> List[Incident]:
    """Build the incident list for a round from the operator's menu choice.

    Anything other than the two menu entries falls back to a random batch.
    """
    if choice == config.CHOICE_RANDOM:
        renderer.write(f"Generating {batch_size} random incidents...")
        return generate_random_incidents(rng, locations, batch_size)
    if choice == config.CHOICE_CUSTOM:
        renderer.write("Entering 1 custom incident...")
        return [read_custom_incident(renderer)]
    renderer.write(f"Invalid choice. Generating {batch_size} random incidents by default...")
    logger.info("round.choice.invalid", extra={"choice": choice})
    return generate_random_incidents(rng, locations, batch_size)


__all__ = [
    "generate_random_incident",
    "generate_random_incidents",
    "normalise_incident_type",
    "read_custom_incident",
    "generate_round_incidents",
]
