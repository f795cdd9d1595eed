from __future__ import annotations

from pathlib import Path

INCIDENT_TYPES = ("Fire", "Crime", "Medical")

DEFAULT_LOCATIONS = (
    "Downtown",
    "Uptown",
    "Suburb",
    "Industrial Park",
    "City Park",
    "Main St",
)
LOCATIONS_PATH = Path(__file__).resolve().parent / "data" / "locations.yaml"
UNKNOWN_LOCATION = "Unknown Location"

TOTAL_ROUNDS = 5
RANDOM_BATCH_SIZE = 5

MISS_CHANCE_DENOMINATOR = 10
HANDLED_POINTS = 10
MISSED_PENALTY = -5
UNHANDLED_PENALTY = -5

# Pacing delays in seconds.
INCIDENT_DELAY = 0.5
ROUND_DELAY = 1.0

CHOICE_RANDOM = "1"
CHOICE_CUSTOM = "2"
