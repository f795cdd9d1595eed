from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import yaml

from responsesim import config


def _read_yaml(path: Path) -> List[object]:
    if not path.exists():
        raise FileNotFoundError(f"Expected YAML data file at {path}")
    with path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or []
        if not isinstance(payload, list):
            raise ValueError(f"Expected list at {path}, got {type(payload).__name__}")
        return payload


def load_locations(path: Optional[Path] = None) -> List[str]:
    """Read the location catalogue used for random incidents."""
    source = path or config.LOCATIONS_PATH
    locations: List[str] = []
    for row in _read_yaml(source):
        if isinstance(row, dict):
            row = row.get("name", "")
        name = str(row).strip()
        if name:
            locations.append(name)
    if not locations:
        raise ValueError(f"No locations defined in {source}")
    return locations
