"""Location records."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List

from treasurehunt.core.types import Coordinate, PlayerId


class LocationType(IntEnum):
    """Known location kinds. Locations store the raw integer, unchecked."""

    FOREST = 1
    MOUNTAIN = 2
    CAVE = 3
    OCEAN = 4


@dataclass(slots=True)
class LocationCoordinates:
    x: Coordinate
    y: Coordinate
    radius: Coordinate


@dataclass(slots=True)
class Location:
    """A discoverable region that hosts treasures."""

    id: int
    name: str
    description: str
    location_type: int
    coordinates: LocationCoordinates
    difficulty_level: int
    entry_requirement: int
    discovery_bonus: int
    treasure_count: int = 0
    is_hidden: bool = False
    discovered_by: List[PlayerId] = field(default_factory=list)
