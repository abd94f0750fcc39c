"""Treasure records."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from treasurehunt.core.types import Coordinate, LocationId, PlayerId, Timestamp


class TreasureType(IntEnum):
    """Reward tiers, lowest to highest."""

    COMMON = 1
    RARE = 2
    EPIC = 3
    LEGENDARY = 4


@dataclass(slots=True)
class TreasureCoordinates:
    x: Coordinate
    y: Coordinate


@dataclass(slots=True)
class Treasure:
    """A one-time claimable reward placed at a location."""

    id: int
    name: str
    description: str
    treasure_type: int
    location_id: LocationId
    coordinates: TreasureCoordinates
    reward_amount: int
    rarity_multiplier: int
    required_level: int
    puzzle_hash: str | None = None
    puzzle_clue: str | None = None
    discovered_by: PlayerId | None = None
    discovered_at: Timestamp | None = None
    is_claimed: bool = False

    @property
    def is_puzzle_gated(self) -> bool:
        return self.puzzle_hash is not None
