"""Domain-level state tracking."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from treasurehunt.core.types import LocationId, PlayerId, TreasureId
from treasurehunt.domain.entities import Location, Player, Treasure


@dataclass
class GameState:
    """All players, locations and treasures plus the global counters.

    Each instance is independent; services receive it explicitly and are the
    only code that mutates it.
    """

    players: Dict[PlayerId, Player] = field(default_factory=dict)
    locations: Dict[LocationId, Location] = field(default_factory=dict)
    treasures: Dict[TreasureId, Treasure] = field(default_factory=dict)
    total_players: int = 0
    next_location_id: LocationId = 1
    next_treasure_id: TreasureId = 1
    prize_pool: int = 0
    game_active: bool = True

    def allocate_location_id(self) -> LocationId:
        location_id = self.next_location_id
        self.next_location_id += 1
        return location_id

    def allocate_treasure_id(self) -> TreasureId:
        treasure_id = self.next_treasure_id
        self.next_treasure_id += 1
        return treasure_id
