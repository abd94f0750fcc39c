"""Player record."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from treasurehunt.core.types import LocationId, PlayerId, Timestamp, TreasureId


@dataclass(slots=True)
class Player:
    """A registered participant and their progression."""

    id: PlayerId
    username: str
    registered_at: Timestamp
    level: int = 1
    experience: int = 0
    treasures_found: int = 0
    puzzles_solved: int = 0
    total_rewards: int = 0
    last_exploration: Timestamp = 0
    current_location: LocationId | None = None
    energy: int = 100
    inventory: List[TreasureId] = field(default_factory=list)
    achievements: List[str] = field(default_factory=list)
    is_active: bool = True

    def owns(self, treasure_id: TreasureId) -> bool:
        return treasure_id in self.inventory
