"""Game-wide statistics and the pause switch."""
from __future__ import annotations

from dataclasses import dataclass

from treasurehunt.core.logging import get_logger
from treasurehunt.domain.state import GameState

from .errors import Ok, Result

logger = get_logger(__name__)


@dataclass(slots=True)
class GameStats:
    total_players: int
    total_treasures_found: int
    prize_pool: int
    game_active: bool


class StatsService:
    """Read-side aggregates plus the admin pause toggle."""

    def get_game_stats(self, state: GameState) -> GameStats:
        found = sum(1 for treasure in state.treasures.values() if treasure.is_claimed)
        return GameStats(
            total_players=state.total_players,
            total_treasures_found=found,
            prize_pool=state.prize_pool,
            game_active=state.game_active,
        )

    def set_game_active(self, state: GameState, active: bool) -> Result[bool]:
        if state.game_active != active:
            logger.info("Game %s", "resumed" if active else "paused")
        state.game_active = active
        return Ok(active)
