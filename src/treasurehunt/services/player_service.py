"""Player registration and lookups."""
from __future__ import annotations

from treasurehunt.config import GameRules
from treasurehunt.core.clock import Clock
from treasurehunt.core.logging import get_logger
from treasurehunt.core.types import PlayerId
from treasurehunt.domain.entities import Player
from treasurehunt.domain.state import GameState

from .errors import ErrorCode, Ok, Result, reject

logger = get_logger(__name__)


class PlayerService:
    """Creates players and exposes their records."""

    def __init__(self, *, rules: GameRules, clock: Clock) -> None:
        self._rules = rules
        self._clock = clock

    def register_player(self, state: GameState, username: str, player_id: PlayerId) -> Result[bool]:
        if not state.game_active:
            return reject(logger, "register_player", ErrorCode.GAME_NOT_ACTIVE, player=player_id)
        if player_id in state.players:
            return reject(logger, "register_player", ErrorCode.PLAYER_NOT_REGISTERED, player=player_id)

        state.players[player_id] = Player(
            id=player_id,
            username=username,
            registered_at=self._clock.now(),
            energy=self._rules.starting_energy,
        )
        state.total_players += 1
        state.prize_pool += self._rules.registration_fee
        logger.info("Registered player %s as %r", player_id, username)
        return Ok(True)

    def get_player_info(self, state: GameState, player_id: PlayerId) -> Player | None:
        return state.players.get(player_id)
