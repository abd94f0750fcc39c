"""Location creation and exploration."""
from __future__ import annotations

from treasurehunt.config import GameRules
from treasurehunt.core.clock import Clock
from treasurehunt.core.logging import get_logger
from treasurehunt.core.types import Coordinate, LocationId, PlayerId
from treasurehunt.domain.entities import Location, LocationCoordinates
from treasurehunt.domain.progression import grant_experience
from treasurehunt.domain.state import GameState

from .errors import ErrorCode, Ok, Result, reject

logger = get_logger(__name__)

EXPLORE_SUCCESS_MESSAGE = "Location explored successfully!"


class ExplorationService:
    """Admin-side location setup and player exploration."""

    def __init__(self, *, rules: GameRules, clock: Clock) -> None:
        self._rules = rules
        self._clock = clock

    def create_location(
        self,
        state: GameState,
        name: str,
        description: str,
        location_type: int,
        x: Coordinate,
        y: Coordinate,
        radius: Coordinate,
        difficulty: int,
        entry_requirement: int,
        discovery_bonus: int,
    ) -> Result[LocationId]:
        """Add a location. Trusted admin call, inputs are stored as given."""
        location_id = state.allocate_location_id()
        state.locations[location_id] = Location(
            id=location_id,
            name=name,
            description=description,
            location_type=location_type,
            coordinates=LocationCoordinates(x=x, y=y, radius=radius),
            difficulty_level=difficulty,
            entry_requirement=entry_requirement,
            discovery_bonus=discovery_bonus,
        )
        logger.info("Created location %d (%s)", location_id, name)
        return Ok(location_id)

    def explore_location(
        self,
        state: GameState,
        location_id: LocationId,
        player_x: Coordinate,
        player_y: Coordinate,
        player_id: PlayerId,
    ) -> Result[str]:
        # Player coordinates are not geofenced against the location radius.
        if not state.game_active:
            return reject(logger, "explore_location", ErrorCode.GAME_NOT_ACTIVE, player=player_id)
        player = state.players.get(player_id)
        if player is None:
            return reject(logger, "explore_location", ErrorCode.PLAYER_NOT_REGISTERED, player=player_id)
        location = state.locations.get(location_id)
        if location is None:
            return reject(logger, "explore_location", ErrorCode.INVALID_LOCATION, location=location_id)
        if player.level < location.entry_requirement:
            return reject(
                logger,
                "explore_location",
                ErrorCode.NOT_AUTHORIZED,
                player=player_id,
                level=player.level,
                required=location.entry_requirement,
            )
        cost = self._rules.exploration_energy_cost
        if player.energy < cost:
            return reject(
                logger, "explore_location", ErrorCode.COOLDOWN_ACTIVE, player=player_id, energy=player.energy
            )

        player.current_location = location_id
        player.last_exploration = self._clock.now()
        player.energy -= cost
        leveled = grant_experience(
            player, self._rules.exploration_experience, per_level=self._rules.experience_per_level
        )
        if player_id not in location.discovered_by:
            location.discovered_by.append(player_id)
        logger.info(
            "Player %s explored location %d (energy=%d, level=%d%s)",
            player_id,
            location_id,
            player.energy,
            player.level,
            ", level up" if leveled else "",
        )
        return Ok(EXPLORE_SUCCESS_MESSAGE)

    def get_location_info(self, state: GameState, location_id: LocationId) -> Location | None:
        return state.locations.get(location_id)
