"""Single entry point bundling the state with every service."""
from __future__ import annotations

from treasurehunt.config import GameRules
from treasurehunt.core.clock import Clock, SystemClock
from treasurehunt.core.types import Coordinate, LocationId, PlayerId, TreasureId
from treasurehunt.domain.entities import Location, Player, Treasure
from treasurehunt.domain.state import GameState

from .errors import Result
from .exploration_service import ExplorationService
from .player_service import PlayerService
from .stats_service import GameStats, StatsService
from .treasure_service import TreasureService


class TreasureHuntGame:
    """One independent game: its own state, rules and clock.

    The ledger runtime calls these methods one at a time, passing the
    authenticated caller id as ``player_id``/``sender_id``.
    """

    def __init__(
        self,
        *,
        rules: GameRules | None = None,
        clock: Clock | None = None,
        state: GameState | None = None,
    ) -> None:
        self.rules = rules or GameRules()
        self.clock = clock or SystemClock()
        self.state = state if state is not None else GameState()
        self.players = PlayerService(rules=self.rules, clock=self.clock)
        self.exploration = ExplorationService(rules=self.rules, clock=self.clock)
        self.treasures = TreasureService(rules=self.rules, clock=self.clock)
        self.stats = StatsService()

    # ------------------------------------------------------------ Players
    def register_player(self, username: str, player_id: PlayerId) -> Result[bool]:
        return self.players.register_player(self.state, username, player_id)

    def get_player_info(self, player_id: PlayerId) -> Player | None:
        return self.players.get_player_info(self.state, player_id)

    # ---------------------------------------------------------- Locations
    def create_location(
        self,
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
        return self.exploration.create_location(
            self.state,
            name,
            description,
            location_type,
            x,
            y,
            radius,
            difficulty,
            entry_requirement,
            discovery_bonus,
        )

    def explore_location(
        self, location_id: LocationId, player_x: Coordinate, player_y: Coordinate, player_id: PlayerId
    ) -> Result[str]:
        return self.exploration.explore_location(self.state, location_id, player_x, player_y, player_id)

    def get_location_info(self, location_id: LocationId) -> Location | None:
        return self.exploration.get_location_info(self.state, location_id)

    # ---------------------------------------------------------- Treasures
    def create_treasure(
        self,
        name: str,
        description: str,
        treasure_type: int,
        location_id: LocationId,
        x: Coordinate,
        y: Coordinate,
        rarity_multiplier: int,
        required_level: int,
    ) -> Result[TreasureId]:
        return self.treasures.create_treasure(
            self.state,
            name,
            description,
            treasure_type,
            location_id,
            x,
            y,
            rarity_multiplier,
            required_level,
        )

    def set_treasure_puzzle(self, treasure_id: TreasureId, solution: str, clue: str) -> Result[bool]:
        return self.treasures.set_treasure_puzzle(self.state, treasure_id, solution, clue)

    def claim_treasure(self, treasure_id: TreasureId, player_id: PlayerId) -> Result[int]:
        return self.treasures.claim_treasure(self.state, treasure_id, player_id)

    def solve_puzzle(self, treasure_id: TreasureId, solution: str, player_id: PlayerId) -> Result[int]:
        return self.treasures.solve_puzzle(self.state, treasure_id, solution, player_id)

    def transfer_treasure(
        self, treasure_id: TreasureId, recipient_id: PlayerId, sender_id: PlayerId
    ) -> Result[bool]:
        return self.treasures.transfer_treasure(self.state, treasure_id, recipient_id, sender_id)

    def get_treasure_info(self, treasure_id: TreasureId) -> Treasure | None:
        return self.treasures.get_treasure_info(self.state, treasure_id)

    # -------------------------------------------------------------- Stats
    def get_game_stats(self) -> GameStats:
        return self.stats.get_game_stats(self.state)

    def set_game_active(self, active: bool) -> Result[bool]:
        return self.stats.set_game_active(self.state, active)
