"""Treasure placement, claiming, puzzles and transfers."""
from __future__ import annotations

from treasurehunt.config import GameRules
from treasurehunt.core.clock import Clock
from treasurehunt.core.logging import get_logger
from treasurehunt.core.types import Coordinate, LocationId, PlayerId, TreasureId
from treasurehunt.domain.entities import Player, Treasure, TreasureCoordinates
from treasurehunt.domain.progression import grant_experience, reward_amount
from treasurehunt.domain.puzzles import hash_solution, solution_matches
from treasurehunt.domain.state import GameState

from .errors import Err, ErrorCode, Ok, Result, reject

logger = get_logger(__name__)


class TreasureService:
    """Owns every transition that touches a treasure record."""

    def __init__(self, *, rules: GameRules, clock: Clock) -> None:
        self._rules = rules
        self._clock = clock

    # ---------------------------------------------------------------- Admin
    def create_treasure(
        self,
        state: GameState,
        name: str,
        description: str,
        treasure_type: int,
        location_id: LocationId,
        x: Coordinate,
        y: Coordinate,
        rarity_multiplier: int,
        required_level: int,
    ) -> Result[TreasureId]:
        """Place a treasure. The location id is not required to exist."""
        treasure_id = state.allocate_treasure_id()
        amount = reward_amount(treasure_type, rarity_multiplier, self._rules.tier_rewards)
        state.treasures[treasure_id] = Treasure(
            id=treasure_id,
            name=name,
            description=description,
            treasure_type=treasure_type,
            location_id=location_id,
            coordinates=TreasureCoordinates(x=x, y=y),
            reward_amount=amount,
            rarity_multiplier=rarity_multiplier,
            required_level=required_level,
        )
        location = state.locations.get(location_id)
        if location is not None:
            location.treasure_count += 1
        logger.info("Created treasure %d (%s) worth %d at location %s", treasure_id, name, amount, location_id)
        return Ok(treasure_id)

    def set_treasure_puzzle(
        self, state: GameState, treasure_id: TreasureId, solution: str, clue: str
    ) -> Result[bool]:
        """Gate an unclaimed treasure behind a puzzle; only the answer's digest is kept."""
        treasure = state.treasures.get(treasure_id)
        if treasure is None:
            return reject(logger, "set_treasure_puzzle", ErrorCode.TREASURE_NOT_FOUND, treasure=treasure_id)
        if treasure.is_claimed:
            return reject(
                logger, "set_treasure_puzzle", ErrorCode.TREASURE_ALREADY_CLAIMED, treasure=treasure_id
            )
        treasure.puzzle_hash = hash_solution(solution)
        treasure.puzzle_clue = clue
        logger.info("Attached puzzle to treasure %d", treasure_id)
        return Ok(True)

    # --------------------------------------------------------------- Player
    def claim_treasure(self, state: GameState, treasure_id: TreasureId, player_id: PlayerId) -> Result[int]:
        checked = self._check_claim(state, "claim_treasure", treasure_id, player_id)
        if isinstance(checked, Err):
            return checked
        treasure, player = checked
        if treasure.is_puzzle_gated:
            return reject(
                logger, "claim_treasure", ErrorCode.NOT_AUTHORIZED, treasure=treasure_id, reason="puzzle"
            )
        return Ok(self._award(treasure, player))

    def solve_puzzle(
        self, state: GameState, treasure_id: TreasureId, solution: str, player_id: PlayerId
    ) -> Result[int]:
        """Claim a puzzle-gated treasure by answering its puzzle."""
        if not state.game_active:
            return reject(logger, "solve_puzzle", ErrorCode.GAME_NOT_ACTIVE, player=player_id)
        gated = state.treasures.get(treasure_id)
        if gated is None or not gated.is_puzzle_gated:
            return reject(logger, "solve_puzzle", ErrorCode.TREASURE_NOT_FOUND, treasure=treasure_id)
        checked = self._check_claim(state, "solve_puzzle", treasure_id, player_id)
        if isinstance(checked, Err):
            return checked
        treasure, player = checked
        if treasure.puzzle_hash is None or not solution_matches(treasure.puzzle_hash, solution):
            return reject(logger, "solve_puzzle", ErrorCode.INVALID_PUZZLE_SOLUTION, treasure=treasure_id)
        player.puzzles_solved += 1
        return Ok(self._award(treasure, player))

    def transfer_treasure(
        self,
        state: GameState,
        treasure_id: TreasureId,
        recipient_id: PlayerId,
        sender_id: PlayerId,
    ) -> Result[bool]:
        """Move a claimed treasure between inventories.

        ``discovered_by`` on the treasure keeps naming the original claimant;
        ownership is whoever holds the id in their inventory.
        """
        if not state.game_active:
            return reject(logger, "transfer_treasure", ErrorCode.GAME_NOT_ACTIVE, sender=sender_id)
        sender = state.players.get(sender_id)
        if sender is None:
            return reject(logger, "transfer_treasure", ErrorCode.PLAYER_NOT_REGISTERED, player=sender_id)
        recipient = state.players.get(recipient_id)
        if recipient is None:
            return reject(logger, "transfer_treasure", ErrorCode.PLAYER_NOT_REGISTERED, player=recipient_id)
        # The three cases below share one code on purpose; they are not the same condition.
        treasure = state.treasures.get(treasure_id)
        if treasure is None:
            return reject(logger, "transfer_treasure", ErrorCode.TREASURE_NOT_FOUND, treasure=treasure_id)
        if not treasure.is_claimed:
            return reject(
                logger, "transfer_treasure", ErrorCode.TREASURE_NOT_FOUND, treasure=treasure_id, reason="unclaimed"
            )
        if not sender.owns(treasure_id):
            return reject(
                logger, "transfer_treasure", ErrorCode.TREASURE_NOT_FOUND, treasure=treasure_id, reason="not owned"
            )

        sender.inventory.remove(treasure_id)
        recipient.inventory.append(treasure_id)
        logger.info("Transferred treasure %d from %s to %s", treasure_id, sender_id, recipient_id)
        return Ok(True)

    def get_treasure_info(self, state: GameState, treasure_id: TreasureId) -> Treasure | None:
        return state.treasures.get(treasure_id)

    # ------------------------------------------------------------- Internal
    def _check_claim(
        self, state: GameState, operation: str, treasure_id: TreasureId, player_id: PlayerId
    ) -> tuple[Treasure, Player] | Err:
        if not state.game_active:
            return reject(logger, operation, ErrorCode.GAME_NOT_ACTIVE, player=player_id)
        treasure = state.treasures.get(treasure_id)
        if treasure is None:
            return reject(logger, operation, ErrorCode.TREASURE_NOT_FOUND, treasure=treasure_id)
        player = state.players.get(player_id)
        if player is None:
            return reject(logger, operation, ErrorCode.PLAYER_NOT_REGISTERED, player=player_id)
        if treasure.is_claimed:
            return reject(logger, operation, ErrorCode.TREASURE_ALREADY_CLAIMED, treasure=treasure_id)
        if player.level < treasure.required_level:
            return reject(
                logger,
                operation,
                ErrorCode.NOT_AUTHORIZED,
                player=player_id,
                level=player.level,
                required=treasure.required_level,
            )
        return treasure, player

    def _award(self, treasure: Treasure, player: Player) -> int:
        treasure.is_claimed = True
        treasure.discovered_by = player.id
        treasure.discovered_at = self._clock.now()

        player.treasures_found += 1
        player.total_rewards += treasure.reward_amount
        player.inventory.append(treasure.id)
        leveled = grant_experience(player, self._rules.claim_experience, per_level=self._rules.experience_per_level)
        logger.info(
            "Player %s claimed treasure %d for %d (level=%d%s)",
            player.id,
            treasure.id,
            treasure.reward_amount,
            player.level,
            ", level up" if leveled else "",
        )
        return treasure.reward_amount
