"""Service layer exports."""

from .errors import Err, ErrorCode, Ok, Result
from .exploration_service import ExplorationService
from .game import TreasureHuntGame
from .player_service import PlayerService
from .stats_service import GameStats, StatsService
from .treasure_service import TreasureService

__all__ = [
    "Err",
    "ErrorCode",
    "Ok",
    "Result",
    "ExplorationService",
    "GameStats",
    "PlayerService",
    "StatsService",
    "TreasureHuntGame",
    "TreasureService",
]
