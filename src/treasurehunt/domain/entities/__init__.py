"""Runtime entity exports."""

from .location import Location, LocationCoordinates, LocationType
from .player import Player
from .treasure import Treasure, TreasureCoordinates, TreasureType

__all__ = [
    "Location",
    "LocationCoordinates",
    "LocationType",
    "Player",
    "Treasure",
    "TreasureCoordinates",
    "TreasureType",
]
