"""Shared type aliases for the core and domain layers."""
from typing import Union

PlayerId = str
LocationId = int
TreasureId = int
# Milliseconds since the epoch, as supplied by the ledger runtime.
Timestamp = int
Coordinate = Union[int, float]

__all__ = ["Coordinate", "LocationId", "PlayerId", "Timestamp", "TreasureId"]
