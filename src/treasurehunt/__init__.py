"""In-memory rules engine for the treasure hunt game."""
import logging

from .services.game import TreasureHuntGame

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["TreasureHuntGame"]
