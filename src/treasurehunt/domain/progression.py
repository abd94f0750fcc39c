"""Deterministic reward and levelling formulas."""
from __future__ import annotations

from typing import Mapping

from treasurehunt.domain.entities import Player

# Base reward per treasure tier, in the ledger's smallest unit.
TIER_REWARDS: Mapping[int, int] = {
    1: 1_000_000,
    2: 3_000_000,
    3: 7_000_000,
    4: 15_000_000,
}
EXPERIENCE_PER_LEVEL = 1000


def tier_base(treasure_type: int, tiers: Mapping[int, int] = TIER_REWARDS) -> int:
    """Return the base reward for a tier.

    Unknown tiers get the highest tier's base, matching the deployed contract.
    """
    if treasure_type in tiers:
        return tiers[treasure_type]
    return tiers[max(tiers)]


def reward_amount(
    treasure_type: int, rarity_multiplier: int, tiers: Mapping[int, int] = TIER_REWARDS
) -> int:
    return tier_base(treasure_type, tiers) * rarity_multiplier


def level_for_experience(experience: int, *, per_level: int = EXPERIENCE_PER_LEVEL) -> int:
    return max(0, experience) // per_level + 1


def grant_experience(player: Player, amount: int, *, per_level: int = EXPERIENCE_PER_LEVEL) -> bool:
    """Add experience and recompute the level. Returns True on level-up."""
    previous = player.level
    player.experience += amount
    player.level = level_for_experience(player.experience, per_level=per_level)
    return player.level > previous
