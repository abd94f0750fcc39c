"""Tunable game rules and their on-disk representation."""
from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict

from treasurehunt.core.logging import get_logger
from treasurehunt.domain.progression import EXPERIENCE_PER_LEVEL, TIER_REWARDS

from .errors import ConfigLoadError, ConfigValidationError
from .json_loader import load_json

logger = get_logger(__name__)

CONFIG_ENV_VAR = "TREASURE_HUNT_CONFIG"


def _positive_int(key: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigValidationError(f"'{key}' must be a positive integer, got {value!r}.")
    return value


def _parse_tiers(value: object) -> Dict[int, int]:
    if not isinstance(value, dict) or not value:
        raise ConfigValidationError("'tier_rewards' must be a non-empty object.")
    tiers: Dict[int, int] = {}
    for raw_key, raw_amount in value.items():
        try:
            tier = int(raw_key)
        except (TypeError, ValueError) as exc:
            raise ConfigValidationError(f"Tier key {raw_key!r} is not an integer.") from exc
        tiers[tier] = _positive_int(f"tier_rewards.{raw_key}", raw_amount)
    return tiers


@dataclass(frozen=True)
class GameRules:
    """Constants driving fees, energy and experience.

    Values are checked on construction, so every instance is safe to hand to
    the services whether it came from disk or from code.
    """

    registration_fee: int = 1_000_000
    starting_energy: int = 100
    exploration_energy_cost: int = 10
    exploration_experience: int = 50
    claim_experience: int = 200
    experience_per_level: int = EXPERIENCE_PER_LEVEL
    tier_rewards: Dict[int, int] = field(default_factory=lambda: dict(TIER_REWARDS))

    def __post_init__(self) -> None:
        for key in _SCALAR_KEYS:
            _positive_int(key, getattr(self, key))
        object.__setattr__(self, "tier_rewards", _parse_tiers(self.tier_rewards))


_SCALAR_KEYS = tuple(f.name for f in fields(GameRules) if f.name != "tier_rewards")


def get_default_rules_path() -> Path:
    """Return the rules path, honouring the environment override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".config" / "treasure_hunt" / "rules.json"


def rules_from_dict(raw: Dict[str, Any]) -> GameRules:
    """Build rules from a parsed mapping; unknown keys are ignored."""
    overrides = {f.name: raw[f.name] for f in fields(GameRules) if f.name in raw}
    return GameRules(**overrides)


def load_rules(path: Path | None = None) -> GameRules:
    """Load rules from disk or return defaults."""
    config_path = path or get_default_rules_path()
    try:
        raw = load_json(config_path)
    except FileNotFoundError:
        return GameRules()
    except ConfigLoadError as exc:
        logger.warning("Falling back to default rules: %s", exc)
        return GameRules()
    if not isinstance(raw, dict):
        logger.warning("Falling back to default rules: %s does not hold a JSON object", config_path)
        return GameRules()
    return rules_from_dict(raw)


def save_rules(rules: GameRules, path: Path | None = None) -> None:
    """Persist rules to disk."""
    config_path = path or get_default_rules_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = asdict(rules)
    payload["tier_rewards"] = {str(tier): amount for tier, amount in sorted(rules.tier_rewards.items())}
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
