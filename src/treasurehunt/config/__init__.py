"""Game rule configuration."""

from .errors import ConfigError, ConfigLoadError, ConfigValidationError
from .rules import GameRules, get_default_rules_path, load_rules, save_rules

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "GameRules",
    "get_default_rules_path",
    "load_rules",
    "save_rules",
]
