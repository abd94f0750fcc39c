"""Custom exceptions for rule configuration."""


class ConfigError(Exception):
    """Base exception for the config layer."""


class ConfigLoadError(ConfigError):
    """Raised when a config file cannot be read or parsed."""


class ConfigValidationError(ConfigError):
    """Raised when a config value has the wrong shape."""
