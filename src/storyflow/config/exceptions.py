"""Custom exceptions for configuration."""


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""
