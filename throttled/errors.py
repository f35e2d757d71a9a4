"""Exception hierarchy for throttling configuration."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Base error for invalid throttling configuration."""


class InvalidRequeueOptionsError(ConfigurationError):
    """Raised when default requeue options are malformed."""


class InvalidRequeueStrategyError(InvalidRequeueOptionsError):
    """Raised when the requeue ``with`` value is not a known strategy."""
