"""Throttling configuration for background jobs.

``configuration`` is the process-wide instance. Code that can take a
``Configuration`` explicitly should prefer that over this module state.
To load values from ``THROTTLED_*`` environment variables at startup, use
``throttled.settings.apply_settings``.
"""

from __future__ import annotations

from typing import Any, Mapping

from throttled.configuration import Configuration
from throttled.errors import (
    ConfigurationError,
    InvalidRequeueOptionsError,
    InvalidRequeueStrategyError,
)
from throttled.schemas import RequeueOptions, RequeueStrategy

configuration = Configuration()


def configure(
    *,
    inherit_strategies: Any = None,
    default_requeue_options: Mapping[str, Any] | None = None,
) -> Configuration:
    """Apply the given non-None values to the shared configuration."""
    if inherit_strategies is not None:
        configuration.inherit_strategies = inherit_strategies
    if default_requeue_options is not None:
        configuration.default_requeue_options = default_requeue_options
    return configuration


def reset() -> Configuration:
    return configuration.reset()


__all__ = [
    "Configuration",
    "ConfigurationError",
    "InvalidRequeueOptionsError",
    "InvalidRequeueStrategyError",
    "RequeueOptions",
    "RequeueStrategy",
    "configuration",
    "configure",
    "reset",
]
