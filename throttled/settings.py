"""Startup settings for throttling via pydantic-settings.

Optional: the Configuration object never reads the environment itself.
Initialization code can call ``apply_settings`` to copy ``THROTTLED_*``
variables (or a ``.env`` file) onto a configuration.
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic_settings import BaseSettings

from throttled.configuration import Configuration

logger = logging.getLogger(__name__)


class ThrottledSettings(BaseSettings):
    # ── Strategy lookup ──────────────────────────────
    inherit_strategies: bool = False

    # ── Requeue ──────────────────────────────────────
    requeue_with: Literal["enqueue", "schedule"] = "enqueue"
    requeue_to: str | None = None  # None keeps the job's original queue

    model_config = {"env_prefix": "THROTTLED_", "env_file": ".env"}

    def requeue_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {"with": self.requeue_with}
        if self.requeue_to:
            options["to"] = self.requeue_to
        return options


def apply_settings(configuration: Configuration, settings: ThrottledSettings | None = None) -> Configuration:
    """Copy startup settings onto ``configuration`` and return it."""
    if settings is None:
        settings = ThrottledSettings()
    configuration.inherit_strategies = settings.inherit_strategies
    configuration.default_requeue_options = settings.requeue_options()
    logger.debug(f"Applied throttling settings: {configuration!r}")
    return configuration
