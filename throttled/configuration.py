"""Throttling configuration: in-memory settings shared by throttling code."""

from __future__ import annotations

import logging
import threading
from typing import Any, Mapping

from throttled.errors import ConfigurationError
from throttled.schemas import RequeueOptions, RequeueStrategy

logger = logging.getLogger(__name__)


class Configuration:
    """Configuration holder.

    Usually written once by initialization code and then only read by
    workers. Every read and write goes through a lock, so a reader never
    sees a partially applied requeue options mapping.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self.reset()

    def reset(self) -> "Configuration":
        """Reset configuration to defaults and return self."""
        with self._lock:
            self._inherit_strategies = False
            self._default_requeue_options = RequeueOptions()
        logger.debug("Throttling configuration reset to defaults")
        return self

    # ── Strategy inheritance ─────────────────────────

    @property
    def inherit_strategies(self) -> bool:
        """Whether throttled jobs inherit their parent's strategies. Default: ``False``.

        When enabled, a job class without its own throttling strategy uses
        the strategy (and bucket) of the nearest ancestor that declares one.
        The setter stores ``bool(value)``; an error raised by the value's
        ``__bool__`` propagates and leaves the stored flag unchanged.
        """
        with self._lock:
            return self._inherit_strategies

    @inherit_strategies.setter
    def inherit_strategies(self, value: Any):
        flag = bool(value)
        with self._lock:
            self._inherit_strategies = flag
        logger.info(f"Throttling strategy inheritance {'enabled' if flag else 'disabled'}")

    def set_inherit_strategies(self, value: Any):
        self.inherit_strategies = value

    # ── Requeue options ──────────────────────────────

    @property
    def default_requeue_options(self) -> dict[str, Any]:
        """How throttled jobs are returned to the queue. Default: ``{"with": "enqueue"}``.

        ``with`` is ``"enqueue"`` (end of the queue) or ``"schedule"`` (run
        later); ``to`` names the target queue and defaults to the job's own
        queue. The returned dict is a copy.
        """
        with self._lock:
            return self._default_requeue_options.to_dict()

    @default_requeue_options.setter
    def default_requeue_options(self, options: Mapping[str, Any]):
        try:
            parsed = RequeueOptions.from_mapping(options)
        except ConfigurationError as e:
            logger.warning(f"Rejected default requeue options {options!r}: {e}")
            raise
        with self._lock:
            self._default_requeue_options = parsed
        logger.info(f"Default requeue options set to {parsed.to_dict()}")

    def set_default_requeue_options(self, options: Mapping[str, Any]):
        self.default_requeue_options = options

    @property
    def requeue_strategy(self) -> RequeueStrategy:
        with self._lock:
            return self._default_requeue_options.with_

    @property
    def requeue_queue(self) -> str | None:
        """Target queue for requeued jobs, or ``None`` for the job's own queue."""
        with self._lock:
            return self._default_requeue_options.to

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return {
                "inherit_strategies": self._inherit_strategies,
                "default_requeue_options": self._default_requeue_options.to_dict(),
            }

    def __repr__(self) -> str:
        state = self.snapshot()
        return (
            f"Configuration(inherit_strategies={state['inherit_strategies']!r}, "
            f"default_requeue_options={state['default_requeue_options']!r})"
        )
