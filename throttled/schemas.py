"""Schemas for requeue options of throttled jobs."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from throttled.errors import InvalidRequeueOptionsError, InvalidRequeueStrategyError


class RequeueStrategy(str, Enum):
    ENQUEUE = "enqueue"    # put the job at the end of the queue
    SCHEDULE = "schedule"  # schedule the job for later


class RequeueOptions(BaseModel):
    """How a throttled job is returned to a queue.

    ``with`` is a Python keyword, so the field is ``with_`` and the wire
    name is kept as an alias. When ``to`` is unset the job goes back to the
    queue it was originally enqueued in.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    with_: RequeueStrategy = Field(RequeueStrategy.ENQUEUE, alias="with")
    to: str | None = Field(None, min_length=1)

    @field_validator("with_", mode="before")
    @classmethod
    def _default_strategy(cls, value: Any) -> Any:
        if value is None:
            return RequeueStrategy.ENQUEUE
        return value

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "RequeueOptions":
        """Validate a plain options mapping, raising ConfigurationError subclasses."""
        if not isinstance(options, Mapping):
            raise InvalidRequeueOptionsError(
                f"Requeue options must be a mapping, got {type(options).__name__}"
            )
        try:
            return cls.model_validate(dict(options))
        except ValidationError as exc:
            if any(err["loc"][:1] == ("with",) for err in exc.errors()):
                choices = [s.value for s in RequeueStrategy]
                raise InvalidRequeueStrategyError(
                    f"Invalid requeue strategy {options.get('with')!r}. Choose from: {choices}"
                ) from exc
            raise InvalidRequeueOptionsError(f"Invalid requeue options: {exc}") from exc

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"with": self.with_.value}
        if self.to is not None:
            data["to"] = self.to
        return data
