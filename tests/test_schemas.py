"""Tests for requeue options schema validation."""

import pytest
from pydantic import ValidationError

from throttled.errors import InvalidRequeueOptionsError, InvalidRequeueStrategyError
from throttled.schemas import RequeueOptions, RequeueStrategy


def test_strategy_values():
    assert [s.value for s in RequeueStrategy] == ["enqueue", "schedule"]
    assert RequeueStrategy.ENQUEUE == "enqueue"


def test_defaults():
    options = RequeueOptions()
    assert options.with_ is RequeueStrategy.ENQUEUE
    assert options.to is None
    assert options.to_dict() == {"with": "enqueue"}


def test_from_mapping_with_alias():
    options = RequeueOptions.from_mapping({"with": "schedule", "to": "low"})
    assert options.with_ is RequeueStrategy.SCHEDULE
    assert options.to_dict() == {"with": "schedule", "to": "low"}


def test_field_name_is_not_an_accepted_key():
    with pytest.raises(InvalidRequeueOptionsError) as exc_info:
        RequeueOptions.from_mapping({"with_": "schedule"})
    assert not isinstance(exc_info.value, InvalidRequeueStrategyError)


def test_extra_key_beside_valid_strategy_is_not_a_strategy_error():
    with pytest.raises(InvalidRequeueOptionsError) as exc_info:
        RequeueOptions.from_mapping({"with": "schedule", "with_": "enqueue"})
    assert not isinstance(exc_info.value, InvalidRequeueStrategyError)


def test_frozen():
    options = RequeueOptions()
    with pytest.raises(ValidationError):
        options.to = "low"


def test_invalid_strategy_message_lists_choices():
    with pytest.raises(InvalidRequeueStrategyError) as exc_info:
        RequeueOptions.from_mapping({"with": "later"})
    assert "'later'" in str(exc_info.value)
    assert "enqueue" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, Exception)


def test_non_string_queue():
    with pytest.raises(InvalidRequeueOptionsError):
        RequeueOptions.from_mapping({"to": 7})


def test_list_is_not_a_mapping():
    with pytest.raises(InvalidRequeueOptionsError):
        RequeueOptions.from_mapping([("with", "schedule")])
