"""Test pydantic models for settings, state and outcomes."""
from pydantic import TypeAdapter, ValidationError
import pytest

from button_calculator.common.config import CalculatorSettings
from button_calculator.common.errors import ErrorKind
from button_calculator.common.models import (
    EvaluationFailure,
    EvaluationOutcome,
    EvaluationState,
    EvaluationSuccess,
)


def test_settings_defaults() -> None:
    settings = CalculatorSettings()
    assert settings.zero_tolerance == 1e-12
    assert settings.significant_digits == 12
    assert settings.error_text == "Error"
    assert settings.empty_display == "0"


@pytest.mark.parametrize("kwargs", [
    {"zero_tolerance": -1.0},
    {"significant_digits": 0},
    {"significant_digits": 18},
    {"error_text": ""},
    {"empty_display": ""},
])
def test_settings_invalid(kwargs) -> None:
    with pytest.raises(ValidationError):
        CalculatorSettings(**kwargs)


def test_settings_are_frozen() -> None:
    settings = CalculatorSettings()
    with pytest.raises(ValidationError):
        settings.error_text = "Oops"


def test_state_defaults_are_not_shared() -> None:
    first = EvaluationState()
    second = EvaluationState()
    first.expression.append("1")
    assert second.expression == []
    assert first.awaiting_reset is False


def test_state_validates_assignment() -> None:
    state = EvaluationState()
    with pytest.raises(ValidationError):
        state.expression = [1, 2]


def test_success_valid() -> None:
    res = EvaluationSuccess(expression="2 + 2 * 3", result=8.0)
    assert res.status == "ok"
    assert res.ok
    assert res.result == 8.0


def test_success_invalid_result_type() -> None:
    with pytest.raises(ValidationError):
        EvaluationSuccess(expression="2 + 2", result="not a float")


def test_failure_invalid_error_kind() -> None:
    with pytest.raises(ValidationError):
        EvaluationFailure(expression="1 / 0", error="overflow", message="nope")


def test_outcome_round_trip_through_discriminator() -> None:
    """Serialized outcomes validate back into the matching class."""
    adapter = TypeAdapter(EvaluationOutcome)
    failure = EvaluationFailure(expression="1 / 0", error=ErrorKind.DIVISION_BY_ZERO, message="Cannot divide by zero")

    restored = adapter.validate_python(failure.model_dump())

    assert isinstance(restored, EvaluationFailure)
    assert restored == failure
    assert isinstance(adapter.validate_python({"status": "ok", "expression": "1", "result": 1}), EvaluationSuccess)
