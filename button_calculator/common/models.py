"""Pydantic models for the calculator state and evaluation outcomes."""
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from button_calculator.common.errors import ErrorKind


class EvaluationState(BaseModel):
    """Mutable state of one calculator session."""

    model_config = ConfigDict(validate_assignment=True)

    expression: List[str] = Field(default_factory=list, description="Tokens entered so far, numbers and operators")
    awaiting_reset: bool = Field(default=False, description="True right after an evaluation; next number input starts over")


class EvaluationSuccess(BaseModel):
    """Result of an expression that evaluated to a number."""

    model_config = ConfigDict(frozen=True)

    status: Literal["ok"] = "ok"
    expression: str = Field(..., description="Evaluated expression, tokens joined by spaces")
    result: float = Field(..., description="Numeric value of the expression")

    @property
    def ok(self) -> bool:
        return True


class EvaluationFailure(BaseModel):
    """Result of an expression that could not be evaluated."""

    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"
    expression: str = Field(..., description="Expression that failed, tokens joined by spaces")
    error: ErrorKind = Field(..., description="Kind of failure")
    message: str = Field(..., description="Human readable reason")

    @property
    def ok(self) -> bool:
        return False


# Discriminated on ``status`` so serialized outcomes validate back into the right class
EvaluationOutcome = Annotated[Union[EvaluationSuccess, EvaluationFailure], Field(discriminator="status")]
