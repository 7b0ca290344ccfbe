"""Evaluation errors."""
from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of evaluation failure reported in an EvaluationFailure."""

    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_OPERATOR = "invalid_operator"
    MALFORMED_EXPRESSION = "malformed_expression"


class CalculatorError(ValueError):
    """Base class for every failure raised while evaluating an expression."""

    kind: ErrorKind = ErrorKind.MALFORMED_EXPRESSION


class DivisionByZero(CalculatorError):
    kind = ErrorKind.DIVISION_BY_ZERO


class InvalidOperator(CalculatorError):
    kind = ErrorKind.INVALID_OPERATOR


class MalformedExpression(CalculatorError):
    kind = ErrorKind.MALFORMED_EXPRESSION
