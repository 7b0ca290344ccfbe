"""Token classification helpers shared by the builder and the evaluator."""
from collections.abc import Callable as ABCCallable
import math
import operator
from typing import Callable, List, Tuple

from button_calculator.common.errors import DivisionByZero, InvalidOperator


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]

# Mapping of operator symbols to (precedence, function)
OPERATORS: dict[str, Tuple[int, OperatorFn]] = {
    "+": (1, operator.add),
    "-": (1, operator.sub),
    "*": (2, operator.mul),
    "/": (2, operator.truediv),
}

DIGITS = "0123456789"
DECIMAL_POINT = "."
MAX_EXACT_INTEGER = 2 ** 53


def tokenize(expr: str) -> List[str]:
    """
    Split a rendered expression into tokens.

    Tokens are space-separated (e.g. "3 + 4 * 2").

    :param str expr: Expression as displayed

    :return: List of tokens
    :rtype: List[str]
    """
    return expr.split()


def is_number(token: str) -> bool:
    """
    Determine if a token represents a numeric value.

    :param str token: Token string

    :return: True if token can be converted to float, else False
    :rtype: bool
    """
    try:
        float(token)
        return True
    except ValueError:
        return False


def is_operator(token: str) -> bool:
    return token in OPERATORS


def looks_numeric(token: str) -> bool:
    """Return True for tokens built only from digits and decimal points, parseable or not."""
    return bool(token) and all(char in DIGITS or char == DECIMAL_POINT for char in token)


def precedence(op: str) -> int:
    """
    Return the binding power of an operator; higher binds tighter.

    :param str op: Operator symbol

    :return: 1 for + and -, 2 for * and /
    :rtype: int
    :raises InvalidOperator: If the symbol is not a supported operator
    """
    try:
        return OPERATORS[op][0]
    except KeyError:
        raise InvalidOperator(f"Invalid operator: {op!r}") from None


def apply_operator(op: str, a: float, b: float, zero_tolerance: float = 0.0) -> float:
    """
    Apply a binary operator to two operands.

    :param str op: Operator symbol
    :param float a: Left operand
    :param float b: Right operand
    :param float zero_tolerance: Divisors within this distance of zero are rejected

    :return: a <op> b
    :rtype: float
    :raises InvalidOperator: If the symbol is not a supported operator
    :raises DivisionByZero: If op is "/" and b is zero within tolerance
    """
    if op not in OPERATORS:
        raise InvalidOperator(f"Invalid operator: {op!r}")
    if op == "/" and math.isclose(b, 0.0, abs_tol=zero_tolerance):
        raise DivisionByZero("Cannot divide by zero")
    return OPERATORS[op][1](a, b)


def format_number(value: float, significant_digits: int = 12) -> str:
    """
    Render a result the way the display shows it.

    Integral values print every digit without a fractional part (7.0 -> "7", 1234567890123.0 -> "1234567890123").
    Other values keep significant_digits digits, which rounds float noise away (0.1 + 0.2 -> "0.3").

    :param float value: Number to render
    :param int significant_digits: Significant digits kept

    :return: Display text
    :rtype: str
    """
    # Integers above 2**53 are no longer exact, print those in exponent form
    if value.is_integer() and abs(value) < MAX_EXACT_INTEGER:
        return str(int(value))
    return f"{value:.{significant_digits}g}"
