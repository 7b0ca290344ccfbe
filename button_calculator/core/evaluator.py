"""Evaluate a finalized token sequence with operator precedence."""
from typing import List, Sequence

from pydantic import BaseModel, ConfigDict, Field

from button_calculator.common.config import CalculatorSettings
from button_calculator.common.errors import CalculatorError, MalformedExpression
from button_calculator.common.logger import logger
from button_calculator.common.models import EvaluationFailure, EvaluationOutcome, EvaluationSuccess
from button_calculator.common.tokens import apply_operator, is_number, is_operator, looks_numeric, precedence


class Evaluator(BaseModel):
    """
    Compute the value of an infix token sequence without eval().

    Algorithm (two stacks):
        1. Numbers go on the operand stack
        2. Before pushing an operator, fold every stacked operator whose precedence is higher or equal
        3. Fold whatever is left once all tokens are consumed
        4. The single remaining operand is the result

    The ">=" comparison makes operators of equal precedence fold left to right.

    Examples:
        - 2 * 3 + 4: "*" is folded when "+" arrives (6), then 6 + 4 = 10
        - 2 + 3 * 4: "+" stays stacked under "*", then 3 * 4 = 12 and 2 + 12 = 14
    """

    model_config = ConfigDict(frozen=True)

    settings: CalculatorSettings = Field(default_factory=CalculatorSettings)

    def _fold(self, operands: List[float], operators: List[str]) -> None:
        """
        Pop one operator and two operands, apply, and push the result back.

        :param List[float] operands: Operand stack
        :param List[str] operators: Operator stack

        :return: None
        :raises MalformedExpression: If fewer than two operands are stacked
        """
        op = operators.pop()
        if len(operands) < 2:
            raise MalformedExpression(f"Not enough operands for {op!r}")
        b: float = operands.pop()
        a: float = operands.pop()
        operands.append(apply_operator(op, a, b, self.settings.zero_tolerance))

    def compute(self, tokens: Sequence[str]) -> float:
        """
        Evaluate tokens and return the numeric result.

        :param Sequence[str] tokens: Numbers and operators in infix order

        :return: Computed result
        :rtype: float
        :raises DivisionByZero: If a divisor is zero within tolerance
        :raises InvalidOperator: If a non-number token is not a supported operator
        :raises MalformedExpression: If the tokens do not form a valid expression
        """
        if not tokens:
            raise MalformedExpression("Empty expression")

        # Check that the first and last tokens are not operators
        if is_operator(tokens[0]) or is_operator(tokens[-1]):
            raise MalformedExpression(f"Expression cannot start or end with an operator: {' '.join(tokens)}")

        operands: List[float] = []
        operators: List[str] = []

        for token in tokens:
            if is_number(token):
                operands.append(float(token))
            elif looks_numeric(token):
                # e.g. a lone "." typed before evaluating
                raise MalformedExpression(f"Malformed number: {token!r}")
            else:
                incoming = precedence(token)
                while operators and precedence(operators[-1]) >= incoming:
                    self._fold(operands, operators)
                operators.append(token)

        while operators:
            self._fold(operands, operators)

        if len(operands) != 1:
            raise MalformedExpression(f"Expected one result, found {len(operands)} operands")

        return operands[0]

    def evaluate(self, tokens: Sequence[str]) -> EvaluationOutcome:
        """
        Evaluate tokens and report the outcome instead of raising.

        :param Sequence[str] tokens: Numbers and operators in infix order

        :return: EvaluationSuccess with the value, or EvaluationFailure with the error kind
        :rtype: EvaluationOutcome
        """
        expression = " ".join(tokens)
        try:
            result = self.compute(tokens)
        except CalculatorError as exc:
            logger.error(f"🧮❌ Could not evaluate {expression!r}: {exc}")
            return EvaluationFailure(expression=expression, error=exc.kind, message=str(exc))

        logger.debug(f"🧮✅ {expression} = {result}")
        return EvaluationSuccess(expression=expression, result=result)
