"""Build an expression incrementally from key presses."""
from typing import List, Optional

from pydantic import BaseModel, Field

from button_calculator.common.config import CalculatorSettings
from button_calculator.common.logger import logger
from button_calculator.common.models import EvaluationOutcome, EvaluationState
from button_calculator.common.tokens import DECIMAL_POINT, DIGITS, OPERATORS, format_number, is_operator
from button_calculator.core.evaluator import Evaluator


class ExpressionBuilder(BaseModel):
    """
    Maintain the running expression of a calculator and evaluate it on demand.

    Input rules:
        - A number holds at most one decimal point (only the trailing number is checked)
        - Two operators never follow each other, and an expression never starts with one
        - After "=", the next digit starts a new expression while the next operator continues from the result
    """

    settings: CalculatorSettings = Field(default_factory=CalculatorSettings)
    state: EvaluationState = Field(default_factory=EvaluationState)
    evaluator: Optional[Evaluator] = Field(default=None, description="Defaults to an Evaluator sharing these settings")

    def model_post_init(self, __context) -> None:
        if self.evaluator is None:
            self.evaluator = Evaluator(settings=self.settings)

    @property
    def tokens(self) -> List[str]:
        return self.state.expression

    def _last_token(self) -> Optional[str]:
        return self.tokens[-1] if self.tokens else None

    def append_digit_or_decimal(self, token: str) -> str:
        """
        Append a digit or a decimal point to the current number.

        :param str token: One of "0".."9" or "."

        :return: New display text
        :rtype: str
        :raises ValueError: If the token is neither a digit nor a decimal point
        """
        if len(token) != 1 or (token not in DIGITS and token != DECIMAL_POINT):
            raise ValueError(f"Expected a digit or a decimal point, got {token!r}")

        if self.state.awaiting_reset:
            self.state.expression = []
            self.state.awaiting_reset = False

        last = self._last_token()
        starts_new_number = last is None or is_operator(last)

        if token == DECIMAL_POINT and not starts_new_number and DECIMAL_POINT in last:
            return self.render()

        if starts_new_number:
            self.tokens.append(token)
        else:
            self.tokens[-1] = last + token
        return self.render()

    def append_operator(self, op: str) -> str:
        """
        Append an operator after the current number.

        :param str op: One of "+", "-", "*", "/"

        :return: New display text
        :rtype: str
        :raises ValueError: If the symbol is not a supported operator
        """
        if op not in OPERATORS:
            raise ValueError(f"Unsupported operator: {op!r}")

        last = self._last_token()
        if last is None or is_operator(last):
            return self.render()

        # Keep the previous result and keep calculating from it
        self.state.awaiting_reset = False
        self.tokens.append(op)
        return self.render()

    def evaluate(self) -> Optional[EvaluationOutcome]:
        """
        Evaluate the expression and replace it with the result, or with the error text on failure.

        A trailing operator is dropped first ("3 +" evaluates as "3").

        :return: Outcome of the evaluation, None if the expression was empty
        :rtype: Optional[EvaluationOutcome]
        """
        if not self.tokens:
            return None

        tokens = list(self.tokens)
        if is_operator(tokens[-1]):
            tokens.pop()

        outcome = self.evaluator.evaluate(tokens)
        if outcome.ok:
            self.state.expression = [format_number(outcome.result, self.settings.significant_digits)]
        else:
            self.state.expression = [self.settings.error_text]
        self.state.awaiting_reset = True

        logger.debug(f"🧮 Display after evaluation: {self.render()}")
        return outcome

    def clear(self) -> str:
        self.state.expression = []
        self.state.awaiting_reset = False
        return self.render()

    def render(self) -> str:
        """
        Return the display text: the tokens joined by single spaces, or the empty display.

        :return: Display text
        :rtype: str
        """
        if not self.tokens:
            return self.settings.empty_display
        return " ".join(self.tokens)
