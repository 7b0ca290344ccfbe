"""Calculator session driven by button presses."""
from typing import Optional

from pydantic import BaseModel, Field, PrivateAttr

from button_calculator.common.config import CalculatorSettings
from button_calculator.common.models import EvaluationOutcome
from button_calculator.common.tokens import DECIMAL_POINT, DIGITS, OPERATORS
from button_calculator.core.builder import ExpressionBuilder


EQUALS_KEY = "="
CLEAR_KEY = "C"


class CalculatorSession(BaseModel):
    """
    Entry point for a presentation layer.

    Each handler applies one user intent and returns the text to display.
    A session owns its builder; two sessions never share state.
    """

    settings: CalculatorSettings = Field(default_factory=CalculatorSettings)

    _builder: ExpressionBuilder = PrivateAttr()
    _last_outcome: Optional[EvaluationOutcome] = PrivateAttr(default=None)

    def model_post_init(self, __context) -> None:
        self._builder = ExpressionBuilder(settings=self.settings)

    @property
    def builder(self) -> ExpressionBuilder:
        return self._builder

    @property
    def display(self) -> str:
        return self._builder.render()

    @property
    def last_outcome(self) -> Optional[EvaluationOutcome]:
        """Outcome of the latest "=" press, None before any evaluation or after a clear."""
        return self._last_outcome

    def on_digit(self, digit: str) -> str:
        if len(digit) != 1 or digit not in DIGITS:
            raise ValueError(f"Expected a single digit, got {digit!r}")
        return self._builder.append_digit_or_decimal(digit)

    def on_decimal_point(self) -> str:
        return self._builder.append_digit_or_decimal(DECIMAL_POINT)

    def on_number_token(self, text: str) -> str:
        """Handle a digit or a decimal point coming from the same kind of button."""
        return self._builder.append_digit_or_decimal(text)

    def on_operator(self, symbol: str) -> str:
        return self._builder.append_operator(symbol)

    def on_equals(self) -> str:
        outcome = self._builder.evaluate()
        if outcome is not None:
            self._last_outcome = outcome
        return self.display

    def on_clear(self) -> str:
        self._last_outcome = None
        return self._builder.clear()

    def press(self, key: str) -> str:
        """
        Dispatch a key label to the matching handler.

        Keys: "0".."9", ".", "+", "-", "*", "/", "=" and "C".

        :param str key: Key label

        :return: New display text
        :rtype: str
        :raises ValueError: If the key is unknown
        """
        if key == EQUALS_KEY:
            return self.on_equals()
        if key == CLEAR_KEY:
            return self.on_clear()
        if key in OPERATORS:
            return self.on_operator(key)
        if len(key) == 1 and (key in DIGITS or key == DECIMAL_POINT):
            return self.on_number_token(key)
        raise ValueError(f"Unknown key: {key!r}")
