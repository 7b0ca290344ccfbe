"""Calculator settings."""
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CalculatorSettings(BaseModel):
    """
    Tunable values shared by the builder, the evaluator and the session.

    The instance is immutable so that a session cannot change its behaviour halfway through an expression.
    """

    model_config = ConfigDict(frozen=True)

    zero_tolerance: float = Field(default=1e-12, ge=0, description="Divisors closer to zero than this fail")
    significant_digits: int = Field(default=12, ge=1, le=17, description="Significant digits kept when rendering a result")
    error_text: str = Field(default="Error", min_length=1, description="Display text after a failed evaluation")
    empty_display: str = Field(default="0", min_length=1, description="Display text for an empty expression")


class LoggingSettings(BaseSettings):
    """Logging options read from ``BUTTON_CALCULATOR_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BUTTON_CALCULATOR_",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept level names in any case ("debug" -> "DEBUG")."""
        return v.upper() if isinstance(v, str) else v
