"""Shared logger used by every button_calculator module."""
import logging
import sys
from typing import Optional

from pydantic import ValidationError

from button_calculator.common.config import LoggingSettings


LOGGER_NAME = "button_calculator"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def build_logger(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """
    Create the package logger with a single stream handler.

    Without explicit settings the level comes from ``BUTTON_CALCULATOR_LOG_LEVEL`` (default ``INFO``).
    An invalid value keeps ``INFO`` and is reported as a warning.

    :param Optional[LoggingSettings] settings: Logging settings, read from the environment when omitted

    :return: Configured logger
    :rtype: logging.Logger
    """
    log = logging.getLogger(LOGGER_NAME)
    # Avoid duplicated handlers when the module is reloaded
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)

    invalid: Optional[ValidationError] = None
    if settings is None:
        try:
            settings = LoggingSettings()
        except ValidationError as exc:
            invalid = exc
            settings = LoggingSettings(log_level="INFO")

    log.setLevel(settings.log_level)
    if invalid is not None:
        log.warning(f"⚙️❌ Invalid logging settings, using INFO: {invalid.errors()[0]['msg']}")
    return log


logger: logging.Logger = build_logger()
