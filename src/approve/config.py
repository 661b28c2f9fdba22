"""
Configuration for the approve validation engine.

Settings have sensible defaults and can be overridden through environment
variables:

- APPROVE_STRENGTH_MIN: default minimum password length for ``strength``
- APPROVE_STRENGTH_BONUS: default length earning the ``strength`` bonus point
- APPROVE_STRICT_PLACEHOLDERS: raise on unresolved message placeholders
- APPROVE_LOG_LEVEL: level used by ``configure_logging``
"""

import logging
import os
import re
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Pattern

from .core.exceptions import ConfigurationError

DEFAULT_STRENGTH_MIN = 8
DEFAULT_STRENGTH_BONUS = 10

STRENGTH_LABELS: Dict[int, str] = {
    0: "Very Weak",
    1: "Weak",
    2: "Better",
    3: "Almost",
    4: "Acceptable",
    5: "Strong",
    6: "Very Strong",
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ApproveConfig:
    """
    Engine settings.

    Attributes:
        strength_min: Minimum length used when a strength rule passes no ``min``
        strength_bonus: Bonus length used when a strength rule passes no ``bonus``
        strength_labels: Label for each strength score value
        shorthand_pattern: Shape a bare constraint must have to stand in for
            a test's single parameter
        strict_placeholders: Raise MissingPlaceholder instead of substituting
            an empty string for unresolved placeholders
        log_level: Level name used by configure_logging
    """

    strength_min: int = DEFAULT_STRENGTH_MIN
    strength_bonus: int = DEFAULT_STRENGTH_BONUS
    strength_labels: Mapping[int, str] = field(default_factory=lambda: dict(STRENGTH_LABELS))
    shorthand_pattern: Pattern[str] = re.compile(r"^[A-Za-z0-9]+$")
    strict_placeholders: bool = False
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.strength_min < 0 or self.strength_bonus < 0:
            raise ConfigurationError("strength lengths cannot be negative")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ApproveConfig":
        """
        Build a configuration from ``APPROVE_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            ApproveConfig: Settings with environment overrides applied

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        environ = os.environ if environ is None else environ
        return cls(
            strength_min=_int_setting(environ, "APPROVE_STRENGTH_MIN", DEFAULT_STRENGTH_MIN),
            strength_bonus=_int_setting(environ, "APPROVE_STRENGTH_BONUS", DEFAULT_STRENGTH_BONUS),
            strict_placeholders=environ.get("APPROVE_STRICT_PLACEHOLDERS", "").lower()
            in _TRUE_VALUES,
            log_level=environ.get("APPROVE_LOG_LEVEL", "WARNING"),
        )


def _int_setting(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def configure_logging(config: Optional[ApproveConfig] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Args:
        config: Settings providing the log level; read from the environment
            when omitted

    Returns:
        logging.Logger: The configured ``approve`` logger
    """
    config = config or ApproveConfig.from_env()
    logger = logging.getLogger("approve")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(config.log_level.upper())
    return logger
