"""Environment settings loader.

Reads the heating plan bounds and the log level from environment
variables.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from domain.value_objects import HeatingPlanConfig

_LOGGER = logging.getLogger(__name__)

DEFAULT_MIN_TEMPERATURE = 10.0
DEFAULT_MAX_TEMPERATURE = 20.0
DEFAULT_LOG_LEVEL = "info"


def _read_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


@dataclass(frozen=True)
class EnvironmentSettings:
    """Settings of the thermostat controller.

    Attributes:
        min_temperature: Heating plan minimum in °C (HEATING_PLAN_MIN)
        max_temperature: Heating plan maximum in °C (HEATING_PLAN_MAX)
        log_level: Logging level name (LOG_LEVEL)
    """

    min_temperature: float = DEFAULT_MIN_TEMPERATURE
    max_temperature: float = DEFAULT_MAX_TEMPERATURE
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "EnvironmentSettings":
        """Load settings from the environment.

        Args:
            environ: Variables to read from. If None, uses os.environ.

        Returns:
            Parsed settings

        Raises:
            ValueError: If a bound is not a number
        """
        if environ is None:
            environ = os.environ

        settings = cls(
            min_temperature=_read_float(environ, "HEATING_PLAN_MIN", DEFAULT_MIN_TEMPERATURE),
            max_temperature=_read_float(environ, "HEATING_PLAN_MAX", DEFAULT_MAX_TEMPERATURE),
            log_level=environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )
        _LOGGER.debug(
            "Loaded settings: min=%.1f°C, max=%.1f°C, log_level=%s",
            settings.min_temperature,
            settings.max_temperature,
            settings.log_level,
        )
        return settings

    def to_heating_plan_config(self) -> HeatingPlanConfig:
        """Build the heating plan configuration.

        Raises:
            ValueError: If the minimum exceeds the maximum
        """
        return HeatingPlanConfig(
            min_temperature=self.min_temperature,
            max_temperature=self.max_temperature,
        )
