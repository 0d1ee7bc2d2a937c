"""Process wiring for the thermostat controller.

Builds the control service from environment settings, the way a host
process starts it.
"""

import logging
from collections.abc import Mapping

from application.services import ThermostatControlService
from domain.entities import HeatingPlan
from infrastructure.adapters import EnvironmentSettings, InMemoryThermostatStateProvider
from infrastructure.logging_config import configure_logging

_LOGGER = logging.getLogger(__name__)


def create_control_service(
    current_temperature: float,
    selected_temperature: float,
    environ: Mapping[str, str] | None = None,
) -> tuple[ThermostatControlService, InMemoryThermostatStateProvider]:
    """Create a control service backed by an in-memory state provider.

    Args:
        current_temperature: First sensed ambient temperature in °C
        selected_temperature: First requested temperature in °C
        environ: Variables to read settings from. If None, uses os.environ.

    Returns:
        Tuple of (control service, state provider the host feeds)

    Raises:
        ValueError: If the settings are malformed or min exceeds max
    """
    settings = EnvironmentSettings.from_env(environ)
    configure_logging(settings.log_level)

    plan = HeatingPlan(settings.to_heating_plan_config())
    provider = InMemoryThermostatStateProvider(
        current_temperature=current_temperature,
        selected_temperature=selected_temperature,
    )
    _LOGGER.info(
        "Thermostat controller ready with heating plan %.1f-%.1f°C",
        plan.min_temperature,
        plan.max_temperature,
    )
    return ThermostatControlService(plan=plan, provider=provider), provider
