"""Thermostat Control Service.

Main application service that runs one step of the thermostat control
loop against a state provider.
"""

import logging
from typing import Any

from domain.entities import HeatingPlan
from domain.interfaces import IThermostatStateProvider
from domain.services import TemperatureManager
from domain.value_objects import ThermostatMode

_LOGGER = logging.getLogger(__name__)


class ThermostatControlService:
    """Application service for thermostat control.

    This service is the entry point for the host's control loop.
    It reads the thermostat through the provider, lets the domain
    decide the mode, and leaves the mode on the shared state for
    the provider to apply.
    """

    def __init__(
        self,
        plan: HeatingPlan,
        provider: IThermostatStateProvider,
        temperature_manager: TemperatureManager | None = None,
    ) -> None:
        """Initialize the thermostat control service.

        Args:
            plan: Heating plan bounding the selected temperature
            provider: Thermostat state provider implementation
            temperature_manager: Mode decision service (optional)
        """
        self._plan = plan
        self._provider = provider
        self._temperature_manager = temperature_manager or TemperatureManager()

    @property
    def plan(self) -> HeatingPlan:
        return self._plan

    def process_reading(self) -> ThermostatMode:
        """Run one control step.

        Returns:
            Mode now set on the thermostat state
        """
        state = self._provider.get_state()
        previous_mode = state.mode
        mode = self._temperature_manager.handle_thermostat_reading(self._plan, state)

        if mode != previous_mode:
            _LOGGER.info(
                "Thermostat mode changed %s → %s (current %.1f°C, target %.1f°C)",
                previous_mode.value,
                mode.value,
                state.current_temperature,
                self._plan.target_temperature(state.selected_temperature),
            )
        else:
            _LOGGER.debug("Thermostat mode unchanged: %s", mode.value)

        return mode

    def get_status(self) -> dict[str, Any]:
        """Get the current controller status.

        Returns:
            Dictionary with readings, target, mode and plan bounds
        """
        state = self._provider.get_state()
        return {
            "current_temperature": state.current_temperature,
            "selected_temperature": state.selected_temperature,
            "target_temperature": self._plan.target_temperature(state.selected_temperature),
            "mode": state.mode.value,
            "plan": {
                "min_temperature": self._plan.min_temperature,
                "max_temperature": self._plan.max_temperature,
            },
        }
