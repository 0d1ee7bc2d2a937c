"""In-memory implementation of the thermostat state provider.

Infrastructure adapter holding a single thermostat state in memory.
"""

import logging

from domain.entities import ThermostatState
from domain.interfaces import IThermostatStateProvider
from domain.value_objects import ThermostatMode

_LOGGER = logging.getLogger(__name__)


class InMemoryThermostatStateProvider(IThermostatStateProvider):
    """In-memory implementation of the thermostat state provider.

    The host pushes sensor readings in with update_readings() and reads
    the decided mode back from the state.
    """

    def __init__(
        self,
        current_temperature: float,
        selected_temperature: float,
        mode: ThermostatMode = ThermostatMode.OFF,
    ) -> None:
        """Initialize the provider with the first readings.

        Args:
            current_temperature: Sensed ambient temperature in °C
            selected_temperature: Temperature requested by the occupant in °C
            mode: Initial mode (default: OFF)
        """
        self._state = ThermostatState(
            current_temperature=current_temperature,
            selected_temperature=selected_temperature,
            mode=mode,
        )
        _LOGGER.info(
            "Initialized InMemoryThermostatStateProvider: current=%.1f°C, selected=%.1f°C",
            current_temperature,
            selected_temperature,
        )

    def get_state(self) -> ThermostatState:
        return self._state

    def update_readings(
        self,
        current_temperature: float | None = None,
        selected_temperature: float | None = None,
    ) -> None:
        """Store new sensor readings.

        Readings left as None keep their previous value.

        Args:
            current_temperature: New sensed ambient temperature in °C
            selected_temperature: New requested temperature in °C
        """
        if current_temperature is not None:
            self._state.current_temperature = current_temperature
        if selected_temperature is not None:
            self._state.selected_temperature = selected_temperature

        _LOGGER.debug(
            "Readings updated: current=%.1f°C, selected=%.1f°C",
            self._state.current_temperature,
            self._state.selected_temperature,
        )
