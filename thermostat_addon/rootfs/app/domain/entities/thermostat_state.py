"""Thermostat State entity.

Domain entity holding the readings of one thermostat and the mode applied to it.
"""

from dataclasses import dataclass

from domain.value_objects import ThermostatMode, ThermostatReading


@dataclass
class ThermostatState:
    """Represents the mutable state of a thermostat.

    The readings are owned by whoever feeds the thermostat. The
    temperature manager only ever writes the mode, through the
    setter actions below.

    Attributes:
        current_temperature: Sensed ambient temperature in °C
        selected_temperature: Temperature requested by the occupant in °C
        mode: Control action currently applied
    """

    current_temperature: float
    selected_temperature: float
    mode: ThermostatMode = ThermostatMode.OFF

    def set_to_heat(self) -> None:
        """Switch the thermostat to heating."""
        self.mode = ThermostatMode.HEAT

    def set_to_cool(self) -> None:
        """Switch the thermostat to cooling."""
        self.mode = ThermostatMode.COOL

    def set_off(self) -> None:
        """Switch the thermostat off."""
        self.mode = ThermostatMode.OFF

    def reading(self) -> ThermostatReading:
        """Get an immutable snapshot of the current readings."""
        return ThermostatReading(
            current_temperature=self.current_temperature,
            selected_temperature=self.selected_temperature,
        )
