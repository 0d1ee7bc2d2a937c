"""Thermostat reading value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ThermostatReading:
    """Snapshot of the two temperatures a thermostat reports.

    Attributes:
        current_temperature: Sensed ambient temperature in °C
        selected_temperature: Temperature requested by the occupant in °C
    """

    current_temperature: float
    selected_temperature: float
