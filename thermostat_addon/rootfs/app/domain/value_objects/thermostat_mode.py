"""Thermostat mode value object."""

from enum import Enum


class ThermostatMode(str, Enum):
    """Control action the thermostat applies to the heating system.

    Attributes:
        HEAT: Drive the temperature up towards the target
        COOL: Drive the temperature down towards the target
        OFF: Target reached, do nothing
    """

    HEAT = "heat"
    COOL = "cool"
    OFF = "off"
