"""Value objects for the thermostat domain.

Value objects are immutable data carriers that represent domain concepts.
They have no identity and are compared by their attributes.
"""

from .heating_plan_config import HeatingPlanConfig
from .thermostat_mode import ThermostatMode
from .thermostat_reading import ThermostatReading

__all__ = [
    "HeatingPlanConfig",
    "ThermostatMode",
    "ThermostatReading",
]
