"""Domain entities for the thermostat controller.

Entities are objects with identity that encapsulate business rules and behavior.
"""

from .heating_plan import HeatingPlan
from .thermostat_state import ThermostatState

__all__ = ["HeatingPlan", "ThermostatState"]
