"""Application services for thermostat control.

These services orchestrate domain logic with infrastructure adapters
to fulfill use cases.
"""

from .thermostat_control_service import ThermostatControlService

__all__ = [
    "ThermostatControlService",
]
