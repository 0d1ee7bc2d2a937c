"""Domain services for thermostat control.

Services contain pure business logic and operate on entities and value objects.
"""

from .temperature_manager import TemperatureManager

__all__ = [
    "TemperatureManager",
]
