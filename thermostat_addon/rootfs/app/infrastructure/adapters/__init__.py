"""Infrastructure adapters for thermostat control.

These adapters implement domain interfaces and load configuration
from the process environment.
"""

from .environment_settings import EnvironmentSettings
from .memory_state_provider import InMemoryThermostatStateProvider

__all__ = [
    "EnvironmentSettings",
    "InMemoryThermostatStateProvider",
]
