"""Domain interfaces for thermostat control.

Interfaces define contracts between the domain and infrastructure layers.
The domain depends on these abstractions, not on concrete implementations.
"""

from .thermostat_state_provider import IThermostatStateProvider

__all__ = [
    "IThermostatStateProvider",
]
