"""Thermostat state provider interface.

Contract for obtaining the state of the thermostat being controlled.
"""

from abc import ABC, abstractmethod

from domain.entities import ThermostatState


class IThermostatStateProvider(ABC):
    """Contract for access to the thermostat state.

    Implementations keep the readings up to date from whatever sensors
    the host has, and apply the mode written back onto the state to the
    physical heating system.
    """

    @abstractmethod
    def get_state(self) -> ThermostatState:
        """Get the thermostat state.

        The returned object is shared: mode changes made on it are
        visible to the provider.

        Returns:
            The thermostat state
        """
        pass
