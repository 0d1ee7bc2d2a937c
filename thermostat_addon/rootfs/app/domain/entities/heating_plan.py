"""Heating Plan entity.

Domain entity clamping a selected temperature into the configured range.
"""

from domain.value_objects import HeatingPlanConfig


class HeatingPlan:
    """Clamps selected temperatures to the bounds of a heating plan."""

    def __init__(self, config: HeatingPlanConfig) -> None:
        """Initialize the heating plan.

        Args:
            config: Bounds of the plan
        """
        self._config = config

    @classmethod
    def from_bounds(cls, min_temperature: float, max_temperature: float) -> "HeatingPlan":
        """Build a heating plan directly from its bounds.

        Raises:
            ValueError: If min_temperature exceeds max_temperature
        """
        return cls(HeatingPlanConfig(min_temperature, max_temperature))

    @property
    def config(self) -> HeatingPlanConfig:
        return self._config

    @property
    def min_temperature(self) -> float:
        return self._config.min_temperature

    @property
    def max_temperature(self) -> float:
        return self._config.max_temperature

    def target_temperature(self, selected_temperature: float) -> float:
        """Get the temperature the thermostat should aim for.

        Business rules:
        - Above the plan maximum → the maximum
        - Below the plan minimum → the minimum
        - Otherwise → the selected temperature unchanged

        A NaN selection fails both comparisons and is returned as is.

        Args:
            selected_temperature: Temperature requested by the occupant in °C

        Returns:
            Target temperature in °C
        """
        if selected_temperature > self._config.max_temperature:
            return self._config.max_temperature
        if selected_temperature < self._config.min_temperature:
            return self._config.min_temperature
        return selected_temperature

    def contains(self, temperature: float) -> bool:
        """Check whether a temperature lies within the plan bounds."""
        return self._config.min_temperature <= temperature <= self._config.max_temperature

    def __repr__(self) -> str:
        return (
            f"HeatingPlan(min_temperature={self._config.min_temperature}, "
            f"max_temperature={self._config.max_temperature})"
        )
