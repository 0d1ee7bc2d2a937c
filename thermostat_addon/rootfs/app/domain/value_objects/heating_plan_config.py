"""Heating plan configuration value object.

Immutable bounds within which a selected temperature is allowed to range.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class HeatingPlanConfig:
    """Configuration for a heating plan.

    Attributes:
        min_temperature: Lowest target temperature the plan allows in °C
        max_temperature: Highest target temperature the plan allows in °C
    """

    min_temperature: float
    max_temperature: float

    def __post_init__(self) -> None:
        """Validate heating plan bounds."""
        if self.min_temperature > self.max_temperature:
            raise ValueError(
                f"min_temperature must not exceed max_temperature, "
                f"got min={self.min_temperature}, max={self.max_temperature}"
            )
