"""Temperature manager service.

Domain service deciding whether the thermostat should heat, cool, or switch off.
"""

import logging

from domain.entities import HeatingPlan, ThermostatState
from domain.value_objects import ThermostatMode

logger = logging.getLogger(__name__)


class TemperatureManager:
    """Service comparing target and current temperature to pick a mode.

    Comparisons use plain numeric equality. Floating point noise can
    therefore flip a reading from OFF to HEAT or COOL; no rounding is
    applied.
    """

    def decide_mode(
        self,
        target_temperature: float,
        current_temperature: float,
    ) -> ThermostatMode:
        """Decide the mode for a target and a current temperature.

        Business rules:
        - Target above current → HEAT
        - Target below current → COOL
        - Otherwise → OFF

        NaN on either side fails both comparisons and yields OFF.

        Args:
            target_temperature: Clamped target temperature in °C
            current_temperature: Sensed ambient temperature in °C

        Returns:
            Mode to apply
        """
        if target_temperature > current_temperature:
            return ThermostatMode.HEAT
        if target_temperature < current_temperature:
            return ThermostatMode.COOL
        return ThermostatMode.OFF

    def handle_thermostat_reading(
        self,
        plan: HeatingPlan,
        state: ThermostatState,
    ) -> ThermostatMode:
        """Decide the mode for a thermostat and write it onto its state.

        Args:
            plan: Heating plan clamping the selected temperature
            state: Thermostat state, its mode is overwritten

        Returns:
            Mode that was applied
        """
        target = plan.target_temperature(state.selected_temperature)
        mode = self.decide_mode(target, state.current_temperature)

        logger.debug(
            "Reading: current %.1f°C, selected %.1f°C, target %.1f°C → %s",
            state.current_temperature,
            state.selected_temperature,
            target,
            mode.value,
        )

        if mode is ThermostatMode.HEAT:
            state.set_to_heat()
        elif mode is ThermostatMode.COOL:
            state.set_to_cool()
        else:
            state.set_off()

        return mode
