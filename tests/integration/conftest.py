"""Pytest fixtures for integration tests.

This module wires the control service the way a host process does,
from environment settings.
"""

from collections.abc import Callable
from unittest.mock import patch

import pytest

from application.services import ThermostatControlService
from infrastructure.adapters import InMemoryThermostatStateProvider
from infrastructure.bootstrap import create_control_service


@pytest.fixture
def build_controller() -> Callable[
    [float, float], tuple[ThermostatControlService, InMemoryThermostatStateProvider]
]:
    """Factory building a control service and its provider for a 10-20°C plan."""

    def _build(
        current_temperature: float,
        selected_temperature: float,
    ) -> tuple[ThermostatControlService, InMemoryThermostatStateProvider]:
        with patch.dict("os.environ", {
            "HEATING_PLAN_MIN": "10",
            "HEATING_PLAN_MAX": "20",
            "LOG_LEVEL": "debug",
        }):
            return create_control_service(current_temperature, selected_temperature)

    return _build
