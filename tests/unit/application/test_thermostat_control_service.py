"""Unit tests for ThermostatControlService."""

import logging
from unittest.mock import Mock

import pytest

from application.services import ThermostatControlService
from domain.entities import HeatingPlan, ThermostatState
from domain.interfaces import IThermostatStateProvider
from domain.value_objects import ThermostatMode
from infrastructure.adapters import InMemoryThermostatStateProvider


@pytest.fixture
def heating_plan() -> HeatingPlan:
    """Create a heating plan bounded to 10-20°C."""
    return HeatingPlan.from_bounds(10.0, 20.0)


@pytest.fixture
def provider() -> InMemoryThermostatStateProvider:
    """Create a provider for a 10°C room with 15°C selected."""
    return InMemoryThermostatStateProvider(current_temperature=10.0, selected_temperature=15.0)


@pytest.fixture
def service(heating_plan, provider) -> ThermostatControlService:
    """Create the control service."""
    return ThermostatControlService(plan=heating_plan, provider=provider)


class TestProcessReading:
    """Tests for ThermostatControlService.process_reading."""

    def test_heats_cold_room(self, service, provider):
        """Test a room below target is heated."""
        assert service.process_reading() is ThermostatMode.HEAT
        assert provider.get_state().mode is ThermostatMode.HEAT

    def test_follows_reading_updates(self, service, provider):
        """Test consecutive steps track the readings."""
        service.process_reading()

        provider.update_readings(current_temperature=20.0)
        assert service.process_reading() is ThermostatMode.COOL

        provider.update_readings(current_temperature=15.0)
        assert service.process_reading() is ThermostatMode.OFF
        assert provider.get_state().mode is ThermostatMode.OFF

    def test_logs_mode_change_at_info(self, service, caplog):
        """Test a mode transition is logged at info level."""
        with caplog.at_level(logging.INFO):
            service.process_reading()

        assert "Thermostat mode changed off → heat" in caplog.text

    def test_unchanged_mode_is_not_logged_at_info(self, service, caplog):
        """Test repeated decisions do not log at info level."""
        service.process_reading()
        caplog.clear()

        with caplog.at_level(logging.INFO):
            service.process_reading()

        assert "Thermostat mode changed" not in caplog.text

    def test_uses_provider_interface(self, heating_plan):
        """Test the service works against any provider implementation."""
        state = ThermostatState(current_temperature=25.0, selected_temperature=30.0)
        provider = Mock(spec=IThermostatStateProvider)
        provider.get_state.return_value = state

        service = ThermostatControlService(plan=heating_plan, provider=provider)

        assert service.process_reading() is ThermostatMode.COOL
        assert state.mode is ThermostatMode.COOL
        provider.get_state.assert_called_once_with()

    def test_delegates_to_temperature_manager(self, heating_plan, provider):
        """Test a custom temperature manager is used when given."""
        manager = Mock()
        manager.handle_thermostat_reading.return_value = ThermostatMode.OFF

        service = ThermostatControlService(
            plan=heating_plan,
            provider=provider,
            temperature_manager=manager,
        )
        service.process_reading()

        manager.handle_thermostat_reading.assert_called_once_with(
            heating_plan, provider.get_state()
        )


class TestGetStatus:
    """Tests for ThermostatControlService.get_status."""

    def test_status_reports_clamped_target(self, service, provider):
        """Test the status shows readings, clamped target and bounds."""
        provider.update_readings(selected_temperature=30.0)
        service.process_reading()

        status = service.get_status()

        assert status == {
            "current_temperature": 10.0,
            "selected_temperature": 30.0,
            "target_temperature": 20.0,
            "mode": "heat",
            "plan": {"min_temperature": 10.0, "max_temperature": 20.0},
        }

    def test_plan_property(self, service, heating_plan):
        """Test the plan is exposed."""
        assert service.plan is heating_plan
