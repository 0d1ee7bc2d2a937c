"""Domain layer for the thermostat controller.

This package contains the core control policy, following
Domain-Driven Design (DDD) principles.

The domain layer is pure Python with no dependencies on
sensors, actuators, or any infrastructure concerns.
"""
