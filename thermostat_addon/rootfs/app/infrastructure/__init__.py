"""Infrastructure layer for the thermostat controller.

This package contains implementations of domain interfaces and the
process-level setup (configuration, logging) of the host.
"""
