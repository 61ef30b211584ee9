"""Actuator — health, info and the other management endpoints."""

from pyactuate.actuator.auto_configuration import EndpointAutoConfiguration
from pyactuate.actuator.git import Commit, GitInfo
from pyactuate.actuator.health import (
    CompositeHealthIndicator,
    HealthCheckStrategy,
    HealthIndicator,
    HealthStatus,
    SimpleHealthIndicator,
    VanillaHealthIndicator,
)
from pyactuate.actuator.info import InfoAggregator, InfoProperties, InfoReport
from pyactuate.actuator.registry import ActuatorRegistry
from pyactuate.actuator.resolver import HealthIndicatorResolver

__all__ = [
    "ActuatorRegistry",
    "Commit",
    "CompositeHealthIndicator",
    "EndpointAutoConfiguration",
    "GitInfo",
    "HealthCheckStrategy",
    "HealthIndicator",
    "HealthIndicatorResolver",
    "HealthStatus",
    "InfoAggregator",
    "InfoProperties",
    "InfoReport",
    "SimpleHealthIndicator",
    "VanillaHealthIndicator",
]
