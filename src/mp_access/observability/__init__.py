"""Observability – structlog logging and provider health checks."""
from mp_access.observability.health import HealthCheck, HealthStatus
from mp_access.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["HealthCheck", "HealthStatus", "JsonLoggerFactory", "get_logger"]
