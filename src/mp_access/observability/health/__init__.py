"""Observability – health check port."""
from mp_access.observability.health.check import HealthCheck, HealthStatus

__all__ = ["HealthCheck", "HealthStatus"]
