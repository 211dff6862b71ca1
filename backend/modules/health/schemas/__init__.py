from .health_schemas import DatabaseHealth, ServiceStatus

__all__ = ["DatabaseHealth", "ServiceStatus"]
