"""Core layer: exception hierarchy shared across the package."""

from drone_helm.core.exceptions import (
    ConfigurationError,
    DroneHelmException,
    EnvCoercionError,
    FatalException,
)

__all__ = [
    "DroneHelmException",
    "FatalException",
    "ConfigurationError",
    "EnvCoercionError",
]
