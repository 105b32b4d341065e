"""
================================================================================
FILE: drone_helm/core/exceptions.py
================================================================================

PURPOSE:
    Exception hierarchy for the plugin's configuration layer. Every error the
    loader raises is a DroneHelmException carrying an error_code and a
    context dict, so the entry point can log it in a structured way.

EXCEPTION CATEGORIES:
    - FATAL (configuration cannot be used, fail fast):
        * ConfigurationError: record could not be assembled
        * EnvCoercionError: an environment value has the wrong type

KEY FACTS:
    - NO imports from other drone_helm modules (prevents circular deps)
    - Loading is never retried; there is no recoverable category
"""

# ================================================================================
# IMPORTS
# ================================================================================

from typing import Optional, Dict, Any

# ================================================================================
# SECTION 1: BASE EXCEPTIONS
# ================================================================================

class DroneHelmException(Exception):
    """
    Root exception for all drone-helm errors.

    Attributes:
        message (str): Human-readable error message
        error_code (str): Machine-readable error code for categorization
        context (dict): Additional context (optional)
    """

    def __init__(
        self,
        message: str,
        error_code: str = "UNKNOWN_ERROR",
        context: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dict for structured logging"""
        return {
            "error": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context
        }


class FatalException(DroneHelmException):
    """Exception that cannot be recovered; the caller must abort."""
    pass

# ================================================================================
# SECTION 2: CONFIGURATION EXCEPTIONS
# ================================================================================

class ConfigurationError(FatalException):
    """Invalid configuration (fatal)"""

    def __init__(
        self,
        message: str,
        context: Optional[Dict] = None,
        error_code: str = "CONFIG_ERROR",
    ):
        super().__init__(message, error_code=error_code, context=context)


class EnvCoercionError(ConfigurationError):
    """
    An environment variable could not be converted to its field's type.

    Raised by whichever namespace pass read the bad value, even when a later
    pass would have overridden it.
    """

    def __init__(self, variable: str, field: str, value: str, reason: str):
        self.variable = variable
        self.field = field
        super().__init__(
            f"cannot assign {variable}={value!r} to {field}: {reason}",
            context={"variable": variable, "field": field},
            error_code="ENV_COERCION_ERROR",
        )
