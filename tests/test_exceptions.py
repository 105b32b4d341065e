"""Tests for the exception hierarchy."""

from drone_helm.core.exceptions import (
    ConfigurationError,
    DroneHelmException,
    EnvCoercionError,
    FatalException,
)


def test_hierarchy():
    err = EnvCoercionError("PLUGIN_DEBUG", "debug", "sure", "invalid bool")

    assert isinstance(err, ConfigurationError)
    assert isinstance(err, FatalException)
    assert isinstance(err, DroneHelmException)


def test_str_includes_error_code():
    err = ConfigurationError("bad config")

    assert str(err) == "[CONFIG_ERROR] bad config"


def test_to_dict():
    err = EnvCoercionError("PLUGIN_DEBUG", "debug", "sure", "invalid bool")

    assert err.to_dict() == {
        "error": "EnvCoercionError",
        "error_code": "ENV_COERCION_ERROR",
        "message": "cannot assign PLUGIN_DEBUG='sure' to debug: invalid bool",
        "context": {"variable": "PLUGIN_DEBUG", "field": "debug"},
    }
