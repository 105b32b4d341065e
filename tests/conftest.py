import io
import os

import pytest

from drone_helm.config.constants import ENV_FIELDS

_SUFFIXES = tuple(entry.suffix for entry in ENV_FIELDS)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop every variable any namespace pass could read, in any prefix."""
    for name in list(os.environ):
        if name == "LOG_LEVEL" or any(
            name == suffix or name.endswith(f"_{suffix}") for suffix in _SUFFIXES
        ):
            monkeypatch.delenv(name, raising=False)
    yield monkeypatch


@pytest.fixture
def writers():
    """A (stdout, stderr) pair of in-memory writers."""
    return io.StringIO(), io.StringIO()
