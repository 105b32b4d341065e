"""Settings applicable to every helm command the plugin runs."""

from drone_helm.run.config import RunConfig

__all__ = ["RunConfig"]
