# drone_helm/__init__.py

"""
Configuration layer for the drone-helm CI plugin.

This package contains:
- config: environment-driven HelmConfig and its namespace pass sources
- core: exception hierarchy
- run: settings shared by every helm command
"""

__all__ = ["__version__"]

__version__ = "1.0.0"
