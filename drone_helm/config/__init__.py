"""
================================================================================
CONFIG PACKAGE - Environment-driven plugin configuration
================================================================================

EXPORTS
-------
    new_config()   - Build HelmConfig from the process environment
    HelmConfig     - Pydantic settings model for the plugin
    ENV_FIELDS     - Static field -> variable suffix table

USAGE
-----
import sys
from drone_helm.config import new_config

cfg = new_config(sys.stdout, sys.stderr)
run_cfg = cfg.get_run_config()

================================================================================
"""

from drone_helm.config.constants import ENV_FIELDS, EnvField
from drone_helm.config.settings import HelmConfig, new_config

__all__ = [
    "new_config",
    "HelmConfig",
    "ENV_FIELDS",
    "EnvField",
]
