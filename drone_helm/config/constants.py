"""
================================================================================
FILE: drone_helm/config/constants.py
================================================================================

PURPOSE:
    Constants for the configuration layer, including the static table that
    binds each HelmConfig field to its environment-variable suffix and type.

ENVIRONMENT NAMESPACES:
    1. Fixed prefix     PLUGIN_<SUFFIX>     drone `settings` block
    2. Unprefixed       <SUFFIX>            drone `environment` block
    3. Configurable     <PREFIX>_<SUFFIX>   secrets, prefix from PLUGIN_PREFIX

KEY FACTS:
    - The same table drives all three passes; only the prefix changes
    - Table order is declaration order, which is also debug-dump order
    - No imports from other drone_helm modules (prevent circular deps)
"""

import re
from typing import Any, List, NamedTuple, Tuple


class EnvField(NamedTuple):
    """One environment-backed field: attribute name, variable suffix, annotation."""

    name: str
    suffix: str
    annotation: Any


# ================================================================================
# FIELD TABLE
# ================================================================================

ENV_FIELDS: Tuple[EnvField, ...] = (
    # drone-helm itself
    EnvField("command", "HELM_COMMAND", str),
    EnvField("drone_event", "DRONE_BUILD_EVENT", str),
    EnvField("update_dependencies", "UPDATE_DEPENDENCIES", bool),
    EnvField("add_repos", "HELM_REPOS", List[str]),
    EnvField("prefix", "PREFIX", str),
    EnvField("debug", "DEBUG", bool),
    # value injection
    EnvField("values", "VALUES", str),
    EnvField("string_values", "STRING_VALUES", str),
    EnvField("values_files", "VALUES_FILES", List[str]),
    # cluster connectivity
    EnvField("namespace", "NAMESPACE", str),
    EnvField("kube_token", "KUBERNETES_TOKEN", str),
    EnvField("skip_tls_verify", "SKIP_TLS_VERIFY", bool),
    EnvField("certificate", "KUBERNETES_CERTIFICATE", str),
    EnvField("api_server", "API_SERVER", str),
    EnvField("service_account", "SERVICE_ACCOUNT", str),
    # chart selection and helm flags
    EnvField("chart_version", "CHART_VERSION", str),
    EnvField("dry_run", "DRY_RUN", bool),
    EnvField("wait", "WAIT", bool),
    EnvField("reuse_values", "REUSE_VALUES", bool),
    EnvField("timeout", "TIMEOUT", str),
    EnvField("chart", "CHART", str),
    EnvField("release", "RELEASE", str),
    EnvField("force", "FORCE", bool),
)

# ================================================================================
# NAMESPACES
# ================================================================================

PLUGIN_PREFIX = "PLUGIN"
PREFIX_FIELD = "prefix"
LIST_SEPARATOR = ","

# ================================================================================
# DEBUG OUTPUT
# ================================================================================

SENSITIVE_FIELDS: Tuple[str, ...] = ("kube_token",)
REDACTED = "(redacted)"
DEBUG_LINE_TEMPLATE = "Generated config: {rendered}\n"

# Timeouts made only of digits are read as seconds
JUST_NUMBERS = re.compile(r"[0-9]+")
