"""
================================================================================
FILE: drone_helm/config/settings.py
================================================================================

PURPOSE:
    The plugin's configuration record. Captures drone's `settings` and
    `environment` blocks, which arrive as environment variables, into a
    single validated, immutable HelmConfig.

WORKFLOW:
    1. Fixed-prefix pass: PLUGIN_<SUFFIX> (drone `settings` block)
    2. Unprefixed pass: <SUFFIX> (drone `environment` block), overrides 1
    3. Configurable-prefix pass: <PREFIX>_<SUFFIX>, where PREFIX is the value
       of PLUGIN_PREFIX as read in pass 1; overrides 1 and 2
    4. Timeout normalization: "42" -> "42s"
    5. If debug is on, write one redacted line to stderr

INPUTS:
    - Process environment, e.g.
        PLUGIN_HELM_COMMAND=upgrade
        PLUGIN_PREFIX=prod
        PROD_KUBERNETES_TOKEN=...
    - stdout / stderr writers (never read from the environment)

OUTPUTS:
    - HelmConfig, accessed as cfg.command, cfg.timeout, etc.

KEY FACTS:
    - Fields not set by any pass keep their zero value ("", False, [])
    - Field-to-variable binding lives in constants.ENV_FIELDS
    - kube_token is never written unredacted to the debug line
    - .env files are not consulted; the environment is the only input

TESTING ENVIRONMENT:
    - Use monkeypatch.setenv / delenv, then call new_config(stdout, stderr)
    - Pass io.StringIO() writers and inspect them
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from drone_helm.config.constants import (
    DEBUG_LINE_TEMPLATE,
    JUST_NUMBERS,
    PLUGIN_PREFIX,
    REDACTED,
    SENSITIVE_FIELDS,
)
from drone_helm.config.sources import ConfigurablePrefixEnvSource, PrefixedEnvSource
from drone_helm.core.exceptions import ConfigurationError
from drone_helm.run.config import RunConfig

logger = logging.getLogger(__name__)


def _render_value(value: Any) -> str:
    if value is None or isinstance(value, (str, bool, list)):
        return str(value)
    # writers render by type; their repr carries a memory address
    return f"<{type(value).__name__}>"


class HelmConfig(BaseSettings):
    """
    Configuration for drone-helm, built from three environment namespaces.

    Field order is significant: it is the order of the debug rendering.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        extra="ignore",
    )

    # ========================================================================
    # DRONE-HELM ITSELF
    # ========================================================================

    command: str = Field(default="", description="Helm command to run")
    drone_event: str = Field(
        default="", description="Drone event that invoked this plugin"
    )
    update_dependencies: bool = Field(
        default=False,
        description="Call `helm dependency update` before the main command",
    )
    add_repos: List[str] = Field(
        default_factory=list,
        description="Call `helm repo add` before the main command",
    )
    prefix: str = Field(
        default="", description="Prefix to use when looking up secret env vars"
    )
    debug: bool = Field(
        default=False,
        description="Generate debug output and pass --debug to all helm commands",
    )

    # ========================================================================
    # VALUES
    # ========================================================================

    values: str = Field(default="", description="Argument to pass to --set")
    string_values: str = Field(
        default="", description="Argument to pass to --set-string"
    )
    values_files: List[str] = Field(
        default_factory=list, description="Arguments to pass to --values"
    )

    # ========================================================================
    # KUBERNETES CLUSTER
    # ========================================================================

    namespace: str = Field(
        default="", description="Kubernetes namespace for all helm commands"
    )
    kube_token: str = Field(
        default="", description="Kubernetes authentication token for .kube/config"
    )
    skip_tls_verify: bool = Field(
        default=False, description="Put insecure-skip-tls-verify in .kube/config"
    )
    certificate: str = Field(
        default="", description="Cluster CA's self-signed certificate, base64-encoded"
    )
    api_server: str = Field(default="", description="The cluster's API endpoint")
    service_account: str = Field(
        default="", description="Account to use for connecting to the cluster"
    )

    # ========================================================================
    # CHART AND HELM FLAGS
    # ========================================================================

    chart_version: str = Field(
        default="", description="Specific chart version to use in `helm upgrade`"
    )
    dry_run: bool = Field(default=False, description="Pass --dry-run")
    wait: bool = Field(default=False, description="Pass --wait")
    reuse_values: bool = Field(
        default=False, description="Pass --reuse-values to `helm upgrade`"
    )
    timeout: str = Field(default="", description="Argument to pass to --timeout")
    chart: str = Field(default="", description="Chart argument for helm commands")
    release: str = Field(default="", description="Release argument for helm commands")
    force: bool = Field(default=False, description="Pass --force")

    # ========================================================================
    # WRITERS (not read from the environment)
    # ========================================================================

    stdout: Optional[Any] = Field(default=None, exclude=True)
    stderr: Optional[Any] = Field(default=None, exclude=True)

    # ========================================================================
    # SOURCES
    # ========================================================================

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """
        Replace the default env/dotenv/secret sources with the three passes.

        Earlier sources win, so the tuple is in reverse pass order.
        """
        fixed = PrefixedEnvSource(settings_cls, PLUGIN_PREFIX)
        unprefixed = PrefixedEnvSource(settings_cls)
        configurable = ConfigurablePrefixEnvSource(settings_cls, fixed, unprefixed)
        return init_settings, configurable, unprefixed, fixed

    # ========================================================================
    # VALIDATORS
    # ========================================================================

    @field_validator("timeout")
    @classmethod
    def _infer_seconds(cls, v: str) -> str:
        """Bare numbers are seconds."""
        if JUST_NUMBERS.fullmatch(v):
            return f"{v}s"
        return v

    # ========================================================================
    # HELPER METHODS
    # ========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the environment-backed fields to a dict with secrets redacted.

        Empty secrets stay empty so the output shows they were never set.
        """
        d = self.model_dump()
        for k in SENSITIVE_FIELDS:
            if d.get(k):
                d[k] = REDACTED
        return d

    def render(self) -> str:
        """Deterministic, redacted `{field:value, ...}` rendering in field order."""
        shown = self.to_dict()
        parts = []
        for name in type(self).model_fields:
            value = shown[name] if name in shown else getattr(self, name)
            parts.append(f"{name}:{_render_value(value)}")
        return "{" + ", ".join(parts) + "}"

    def log_debug(self) -> None:
        """Write the redacted configuration to stderr as a single line."""
        if self.stderr is None:
            return
        self.stderr.write(DEBUG_LINE_TEMPLATE.format(rendered=self.render()))

    def get_run_config(self) -> RunConfig:
        """
        Get the settings shared by every helm command.

        Returns:
            RunConfig holding the same writer objects as this config
        """
        return RunConfig(
            debug=self.debug,
            values=self.values,
            string_values=self.string_values,
            values_files=list(self.values_files),
            namespace=self.namespace,
            stdout=self.stdout,
            stderr=self.stderr,
        )


def new_config(stdout: Any = None, stderr: Any = None) -> HelmConfig:
    """
    Create a HelmConfig from the current environment.

    Args:
        stdout: Writer for regular helm output
        stderr: Writer for diagnostics; receives the debug line

    Returns:
        HelmConfig: populated, immutable configuration

    Raises:
        EnvCoercionError: an environment value does not match its field type
        ConfigurationError: the record could not be assembled
    """
    try:
        cfg = HelmConfig(stdout=stdout, stderr=stderr)
    except ValidationError as e:
        raise ConfigurationError(
            f"invalid configuration: {e.error_count()} error(s)",
            context={"fields": [".".join(map(str, err["loc"])) for err in e.errors()]},
        ) from e

    logger.debug("✅ Configuration loaded from environment")

    if cfg.debug and cfg.stderr is not None:
        cfg.log_debug()

    return cfg
