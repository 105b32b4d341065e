# ============================================================================
# SOURCES - One pydantic-settings source per environment namespace
# ============================================================================

"""
Environment namespace sources for HelmConfig.

Drone hands plugin configuration over in three overlapping namespaces:
1. `settings` block   -> PLUGIN_<SUFFIX>        (PrefixedEnvSource("PLUGIN"))
2. `environment` block -> <SUFFIX>              (PrefixedEnvSource(""))
3. prefixed secrets    -> <PREFIX>_<SUFFIX>     (ConfigurablePrefixEnvSource)

Each source reads only the variables that are present, coerces them to the
field's type and returns a partial dict. pydantic-settings merges the dicts
according to the order given in HelmConfig.settings_customise_sources.

The namespace for pass 3 comes from the fixed-prefix pass only, so a bare
PREFIX variable cannot redirect it.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple, get_origin

from pydantic import TypeAdapter, ValidationError
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from drone_helm.config.constants import (
    ENV_FIELDS,
    LIST_SEPARATOR,
    PREFIX_FIELD,
    EnvField,
)
from drone_helm.core.exceptions import EnvCoercionError

logger = logging.getLogger(__name__)

_FIELDS_BY_NAME: Dict[str, EnvField] = {entry.name: entry for entry in ENV_FIELDS}
_ADAPTERS: Dict[str, TypeAdapter] = {
    entry.name: TypeAdapter(entry.annotation) for entry in ENV_FIELDS
}


def split_list(raw: str) -> List[str]:
    """Split a comma-separated value; blank input yields an empty list."""
    if not raw.strip():
        return []
    return raw.split(LIST_SEPARATOR)


def coerce_value(entry: EnvField, variable: str, raw: str) -> Any:
    """
    Convert a raw environment string to the field's declared type.

    Raises:
        EnvCoercionError: if the value does not parse
    """
    value: Any = raw
    if get_origin(entry.annotation) is list:
        value = split_list(raw)

    try:
        return _ADAPTERS[entry.name].validate_python(value)
    except ValidationError as e:
        reason = e.errors()[0]["msg"] if e.errors() else str(e)
        raise EnvCoercionError(variable, entry.name, raw, reason) from e


class PrefixedEnvSource(PydanticBaseSettingsSource):
    """Read every table field from `<PREFIX>_<SUFFIX>`, or `<SUFFIX>` if no prefix."""

    def __init__(self, settings_cls: type[BaseSettings], prefix: str = ""):
        super().__init__(settings_cls)
        self.prefix = prefix.upper()
        self._values: Optional[Dict[str, Any]] = None

    def env_name(self, suffix: str) -> str:
        if self.prefix:
            return f"{self.prefix}_{suffix}"
        return suffix

    def get_field_value(
        self, field: Optional[FieldInfo], field_name: str
    ) -> Tuple[Any, str, bool]:
        entry = _FIELDS_BY_NAME.get(field_name)
        if entry is None:
            return None, field_name, False

        variable = self.env_name(entry.suffix)
        raw = os.environ.get(variable)
        if raw is None:
            return None, variable, False
        return coerce_value(entry, variable, raw), variable, False

    def __call__(self) -> Dict[str, Any]:
        if self._values is not None:
            return self._values

        values: Dict[str, Any] = {}
        for entry in ENV_FIELDS:
            field = self.settings_cls.model_fields.get(entry.name)
            value, _, _ = self.get_field_value(field, entry.name)
            if value is not None:
                values[entry.name] = value

        namespace = f"{self.prefix}_*" if self.prefix else "unprefixed"
        logger.debug(f"✓ {namespace} pass set {len(values)} field(s)")
        self._values = values
        return values

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(prefix={self.prefix!r})"


class ConfigurablePrefixEnvSource(PrefixedEnvSource):
    """
    Highest-precedence pass, namespaced by the prefix read in the fixed pass.

    The earlier passes are evaluated first so coercion errors surface in
    pass order. The prefix is taken from the fixed-prefix pass result, never
    from the unprefixed one.
    """

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        fixed: PrefixedEnvSource,
        unprefixed: PrefixedEnvSource,
    ):
        super().__init__(settings_cls)
        self._fixed = fixed
        self._unprefixed = unprefixed

    def __call__(self) -> Dict[str, Any]:
        if self._values is not None:
            return self._values

        captured = self._fixed().get(PREFIX_FIELD, "")
        self._unprefixed()

        if not captured:
            logger.debug("⊘ No PLUGIN_PREFIX set, skipping configurable-prefix pass")
            self._values = {}
            return self._values

        self.prefix = captured.upper()
        logger.debug(f"🔧 Configurable prefix captured: {self.prefix}")
        return super().__call__()
