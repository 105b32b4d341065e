"""
Configuration shared by all helm commands.

A narrowed view of HelmConfig, built with HelmConfig.get_run_config(), so
that per-command code only sees the flags that apply everywhere.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RunConfig(BaseModel):
    """Configuration applicable to all helm commands."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    debug: bool = False
    values: str = ""
    string_values: str = ""
    values_files: List[str] = Field(default_factory=list)
    namespace: str = ""
    stdout: Optional[Any] = None
    stderr: Optional[Any] = None
