"""Pydantic v2 model for the answers that drive project scaffolding.

An :class:`Answers` instance is always valid: the project name and target
version are checked on construction, and options that only make sense with
scripting enabled are normalised to ``False`` when scripting is disabled.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .validators import (
    sanitize_name,
    validate_answers_name,
    validate_target_version,
)


class ScriptingLanguage(str, Enum):
    """Language used for the behavior pack scripts, if any."""
    JAVASCRIPT = "js"
    TYPESCRIPT = "ts"
    NONE = "none"


class Answers(BaseModel):
    """The validated user answers for one add-on project."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Display name; also the base directory name")
    include_resource_pack: bool = Field(default=False)
    target_version: str = Field(..., description="Minecraft version, x.y.z or x.y.z.t")
    scripting_language: ScriptingLanguage = Field(default=ScriptingLanguage.NONE)
    include_local_filters: bool = Field(
        default=False, description="Only honoured when scripting is enabled"
    )
    include_eslint: bool = Field(
        default=False, description="Only honoured when scripting is enabled"
    )
    include_prettier: bool = Field(default=False)

    # -- Validation ---------------------------------------------------------

    @model_validator(mode="before")
    @classmethod
    def _normalise_scripting_options(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        language = data.get("scripting_language", ScriptingLanguage.NONE)
        if language in (ScriptingLanguage.NONE, ScriptingLanguage.NONE.value):
            data = {**data, "include_local_filters": False, "include_eslint": False}
        return data

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        validate_answers_name(value)
        return value

    @field_validator("target_version")
    @classmethod
    def _check_target_version(cls, value: str) -> str:
        validate_target_version(value)
        return value

    # ------------------------------------------------------------------
    # Derived values (read-only properties)
    # ------------------------------------------------------------------

    @property
    def base_dir_name(self) -> str:
        """Sanitized project name used as the base directory."""
        return sanitize_name(self.project_name)

    @property
    def use_scripting(self) -> bool:
        return self.scripting_language is not ScriptingLanguage.NONE

    @property
    def use_typescript(self) -> bool:
        return self.scripting_language is ScriptingLanguage.TYPESCRIPT

    @property
    def use_local_filters(self) -> bool:
        return self.use_scripting and self.include_local_filters

    @property
    def use_eslint(self) -> bool:
        return self.use_scripting and self.include_eslint

    @property
    def index_script_name(self) -> str:
        """File name of the entry-point script (``index.ts`` or ``index.js``)."""
        return "index.ts" if self.use_typescript else "index.js"

    @property
    def is_targeting_preview(self) -> bool:
        """A fourth version component marks a preview build."""
        return len(self.target_version.split(".")) > 3

    @property
    def min_engine_version(self) -> list[int]:
        """Numeric ``[major, minor, patch]`` with any preview component stripped."""
        return [int(v) for v in self.target_version.split(".")[:3]]
