"""Export naming configuration.

Settings arrive from the editor as camelCase keys (exportNameFormat);
snake_case keys are accepted too. The model is frozen: the resolver
only ever reads it.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core import DEFAULT_NAME_FORMAT

logger = logging.getLogger(__name__)


class ExportConfig(BaseModel):
    """Settings used when resolving export names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    export_name_format: str = Field(
        default=DEFAULT_NAME_FORMAT,
        alias="exportNameFormat",
        description="Naming pattern used when the caller supplies none",
    )
    # None keeps ${exportExtension} verbatim when no extension is passed in
    default_export_extension: str | None = Field(
        default=None,
        alias="defaultExportExtension",
        description="Extension used for ${exportExtension} when none is supplied",
    )

    @field_validator("export_name_format")
    @classmethod
    def _require_pattern(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("export name format must not be blank")
        return value

    @field_validator("default_export_extension")
    @classmethod
    def _strip_dot(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip().lstrip(".")
        return value or None


def load_config(settings: Mapping[str, Any] | None = None) -> ExportConfig:
    """Validate a settings mapping into an ExportConfig.

    Unknown keys are ignored so the whole editor settings section can be
    passed in.

    Raises:
        pydantic.ValidationError: If a known setting has an invalid value
    """
    config = ExportConfig.model_validate(dict(settings or {}))
    logger.debug(
        "[CONFIG] export_name_format=%s default_export_extension=%s",
        config.export_name_format,
        config.default_export_extension,
    )
    return config
