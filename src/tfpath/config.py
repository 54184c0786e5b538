import logging

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "TFPATH_"


class TfPathConfig(BaseSettings):
    """Process-wide settings, read from ``TFPATH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX, validate_assignment=True, extra="ignore"
    )

    log_level: int = logging.WARNING
    undetermined_log_level: int = logging.INFO
    rich_console: bool = True

    @field_validator("log_level", "undetermined_log_level", mode="before")
    @classmethod
    def _parse_level(cls, value: object, info: ValidationInfo) -> int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        name = str(value).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(
                f"{ENV_PREFIX}{info.field_name.upper()} must be a logging level "
                f"name, got {value!r}"
            )
        return level


TFPATH_CONFIG = TfPathConfig()
