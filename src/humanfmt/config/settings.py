"""Application settings with Pydantic validation and TOML/env var support."""

import tomllib
from pathlib import Path
from typing import ClassVar, Literal

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


class Settings(BaseSettings):
    """humanfmt configuration loaded from env vars, TOML, or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="HUMANFMT_",
    )

    CONFIG_PATH: ClassVar[Path] = (
        Path.home() / ".config" / "humanfmt" / "config.toml"
    )

    # Bytes
    units: Literal["si", "iec"] = Field(
        default="si",
        description="Unit system used when neither --si nor --iec is given",
    )

    # Relative time
    past_label: str = Field(default="ago", min_length=1)
    future_label: str = Field(default="from now", min_length=1)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("units", mode="before")
    @classmethod
    def lower_units(cls, value):
        return value.lower() if isinstance(value, str) else value

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def _load_toml_settings(cls) -> dict:
        """Load config TOML and normalize nested sections."""
        if not cls.CONFIG_PATH.exists():
            return {}

        with cls.CONFIG_PATH.open("rb") as f:
            data = tomllib.load(f)

        if not isinstance(data, dict):
            return {}

        flat_keys = {"units", "past_label", "future_label", "log_level"}
        normalized = {
            k: v
            for k, v in data.items()
            if k in flat_keys and not isinstance(v, dict)
        }

        size = data.get("bytes")
        if isinstance(size, dict) and "units" in size:
            normalized["units"] = size["units"]

        relative = data.get("relative")
        if isinstance(relative, dict):
            if "past" in relative:
                normalized["past_label"] = relative["past"]
            if "future" in relative:
                normalized["future_label"] = relative["future"]

        log = data.get("logging")
        if isinstance(log, dict) and "level" in log:
            normalized["log_level"] = log["level"]

        return normalized

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple:
        """Init kwargs win over HUMANFMT_* variables, which win over the TOML file."""
        return (init_settings, env_settings, cls._load_toml_settings)
