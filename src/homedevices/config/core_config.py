import logging
from typing import Annotated, Self

from pydantic import BeforeValidator, Field, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict, TomlConfigSettingsSource

from homedevices.const import DEFAULT_TEMPERATURE, LOG_LEVELS, MAX_TEMPERATURE, MIN_TEMPERATURE, STATUS_OUTPUTS

LOGGER = logging.getLogger(__name__)


class HomeDevicesConfig(BaseSettings):
    """Configuration for homedevices."""

    model_config = SettingsConfigDict(
        env_prefix="homedevices__",
        env_file=[".env", "./config/.env"],
        toml_file=["homedevices.toml", "./config/homedevices.toml"],
        env_ignore_empty=True,
        extra="ignore",
        env_nested_delimiter="__",
        validate_by_name=True,
        use_attribute_docstrings=True,
        cli_prog_name="homedevices",
        cli_ignore_unknown_args=True,
        cli_kebab_case=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type["BaseSettings"],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources = (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
            TomlConfigSettingsSource(settings_cls),
        )
        return sources

    log_level: Annotated[LOG_LEVELS, BeforeValidator(str.upper)] = Field(default="INFO")
    """Logging level for homedevices."""

    status_output: STATUS_OUTPUTS = Field(default="stdout")
    """Stream that device status lines are written to."""

    thermostat_min_temperature: int = Field(default=MIN_TEMPERATURE)
    """Lowest temperature a thermostat accepts."""

    thermostat_max_temperature: int = Field(default=MAX_TEMPERATURE)
    """Highest temperature a thermostat accepts."""

    @model_validator(mode="after")
    def _check_thermostat_range(self) -> Self:
        if self.thermostat_min_temperature > self.thermostat_max_temperature:
            raise ValueError("thermostat_min_temperature must not exceed thermostat_max_temperature")

        # new thermostats start at the default temperature, it has to be reachable
        if not self.thermostat_min_temperature <= DEFAULT_TEMPERATURE <= self.thermostat_max_temperature:
            raise ValueError(
                f"thermostat range [{self.thermostat_min_temperature}, {self.thermostat_max_temperature}] "
                f"must include the default temperature {DEFAULT_TEMPERATURE}"
            )
        return self
