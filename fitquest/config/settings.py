from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CATALOG_PATH = Path(__file__).parent.parent / "data" / "exercise_catalog.yaml"


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="FITQUEST_LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="FITQUEST_LOG_FILE",
        description="Optional rotating log file; console only when unset",
    )
    catalog_path: Path = Field(
        default=DEFAULT_CATALOG_PATH,
        validation_alias="FITQUEST_CATALOG_PATH",
        description="YAML file with default exercise templates and equipment requirements",
    )
    first_weekday: str = Field(
        default="sunday",
        validation_alias="FITQUEST_FIRST_WEEKDAY",
        description="Calendar week start used to seed weekly plans (sunday | monday)",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid FITQUEST_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("first_weekday")
    @classmethod
    def validate_first_weekday(cls, value: str) -> str:
        """Only Sunday- and Monday-first calendars are supported."""
        lower_value = value.lower()
        if lower_value not in {"sunday", "monday"}:
            logger.warning(f"Invalid FITQUEST_FIRST_WEEKDAY '{value}'. Defaulting to sunday.")
            return "sunday"
        return lower_value


settings = Settings()
