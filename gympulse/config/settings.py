from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_file() -> Path:
    """Get the default snapshot location under the user's home directory."""
    return Path.home() / ".gympulse" / "data.json"


class Settings(BaseSettings):
    data_file: Path = Field(
        default_factory=get_default_data_file,
        validation_alias="GYMPULSE_DATA_FILE",
        description="Path of the persisted workout snapshot",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="GYMPULSE_LOG_FILE",
        description="Optional rotating log file (console only when unset)",
    )
    max_reps: int = Field(
        default=99,
        validation_alias="GYMPULSE_MAX_REPS",
        description="Upper bound applied to reps input before submission",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(valid_levels)}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("max_reps")
    @classmethod
    def validate_max_reps(cls, value: int) -> int:
        """Reps input holds at most two digits."""
        if not 1 <= value <= 99:
            logger.warning(f"Invalid GYMPULSE_MAX_REPS '{value}'. Must be between 1 and 99. Defaulting to 99.")
            return 99
        return value

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
