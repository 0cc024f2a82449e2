"""
Configuration management for TruckFlow.
"""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from truckflow.models.pay_profile import EarningProfile, PayProfile

DEFAULT_INPUT_FILE = "loads_2025-05-01_to_2026-01-31_2026-02-22.json"
DEFAULT_OUTPUT_FILE = "truckflow-import.json"


class TruckflowConfig(BaseSettings):
    """Configuration settings for the TruckFlow tools."""

    # Application Configuration
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    # Conversion Configuration
    default_input_file: str = Field(
        default=DEFAULT_INPUT_FILE, alias="DEFAULT_INPUT_FILE"
    )
    default_output_file: str = Field(
        default=DEFAULT_OUTPUT_FILE, alias="DEFAULT_OUTPUT_FILE"
    )

    # Fallback pay profile when a backup carries no settings
    earning_profile: str = Field(
        default=EarningProfile.OWNER_OPERATOR.value, alias="EARNING_PROFILE"
    )
    rate_per_mile: float = Field(default=0.0, ge=0, alias="RATE_PER_MILE")
    percentage_rate: float = Field(default=0.0, ge=0, alias="PERCENTAGE_RATE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ["development", "testing", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    @field_validator("earning_profile")
    @classmethod
    def validate_earning_profile(cls, v):
        """Ensure the earning profile is one of the supported formulas."""
        valid_profiles = [p.value for p in EarningProfile]
        if v.lower() not in valid_profiles:
            raise ValueError(f"Earning profile must be one of: {valid_profiles}")
        return v.lower()

    def default_pay_profile(self) -> PayProfile:
        """Build the pay profile configured through the environment."""
        return PayProfile.with_defaults(
            {
                "earning_profile": self.earning_profile,
                "rate_per_mile": self.rate_per_mile,
                "percentage_rate": self.percentage_rate,
            }
        )


def load_config(env_file: Optional[str] = None) -> TruckflowConfig:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return TruckflowConfig()


# Global configuration instance
_config: Optional[TruckflowConfig] = None


def get_config() -> TruckflowConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> TruckflowConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
