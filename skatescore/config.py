"""Application configuration with validation."""
from typing import Literal
from functools import lru_cache
from pathlib import Path
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# REFERENCE DATA
# =============================================================================
# The ISU Scale of Values ships with the package. SOV_PATH may point at a
# newer season's document with the same layout:
#   {"elements": {"3Lz": {"base": 5.90, "goe": {"-5": -2.95, ..., "5": 2.95}}}}
# =============================================================================

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_SOV_PATH = DATA_DIR / "isu_sov_2025_26_singles_pairs.json"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Skate Score Calculator"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "console"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # Scale of Values
    SOV_PATH: Path = DEFAULT_SOV_PATH

    # Program components
    PCS_FACTOR: float = Field(default=1.67, gt=0.0, le=5.0)
    PCS_COMPONENT_MAX: float = Field(default=10.0, gt=0.0)

    @field_validator("SOV_PATH")
    @classmethod
    def validate_sov_suffix(cls, v: Path) -> Path:
        if v.suffix.lower() != ".json":
            raise ValueError(f"SOV_PATH must be a .json document, got {v.name}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
