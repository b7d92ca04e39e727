from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import Optional


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings - all configurable via environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ==========================================
    # Application
    # ==========================================
    APP_NAME: str = "wits-campus-map"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # ==========================================
    # Logging
    # ==========================================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # ==========================================
    # Campus data
    # ==========================================
    # JSON file with {"center", "venues", "pathways"}; built-in data when unset
    CAMPUS_DATA_PATH: Optional[str] = None
    NEARBY_DEFAULT_LIMIT: int = 10

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("NEARBY_DEFAULT_LIMIT")
    @classmethod
    def validate_nearby_limit(cls, v: int) -> int:
        if not 1 <= v <= 100:
            raise ValueError("NEARBY_DEFAULT_LIMIT must be between 1 and 100")
        return v


settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the process-wide settings"""
    return settings
