from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    """Base settings for the application."""

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    APP_NAME: str = "ResilientMe Coping Core"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "Coping-strategy recommendation engine for the ResilientMe journal"
    APP_AUTHOR: str = "ResilientMe Development Team"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOGS_DIR: str = "logs"
    LOG_TO_FILE: bool = True

    # Recommendation engine
    RECOMMENDATION_MAX_RESULTS: int = Field(default=5, ge=1, description="Upper bound on strategies per recommendation")
    RECOMMENDATION_PER_CATEGORY: int = Field(default=2, ge=1, description="Strategies taken from each matched category")
    RECOMMENDATION_TRIGGER_LIMIT: int = Field(default=2, ge=0, description="Extra strategies pulled in by a named trigger")
    RECOMMENDATION_SHUFFLE: bool = True
    RECOMMENDATION_SEED: Optional[int] = Field(default=None, description="Fixed seed for reproducible selection")

    # Intensity is compared as a 0-1 fraction of the caller's scale
    STRONG_REACTION_THRESHOLD: float = Field(default=0.7, ge=0.0, le=1.0)

    # Journal entries at or below this many characters are not analysed
    JOURNAL_MIN_LENGTH: int = 30

    # Mood history needs at least this many matching check-ins to count as a pattern
    INSIGHT_THRESHOLD: int = Field(default=3, ge=1)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """Upper-cased log level, falling back to INFO when blank."""
        if self.LOG_LEVEL and self.LOG_LEVEL.strip():
            return self.LOG_LEVEL.strip().upper()
        return "INFO"


settings = Settings()
