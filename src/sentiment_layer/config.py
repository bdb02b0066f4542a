"""
Configuration settings for the Sentiment Layer.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.

`Settings` is the raw environment view. `ServiceConfig` is the frozen,
explicitly constructed configuration handed to `SentimentService` by the
composition root (see api/dependencies.py).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Token value shipped in sample configs; never sent to a remote classifier
PLACEHOLDER_TOKEN = "hf_dummy_token"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "Sentiment Layer"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # === Remote classifiers ===
    HF_API_TOKEN: Optional[str] = None
    PRIMARY_MODEL_URL: str = (
        "https://api-inference.huggingface.co/models/"
        "cardiffnlp/twitter-roberta-base-sentiment-latest"
    )
    SECONDARY_MODEL_URL: str = (
        "https://api-inference.huggingface.co/models/"
        "nlptown/bert-base-multilingual-uncased-sentiment"
    )
    CLASSIFIER_TIMEOUT: float = 15.0  # seconds
    ENSEMBLE_ENABLED: bool = True

    # === Fusion weights (fixed, not learned) ===
    PRIMARY_WEIGHT: float = 0.7
    SECONDARY_WEIGHT: float = 0.3

    # === Batch processing ===
    BATCH_SIZE: int = 3
    BATCH_PAUSE_SECONDS: float = 2.0  # Rate-limit pause between groups

    # === Keywords ===
    KEYWORD_LIMIT: int = 6

    # === API guards ===
    MAX_TEXT_LENGTH: int = 10000  # chars
    MAX_BATCH_ITEMS: int = 100

    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


class ServiceConfig(BaseModel):
    """
    Immutable runtime configuration for SentimentService.

    Reconfiguration never mutates an instance: the service swaps in a
    new copy (see `with_credential` / `with_ensemble`), so each analysis
    can snapshot the config once and keep a consistent view.
    """

    model_config = ConfigDict(frozen=True)

    api_token: Optional[str] = Field(default=None, description="Bearer token for remote classifiers")
    primary_url: str
    secondary_url: str
    timeout: float = Field(default=15.0, gt=0)
    ensemble_enabled: bool = True
    primary_weight: float = Field(default=0.7, ge=0.0)
    secondary_weight: float = Field(default=0.3, ge=0.0)
    batch_size: int = Field(default=3, ge=1)
    batch_pause_seconds: float = Field(default=2.0, ge=0.0)
    keyword_limit: int = Field(default=6, ge=1)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ServiceConfig":
        """Build the runtime config from environment settings."""
        return cls(
            api_token=settings.HF_API_TOKEN,
            primary_url=settings.PRIMARY_MODEL_URL,
            secondary_url=settings.SECONDARY_MODEL_URL,
            timeout=settings.CLASSIFIER_TIMEOUT,
            ensemble_enabled=settings.ENSEMBLE_ENABLED,
            primary_weight=settings.PRIMARY_WEIGHT,
            secondary_weight=settings.SECONDARY_WEIGHT,
            batch_size=settings.BATCH_SIZE,
            batch_pause_seconds=settings.BATCH_PAUSE_SECONDS,
            keyword_limit=settings.KEYWORD_LIMIT,
        )

    @property
    def has_credential(self) -> bool:
        """True when a real (non-placeholder, non-blank) token is configured."""
        if not self.api_token or not self.api_token.strip():
            return False
        return self.api_token != PLACEHOLDER_TOKEN

    def with_credential(self, token: Optional[str]) -> "ServiceConfig":
        return self.model_copy(update={"api_token": token})

    def with_ensemble(self, enabled: bool) -> "ServiceConfig":
        return self.model_copy(update={"ensemble_enabled": enabled})


# Global settings instance
settings = Settings()
