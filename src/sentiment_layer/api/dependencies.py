"""
FastAPI dependency injection for the Sentiment Layer.

This is the composition root: Settings -> ServiceConfig -> SentimentService.
The service is a process-wide singleton created on first use.
"""

from functools import lru_cache

from sentiment_layer.config import ServiceConfig, Settings, settings
from sentiment_layer.service import SentimentService


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns:
        Settings instance
    """
    return settings


@lru_cache()
def get_service() -> SentimentService:
    """
    Get the singleton SentimentService.

    Builds the immutable ServiceConfig from settings and wires the default
    classifiers behind one pooled HTTP gateway. Settings are read directly
    (not injected) because pydantic settings objects are not hashable.

    Returns:
        SentimentService instance
    """
    return SentimentService.from_config(ServiceConfig.from_settings(get_settings()))
