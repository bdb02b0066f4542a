"""
API-specific request and response models for FastAPI endpoints.

These wrap the core result models (SentimentResult, BatchAnalysisResult)
with request validation and service status information.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from sentiment_layer.config import settings
from sentiment_layer.models.enums import SentimentLabel
from sentiment_layer.service import split_batch_document


class AnalyzeRequest(BaseModel):
    """Request for single-text analysis."""

    text: str = Field(
        min_length=1,
        max_length=settings.MAX_TEXT_LENGTH,
        description="Free-form text to analyze",
    )


class BatchAnalyzeRequest(BaseModel):
    """
    Request for batch analysis.

    Either `texts` (one item per entry) or `document` (one item per
    non-blank line), or both; document lines are appended after texts.
    """

    texts: list[str] = Field(default_factory=list)
    document: Optional[str] = Field(
        default=None,
        description="Multi-line document; each non-blank line is one item",
    )

    def items(self) -> list[str]:
        """Trimmed, non-blank batch items: texts first, then document lines."""
        items = [t.strip() for t in self.texts if t.strip()]
        if self.document:
            items.extend(split_batch_document(self.document))
        return items

    @model_validator(mode="after")
    def validate_items(self) -> "BatchAnalyzeRequest":
        """Apply the item-count and per-item length limits to the combined batch."""
        items = self.items()
        if not items:
            raise ValueError("Provide at least one non-blank text or document line")
        if len(items) > settings.MAX_BATCH_ITEMS:
            raise ValueError(
                f"Batch has {len(items)} items; at most {settings.MAX_BATCH_ITEMS} allowed"
            )
        for index, item in enumerate(items):
            if len(item) > settings.MAX_TEXT_LENGTH:
                raise ValueError(
                    f"Item {index} exceeds {settings.MAX_TEXT_LENGTH} characters"
                )
        return self


class KeywordsRequest(BaseModel):
    """Request for keyword extraction."""

    text: str = Field(min_length=1, max_length=settings.MAX_TEXT_LENGTH)
    sentiment: SentimentLabel


class KeywordsResponse(BaseModel):
    """Response for keyword extraction."""

    keywords: list[str]


class CredentialUpdate(BaseModel):
    """New remote classifier token; null or empty disables remote calls."""

    token: Optional[str] = None


class EnsembleUpdate(BaseModel):
    """Ensemble mode toggle."""

    enabled: bool


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = Field(
        description="Overall health status",
        examples=["healthy"]
    )
    version: str = Field(
        description="Service version",
        examples=["0.1.0"]
    )
    mode: str = Field(
        description="Scoring mode: ensemble, single or local",
        examples=["ensemble", "single", "local"]
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Health check timestamp (UTC)"
    )


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(
        description="Error code or type",
        examples=["invalid_request", "internal_error"]
    )
    message: str = Field(
        description="Human-readable error message"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Error timestamp (UTC)"
    )
