"""
Caller-facing result models.

A SentimentResult pairs an analyzed text with its top label, confidence,
explaining keywords and the full distribution. BatchSummary aggregates a
batch of results.
"""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field

from sentiment_layer.models.enums import DistributionSource, SentimentLabel
from sentiment_layer.models.scores import ClassScore


class SentimentResult(BaseModel):
    """Single analyzed text, ready for display or export."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    text: str
    sentiment: SentimentLabel = Field(..., description="Top-ranked label")
    confidence: float = Field(..., ge=0.0, description="Score of the top-ranked label")
    keywords: list[str] = Field(default_factory=list)
    scores: list[ClassScore] = Field(..., min_length=3, max_length=3)
    source: DistributionSource
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class BatchSummary(BaseModel):
    """Label counts and mean confidence over a batch."""

    total: int = Field(..., ge=0)
    positive: int = Field(default=0, ge=0)
    negative: int = Field(default=0, ge=0)
    neutral: int = Field(default=0, ge=0)
    average_confidence: float = Field(default=0.0, ge=0.0)

    @classmethod
    def from_results(cls, results: list[SentimentResult]) -> "BatchSummary":
        if not results:
            return cls(total=0)
        counts = {label: 0 for label in SentimentLabel}
        for result in results:
            counts[result.sentiment] += 1
        return cls(
            total=len(results),
            positive=counts[SentimentLabel.POSITIVE],
            negative=counts[SentimentLabel.NEGATIVE],
            neutral=counts[SentimentLabel.NEUTRAL],
            average_confidence=sum(r.confidence for r in results) / len(results),
        )


class BatchAnalysisResult(BaseModel):
    """Results of one batch analysis, in input order, plus the summary."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    results: list[SentimentResult]
    summary: BatchSummary
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
