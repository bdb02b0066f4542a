"""
Pydantic data models for the Sentiment Layer.

Includes:
- Enums (SentimentLabel, DistributionSource, Marker)
- Score models (ClassScore, ClassifierOutcome, CombinedDistribution)
- Pipeline records (NormalizedText, TextFeatures)
- Result models (SentimentResult, BatchSummary, BatchAnalysisResult)
"""

from sentiment_layer.models.enums import DistributionSource, Marker, SentimentLabel
from sentiment_layer.models.results import (
    BatchAnalysisResult,
    BatchSummary,
    SentimentResult,
)
from sentiment_layer.models.scores import (
    ClassifierOutcome,
    ClassScore,
    CombinedDistribution,
    NormalizedText,
    RawLabelScore,
    TextFeatures,
)

__all__ = [
    # Enums
    "SentimentLabel",
    "DistributionSource",
    "Marker",
    # Scores
    "RawLabelScore",
    "ClassScore",
    "ClassifierOutcome",
    "CombinedDistribution",
    "NormalizedText",
    "TextFeatures",
    # Results
    "SentimentResult",
    "BatchSummary",
    "BatchAnalysisResult",
]
