"""
Score models shared by the classifiers, the combiner and the local estimator.

ClassScore / CombinedDistribution are immutable pydantic models (they cross
the API boundary). NormalizedText and TextFeatures are plain dataclasses that
only live for the duration of one analysis call.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sentiment_layer.models.enums import DistributionSource, Marker, SentimentLabel


class RawLabelScore(BaseModel):
    """One `{label, score}` entry exactly as a remote classifier returns it."""

    label: str
    score: float


class ClassScore(BaseModel):
    """A canonical (label, score) pair."""

    model_config = ConfigDict(frozen=True)

    label: SentimentLabel
    score: float = Field(..., ge=0.0, description="Class probability or weighted sum")


class ClassifierOutcome(BaseModel):
    """
    Result of one remote classification attempt.

    Either a success carrying canonical scores (possibly empty when no label
    mapped) or a failure carrying the reason. Failures are values, never raised.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    scores: tuple[ClassScore, ...] = ()
    error: Optional[str] = None

    @classmethod
    def succeeded(cls, scores: list[ClassScore]) -> "ClassifierOutcome":
        return cls(ok=True, scores=tuple(scores))

    @classmethod
    def failed(cls, error: str) -> "ClassifierOutcome":
        return cls(ok=False, error=error)

    @property
    def usable(self) -> bool:
        """Succeeded and produced at least one canonical score."""
        return self.ok and len(self.scores) > 0


class CombinedDistribution(BaseModel):
    """
    Final service output: exactly one entry per canonical label, sorted
    descending by score.

    Local-estimator distributions sum to 1; fused distributions are weighted
    sums and need not.
    """

    model_config = ConfigDict(frozen=True)

    scores: tuple[ClassScore, ...]
    source: DistributionSource

    @field_validator("scores")
    @classmethod
    def validate_scores(cls, v: tuple[ClassScore, ...]) -> tuple[ClassScore, ...]:
        labels = {s.label for s in v}
        if len(v) != len(SentimentLabel) or labels != set(SentimentLabel):
            raise ValueError("distribution must contain exactly one score per label")
        if any(a.score < b.score for a, b in zip(v, v[1:])):
            raise ValueError("distribution must be sorted descending by score")
        return v

    @classmethod
    def from_mapping(
        cls, totals: Mapping[SentimentLabel, float], source: DistributionSource
    ) -> "CombinedDistribution":
        """
        Build a sorted distribution from per-label totals.

        Labels missing from `totals` get 0.0. Ties keep the mapping's order,
        then canonical order for the filled-in labels.
        """
        merged: dict[SentimentLabel, float] = dict(totals)
        for label in SentimentLabel:
            merged.setdefault(label, 0.0)
        ranked = sorted(merged.items(), key=lambda item: item[1], reverse=True)
        return cls(
            scores=tuple(ClassScore(label=label, score=score) for label, score in ranked),
            source=source,
        )

    @property
    def top(self) -> ClassScore:
        return self.scores[0]

    def score_for(self, label: SentimentLabel) -> float:
        for entry in self.scores:
            if entry.label == label:
                return entry.score
        raise KeyError(label)


@dataclass(frozen=True)
class NormalizedText:
    """
    Output of the normalizer.

    `text` is the rewritten string (sentinels included, sent to the remote
    classifiers); `markers` records which cues fired so the scoring stage
    never has to search the text for sentinel substrings.
    """

    text: str
    markers: frozenset[Marker] = frozenset()

    def has(self, *markers: Marker) -> bool:
        return any(m in self.markers for m in markers)


@dataclass
class TextFeatures:
    """Running scores and context flags computed by the local estimator."""

    positive: float = 0.0
    negative: float = 0.0
    neutral: float = 0.0
    has_negation: bool = False
    has_intensifier: bool = False
    has_diminisher: bool = False
    # Number of sentiment-bearing signals seen (words, affect markers, sentence cues)
    evidence: int = 0
    matched_words: list[str] = field(default_factory=list)
