"""
Score combination: ensemble fusion, single-model passthrough, local fallback.

Availability policy (outcomes already mapped to canonical labels):
    primary usable + secondary usable -> weighted fusion (ENSEMBLE)
    primary usable only               -> primary scores (PRIMARY)
    secondary usable only             -> secondary scores (SECONDARY)
    neither                           -> local estimator (LOCAL)

The 0.7 / 0.3 fusion weights are a fixed design choice favouring the
general-purpose primary model, not learned parameters. Re-tune them when
swapping in different backends.
"""

from typing import Iterable, Optional

import structlog

from sentiment_layer.models.enums import DistributionSource, SentimentLabel
from sentiment_layer.models.scores import (
    ClassifierOutcome,
    ClassScore,
    CombinedDistribution,
    NormalizedText,
)
from sentiment_layer.scoring.estimator import estimate

logger = structlog.get_logger(__name__)


def _accumulate(
    totals: dict[SentimentLabel, float], scores: Iterable[ClassScore], weight: float
) -> None:
    for entry in scores:
        totals[entry.label] += entry.score * weight


def fuse(
    primary: Iterable[ClassScore],
    secondary: Iterable[ClassScore],
    primary_weight: float = 0.7,
    secondary_weight: float = 0.3,
) -> CombinedDistribution:
    """
    Weighted per-label sum of two canonical score lists.

    Scores are not renormalized, so the result sums to the weighted mass
    of the inputs rather than exactly 1.
    """
    totals = {label: 0.0 for label in SentimentLabel}
    _accumulate(totals, primary, primary_weight)
    _accumulate(totals, secondary, secondary_weight)
    return CombinedDistribution.from_mapping(totals, DistributionSource.ENSEMBLE)


def from_single(scores: Iterable[ClassScore], source: DistributionSource) -> CombinedDistribution:
    """
    Distribution from one classifier.

    Labels that collapse onto the same canonical class (e.g. "4 stars" and
    "5 stars") are summed; labels the model did not return score 0.
    """
    totals = {label: 0.0 for label in SentimentLabel}
    _accumulate(totals, scores, 1.0)
    return CombinedDistribution.from_mapping(totals, source)


class ScoreCombiner:
    """
    Reconciles classifier outcomes into one CombinedDistribution.

    Always returns a valid 3-class distribution: when no remote outcome is
    usable, the local estimator runs on the same text.
    """

    def __init__(self, primary_weight: float = 0.7, secondary_weight: float = 0.3):
        self.primary_weight = primary_weight
        self.secondary_weight = secondary_weight

    def combine(
        self,
        raw_text: str,
        normalized: NormalizedText,
        primary: Optional[ClassifierOutcome] = None,
        secondary: Optional[ClassifierOutcome] = None,
        fallback_reason: str = "all_classifiers_failed",
    ) -> CombinedDistribution:
        """
        Combine outcomes according to the availability policy.

        Args:
            raw_text: Original text (needed by the local estimator)
            normalized: Normalizer output for `raw_text`
            primary: Primary outcome, or None when not attempted
            secondary: Secondary outcome, or None when not attempted
            fallback_reason: Logged reason when falling back to the estimator

        Returns:
            CombinedDistribution sorted descending by score
        """
        primary_ok = primary is not None and primary.usable
        secondary_ok = secondary is not None and secondary.usable

        if primary_ok and secondary_ok:
            return fuse(
                primary.scores,
                secondary.scores,
                self.primary_weight,
                self.secondary_weight,
            )
        if primary_ok:
            return from_single(primary.scores, DistributionSource.PRIMARY)
        if secondary_ok:
            return from_single(secondary.scores, DistributionSource.SECONDARY)

        logger.info(
            "Falling back to local estimator",
            reason=fallback_reason,
            primary_attempted=primary is not None,
            secondary_attempted=secondary is not None,
        )
        return estimate(raw_text, normalized)
