"""
Unit tests for score and result models.
"""

import pytest
from pydantic import ValidationError

from sentiment_layer.models.enums import DistributionSource, Marker, SentimentLabel
from sentiment_layer.models.results import BatchSummary, SentimentResult
from sentiment_layer.models.scores import (
    ClassifierOutcome,
    ClassScore,
    CombinedDistribution,
    NormalizedText,
)

POS, NEG, NEU = SentimentLabel.POSITIVE, SentimentLabel.NEGATIVE, SentimentLabel.NEUTRAL


def scores(*pairs) -> tuple[ClassScore, ...]:
    return tuple(ClassScore(label=label, score=score) for label, score in pairs)


class TestCombinedDistribution:

    def test_valid(self):
        dist = CombinedDistribution(
            scores=scores((POS, 0.6), (NEU, 0.3), (NEG, 0.1)),
            source=DistributionSource.LOCAL,
        )
        assert dist.top.label == POS
        assert dist.score_for(NEG) == 0.1

    def test_missing_label_rejected(self):
        with pytest.raises(ValidationError):
            CombinedDistribution(
                scores=scores((POS, 0.6), (NEU, 0.4)), source=DistributionSource.LOCAL
            )

    def test_duplicate_label_rejected(self):
        with pytest.raises(ValidationError):
            CombinedDistribution(
                scores=scores((POS, 0.6), (POS, 0.3), (NEG, 0.1)),
                source=DistributionSource.LOCAL,
            )

    def test_unsorted_rejected(self):
        with pytest.raises(ValidationError):
            CombinedDistribution(
                scores=scores((NEG, 0.1), (POS, 0.6), (NEU, 0.3)),
                source=DistributionSource.LOCAL,
            )

    def test_from_mapping_fills_and_sorts(self):
        dist = CombinedDistribution.from_mapping({NEG: 0.2, POS: 0.5}, DistributionSource.PRIMARY)

        assert [(s.label, s.score) for s in dist.scores] == [(POS, 0.5), (NEG, 0.2), (NEU, 0.0)]
        assert dist.source == DistributionSource.PRIMARY

    def test_from_mapping_ties_keep_order(self):
        dist = CombinedDistribution.from_mapping(
            {NEU: 0.4, POS: 0.4, NEG: 0.2}, DistributionSource.LOCAL
        )
        assert [s.label for s in dist.scores] == [NEU, POS, NEG]

    def test_negative_score_rejected(self):
        with pytest.raises(ValidationError):
            ClassScore(label=POS, score=-0.1)


class TestClassifierOutcome:

    def test_succeeded(self):
        outcome = ClassifierOutcome.succeeded(list(scores((POS, 0.9))))
        assert outcome.ok and outcome.usable
        assert outcome.error is None

    def test_empty_success_not_usable(self):
        outcome = ClassifierOutcome.succeeded([])
        assert outcome.ok
        assert not outcome.usable

    def test_failed(self):
        outcome = ClassifierOutcome.failed("timeout")
        assert not outcome.ok
        assert not outcome.usable
        assert outcome.error == "timeout"


def test_normalized_text_has():
    normalized = NormalizedText("NEGATION_good", frozenset({Marker.NEGATION}))
    assert normalized.has(Marker.NEGATION)
    assert normalized.has(Marker.PAUSE, Marker.NEGATION)
    assert not normalized.has(Marker.PAUSE)
    assert not NormalizedText("plain").has(Marker.NEGATION)


class TestBatchSummary:

    def _result(self, label: SentimentLabel, confidence: float) -> SentimentResult:
        others = [l for l in SentimentLabel if l != label]
        remainder = (1 - confidence) / 2
        return SentimentResult(
            text="t",
            sentiment=label,
            confidence=confidence,
            scores=list(scores((label, confidence), (others[0], remainder), (others[1], remainder))),
            source=DistributionSource.LOCAL,
        )

    def test_empty(self):
        summary = BatchSummary.from_results([])
        assert summary.total == 0
        assert summary.average_confidence == 0.0

    def test_counts_and_average(self):
        summary = BatchSummary.from_results([
            self._result(POS, 0.8),
            self._result(POS, 0.6),
            self._result(NEG, 0.7),
        ])

        assert summary.total == 3
        assert summary.positive == 2
        assert summary.negative == 1
        assert summary.neutral == 0
        assert summary.average_confidence == pytest.approx(0.7)

    def test_result_requires_three_scores(self):
        with pytest.raises(ValidationError):
            SentimentResult(
                text="t",
                sentiment=POS,
                confidence=0.9,
                scores=list(scores((POS, 0.9))),
                source=DistributionSource.LOCAL,
            )

    def test_result_ids_unique(self):
        assert self._result(POS, 0.8).id != self._result(POS, 0.8).id
