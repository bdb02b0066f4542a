"""
Local rule-based sentiment estimator.

Deterministic fallback used when no credential is configured or when no
remote classifier produced a usable result. It is an approximation, not an
NLP engine: lexicon hits, affect markers and a few sentence-level cues are
accumulated into three running scores, adjusted for negation / intensity /
diminishing context, then normalized.
"""

import re

import structlog

from sentiment_layer.models.enums import (
    NEGATIVE_AFFECT_MARKERS,
    POSITIVE_AFFECT_MARKERS,
    DistributionSource,
    Marker,
    SentimentLabel,
)
from sentiment_layer.models.scores import CombinedDistribution, NormalizedText, TextFeatures
from sentiment_layer.scoring.lexicon import (
    AFFECT_MARKER_WEIGHT,
    COMPARATIVE_WEIGHT,
    DIMINISHER_NEUTRAL_FACTOR,
    DIMINISHER_POLAR_FACTOR,
    EXCITEMENT_WEIGHT,
    INTENSIFIER_FACTOR,
    NEGATIVE_WORDS,
    NEUTRAL_BASE_SCORE,
    NEUTRAL_CUE_WEIGHT,
    NEUTRAL_WORD_WEIGHT,
    NEUTRAL_WORDS,
    POSITIVE_WORDS,
    SENTIMENT_WORD_WEIGHT,
)

logger = structlog.get_logger(__name__)

# Prior returned for text carrying no sentiment signal at all
DEFAULT_DISTRIBUTION: tuple[tuple[SentimentLabel, float], ...] = (
    (SentimentLabel.NEUTRAL, 0.6),
    (SentimentLabel.POSITIVE, 0.25),
    (SentimentLabel.NEGATIVE, 0.15),
)


def _word_list_pattern(words: frozenset[str]) -> re.Pattern[str]:
    return re.compile(r"\b(?:" + "|".join(sorted(words)) + r")\b")


_POSITIVE_PATTERN = _word_list_pattern(POSITIVE_WORDS)
_NEGATIVE_PATTERN = _word_list_pattern(NEGATIVE_WORDS)
_NEUTRAL_PATTERN = _word_list_pattern(NEUTRAL_WORDS)

# A sentence is a run of non-terminators plus its terminator run (kept for the question cue)
_SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]*")
_CONDITIONAL_PATTERN = re.compile(r"\b(?:if|would)\b")


def split_sentences(text: str) -> list[str]:
    """Split on . ! ? runs, keeping terminators and dropping blank segments."""
    return [s for s in _SENTENCE_PATTERN.findall(text) if s.strip(" \t\n.!?")]


def _score_sentence(sentence: str, features: TextFeatures) -> None:
    lowered = sentence.casefold()

    if "better than" in lowered:
        features.positive += COMPARATIVE_WEIGHT
        features.evidence += 1
    if "worse than" in lowered:
        features.negative += COMPARATIVE_WEIGHT
        features.evidence += 1

    if _CONDITIONAL_PATTERN.search(lowered):
        features.neutral += NEUTRAL_CUE_WEIGHT
        features.evidence += 1

    if "?" in sentence:
        features.neutral += NEUTRAL_CUE_WEIGHT
        features.evidence += 1


def extract_features(raw_text: str, normalized: NormalizedText) -> TextFeatures:
    """
    Compute running scores and context flags for one text.

    Lexicon hits are counted on the case-folded raw text; affect and context
    cues come from the normalizer's marker set.
    """
    lowered = raw_text.casefold()
    features = TextFeatures(neutral=NEUTRAL_BASE_SCORE)

    for pattern, weight, attr in (
        (_POSITIVE_PATTERN, SENTIMENT_WORD_WEIGHT, "positive"),
        (_NEGATIVE_PATTERN, SENTIMENT_WORD_WEIGHT, "negative"),
        (_NEUTRAL_PATTERN, NEUTRAL_WORD_WEIGHT, "neutral"),
    ):
        matches = pattern.findall(lowered)
        if matches:
            setattr(features, attr, getattr(features, attr) + len(matches) * weight)
            features.evidence += len(matches)
            features.matched_words.extend(matches)

    if normalized.has(*POSITIVE_AFFECT_MARKERS):
        features.positive += AFFECT_MARKER_WEIGHT
        features.evidence += 1
    if normalized.has(*NEGATIVE_AFFECT_MARKERS):
        features.negative += AFFECT_MARKER_WEIGHT
        features.evidence += 1

    if normalized.has(Marker.EXCITEMENT):
        # Excitement amplifies whichever polarity currently leads
        if features.positive > features.negative:
            features.positive += EXCITEMENT_WEIGHT
        else:
            features.negative += EXCITEMENT_WEIGHT
        features.evidence += 1

    sentences = split_sentences(raw_text)
    if len(sentences) > 1:
        for sentence in sentences:
            _score_sentence(sentence, features)

    features.has_negation = normalized.has(Marker.NEGATION)
    features.has_intensifier = normalized.has(Marker.INTENSIFIER)
    features.has_diminisher = normalized.has(Marker.DIMINISHER)
    return features


def apply_context_adjustments(features: TextFeatures) -> tuple[float, float, float]:
    """
    Apply negation, intensifier and diminisher adjustments, in that order.

    Returns:
        (positive, negative, neutral) adjusted scores, not yet normalized
    """
    positive, negative, neutral = features.positive, features.negative, features.neutral

    if features.has_negation:
        positive, negative = negative, positive

    if features.has_intensifier:
        if positive > negative:
            positive *= INTENSIFIER_FACTOR
        else:
            negative *= INTENSIFIER_FACTOR

    if features.has_diminisher:
        positive *= DIMINISHER_POLAR_FACTOR
        negative *= DIMINISHER_POLAR_FACTOR
        neutral *= DIMINISHER_NEUTRAL_FACTOR

    return positive, negative, neutral


def default_distribution() -> CombinedDistribution:
    return CombinedDistribution.from_mapping(dict(DEFAULT_DISTRIBUTION), DistributionSource.LOCAL)


def estimate(raw_text: str, normalized: NormalizedText) -> CombinedDistribution:
    """
    Estimate a normalized 3-class distribution without any remote call.

    Text with no sentiment-bearing signal (no lexicon hit, no affect marker,
    no sentence cue) gets the fixed prior neutral 0.6 / positive 0.25 /
    negative 0.15, as does a zero score total.

    Args:
        raw_text: Caller-supplied text
        normalized: Normalizer output for the same text

    Returns:
        CombinedDistribution summing to 1, sorted descending
    """
    features = extract_features(raw_text, normalized)
    positive, negative, neutral = apply_context_adjustments(features)
    total = positive + negative + neutral

    if features.evidence == 0 or total == 0:
        logger.debug("No sentiment signal, using default distribution")
        return default_distribution()

    distribution = CombinedDistribution.from_mapping(
        {
            SentimentLabel.POSITIVE: positive / total,
            SentimentLabel.NEGATIVE: negative / total,
            SentimentLabel.NEUTRAL: neutral / total,
        },
        DistributionSource.LOCAL,
    )
    logger.debug(
        "Local estimate computed",
        evidence=features.evidence,
        matched_words=features.matched_words,
        negation=features.has_negation,
        intensifier=features.has_intensifier,
        diminisher=features.has_diminisher,
        top_label=distribution.top.label.value,
    )
    return distribution
