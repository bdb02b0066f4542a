"""
Enumerations for Sentiment Layer data models.

All enums are closed taxonomies - no values outside these sets are permitted.
"""

from enum import Enum


class SentimentLabel(str, Enum):
    """
    Canonical 3-class sentiment vocabulary.

    Every classifier vocabulary (LABEL_0..2, star ratings) is mapped into
    this space before scores are combined.
    """

    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    POSITIVE = "positive"


class DistributionSource(str, Enum):
    """Which path produced a combined distribution."""

    ENSEMBLE = "ensemble"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    LOCAL = "local"


class Marker(str, Enum):
    """
    Cues surfaced by the normalizer.

    The value is the sentinel token written into the normalized text.
    NEGATION, INTENSIFIER and DIMINISHER are prefixes glued to the next token.
    """

    NEGATION = "NEGATION_"
    INTENSIFIER = "INTENSIFIER_"
    DIMINISHER = "DIMINISHER_"
    EXCITEMENT = "EXCITEMENT"
    CONFUSION = "CONFUSION"
    PAUSE = "PAUSE"
    POSITIVE_EMOJI = "POSITIVE_EMOJI"
    NEGATIVE_EMOJI = "NEGATIVE_EMOJI"
    NEUTRAL_EMOJI = "NEUTRAL_EMOJI"
    ANGER_EMOJI = "ANGER_EMOJI"
    LOVE_EMOJI = "LOVE_EMOJI"
    POSITIVE_EMOTICON = "POSITIVE_EMOTICON"
    NEGATIVE_EMOTICON = "NEGATIVE_EMOTICON"
    NEUTRAL_EMOTICON = "NEUTRAL_EMOTICON"


# Markers that count as positive / negative affect for the local estimator
POSITIVE_AFFECT_MARKERS = frozenset(
    {Marker.POSITIVE_EMOJI, Marker.LOVE_EMOJI, Marker.POSITIVE_EMOTICON}
)
NEGATIVE_AFFECT_MARKERS = frozenset(
    {Marker.NEGATIVE_EMOJI, Marker.ANGER_EMOJI, Marker.NEGATIVE_EMOTICON}
)
