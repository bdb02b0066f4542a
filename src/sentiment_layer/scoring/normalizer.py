"""
Text normalization for sentiment scoring.

Rewrites raw text so that negation, intensity and affect cues become explicit
sentinel tokens, and records which cues fired in a marker set. The rewritten
text is what the remote classifiers receive; the marker set is what the local
estimator reads.

Rewrite order (each step runs on the previous step's output):
    1. trim
    2. negation words      -> NEGATION_<next token>
    3. intensifiers        -> INTENSIFIER_<next token>
    4. diminishers         -> DIMINISHER_<next token>
    5. contraction expansion
    6. punctuation runs    -> EXCITEMENT / CONFUSION / PAUSE
    7. emoji buckets       -> <BUCKET>_EMOJI
    8. text emoticons      -> <BUCKET>_EMOTICON

Negation runs before contraction expansion, so "don't" expands to "do not"
without being marked as a negation.
"""

import re

import structlog

from sentiment_layer.models.enums import Marker
from sentiment_layer.models.scores import NormalizedText
from sentiment_layer.scoring.lexicon import (
    CONTRACTIONS,
    DIMINISHER_WORDS,
    EMOJI_BUCKETS,
    EMOTICON_BUCKETS,
    INTENSIFIER_WORDS,
    NEGATION_WORDS,
)

logger = structlog.get_logger(__name__)


def _word_prefix_pattern(words: tuple[str, ...]) -> re.Pattern[str]:
    # Word followed by whitespace; the sentinel is glued to the next token
    return re.compile(r"\b(" + "|".join(words) + r")\s+", re.IGNORECASE)


def _alternation(symbols: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile("|".join(re.escape(s) for s in symbols))


_PREFIX_RULES: tuple[tuple[re.Pattern[str], Marker], ...] = (
    (_word_prefix_pattern(NEGATION_WORDS), Marker.NEGATION),
    (_word_prefix_pattern(INTENSIFIER_WORDS), Marker.INTENSIFIER),
    (_word_prefix_pattern(DIMINISHER_WORDS), Marker.DIMINISHER),
)

_CONTRACTION_RULES: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(re.escape(contraction), re.IGNORECASE), expansion)
    for contraction, expansion in CONTRACTIONS
)

_PUNCTUATION_RULES: tuple[tuple[re.Pattern[str], Marker], ...] = (
    (re.compile(r"!{2,}"), Marker.EXCITEMENT),
    (re.compile(r"\?{2,}"), Marker.CONFUSION),
    (re.compile(r"\.{3,}"), Marker.PAUSE),
)

_SYMBOL_RULES: tuple[tuple[re.Pattern[str], Marker], ...] = tuple(
    (_alternation(symbols), marker) for marker, symbols in EMOJI_BUCKETS + EMOTICON_BUCKETS
)


def normalize(text: str) -> NormalizedText:
    """
    Normalize raw text into sentinel-augmented form.

    Deterministic and total: any string (including empty) is accepted.
    Running it on its own output leaves sentinels untouched, e.g.
    "NEGATION_happy" never becomes "NEGATION_NEGATION_happy".

    Args:
        text: Raw caller-supplied text

    Returns:
        NormalizedText with the rewritten string and the set of markers that fired

    Examples:
        >>> normalize("This is not good").text
        'This is NEGATION_good'
        >>> normalize("Love it!!").markers
        frozenset({<Marker.EXCITEMENT: 'EXCITEMENT'>})
    """
    processed = text.strip()
    markers: set[Marker] = set()

    for pattern, marker in _PREFIX_RULES:
        processed, count = pattern.subn(marker.value, processed)
        if count:
            markers.add(marker)

    for pattern, expansion in _CONTRACTION_RULES:
        processed = pattern.sub(expansion, processed)

    for pattern, marker in _PUNCTUATION_RULES + _SYMBOL_RULES:
        processed, count = pattern.subn(f" {marker.value} ", processed)
        if count:
            markers.add(marker)

    # Marker padding may leave edge whitespace. Sentinels already in the input
    # are never rewritten again, but expanded contractions can still yield a
    # new cue word on a second pass ("don't like" -> "do not like")
    processed = processed.strip()

    logger.debug(
        "Text normalized",
        input_length=len(text),
        output_length=len(processed),
        markers=sorted(m.name for m in markers),
    )
    return NormalizedText(text=processed, markers=frozenset(markers))
