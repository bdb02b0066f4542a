"""
Fixed word lists and symbol tables used by the scoring core.

Kept in one place so the normalizer, the local estimator and the keyword
extractor agree on vocabulary. All entries are lowercase.
"""

from sentiment_layer.models.enums import Marker, SentimentLabel

NEGATION_WORDS = (
    "not", "no", "never", "nothing", "nowhere", "nobody", "none", "neither", "nor",
)

INTENSIFIER_WORDS = (
    "very", "extremely", "incredibly", "absolutely", "totally", "completely",
)

DIMINISHER_WORDS = (
    "slightly", "somewhat", "rather", "quite", "fairly", "pretty",
)

# Order matters: specific forms must be expanded before the generic suffixes
CONTRACTIONS: tuple[tuple[str, str], ...] = (
    ("won't", "will not"),
    ("can't", "cannot"),
    ("n't", " not"),
    ("'re", " are"),
    ("'ve", " have"),
    ("'ll", " will"),
    ("'d", " would"),
    ("'m", " am"),
    ("it's", "it is"),
    ("that's", "that is"),
)

EMOJI_BUCKETS: tuple[tuple[Marker, tuple[str, ...]], ...] = (
    (Marker.POSITIVE_EMOJI, ("😊", "😀", "😃", "😄", "😁", "🙂", "😌", "😍", "🥰", "😘", "🤗")),
    (Marker.NEGATIVE_EMOJI, ("😢", "😭", "😞", "😔", "😟", "😕", "🙁", "☹️", "😰", "😨")),
    (Marker.NEUTRAL_EMOJI, ("😐", "😑", "🤔", "😶", "🙄", "😏")),
    (Marker.ANGER_EMOJI, ("😡", "😠", "🤬", "😤", "💢")),
    (Marker.LOVE_EMOJI, ("❤️", "💕", "💖", "💗", "💝", "🧡", "💛", "💚", "💙", "💜")),
)

EMOTICON_BUCKETS: tuple[tuple[Marker, tuple[str, ...]], ...] = (
    (Marker.POSITIVE_EMOTICON, (":)", ":-)", ":]", ":D", ":-D", "=)", "=D")),
    (Marker.NEGATIVE_EMOTICON, (":(", ":-(", ":[", "=(", "D:")),
    (Marker.NEUTRAL_EMOTICON, (":|", ":-|", "=|")),
)

POSITIVE_WORDS = frozenset({
    "excellent", "amazing", "wonderful", "fantastic", "perfect", "outstanding",
    "brilliant", "superb", "magnificent", "delightful", "awesome", "great",
    "good", "love", "like", "enjoy", "happy", "pleased", "satisfied",
    "impressive", "remarkable", "exceptional", "marvelous", "terrific",
})

NEGATIVE_WORDS = frozenset({
    "terrible", "awful", "horrible", "disgusting", "disappointing", "pathetic",
    "atrocious", "dreadful", "appalling", "abysmal", "bad", "hate", "dislike",
    "annoying", "frustrating", "useless", "worthless", "poor", "worst",
    "unacceptable", "inadequate", "inferior", "defective", "faulty",
})

NEUTRAL_WORDS = frozenset({
    "okay", "average", "normal", "standard", "typical", "regular",
    "ordinary", "common", "usual", "basic", "moderate", "fair",
})

SENTIMENT_WORDS = POSITIVE_WORDS | NEGATIVE_WORDS | NEUTRAL_WORDS

# Label-specific keyword lists: sentiment words plus the matching affect markers
LABEL_KEYWORDS: dict[SentimentLabel, frozenset[str]] = {
    SentimentLabel.POSITIVE: POSITIVE_WORDS
    | {"positive_emoji", "love_emoji", "positive_emoticon"},
    SentimentLabel.NEGATIVE: NEGATIVE_WORDS
    | {"negative_emoji", "anger_emoji", "negative_emoticon"},
    SentimentLabel.NEUTRAL: NEUTRAL_WORDS
    | {"neutral_emoji", "neutral_emoticon"},
}

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
    "by", "this", "that", "these", "those", "i", "you", "he", "she", "it", "we", "they",
    "am", "is", "are", "was", "were", "be", "been", "being", "have", "has", "had",
    "do", "does", "did", "will", "would", "could", "should", "may", "might", "must",
    "can", "shall",
    # Normalizer sentinel fragments
    "negation_", "intensifier_", "diminisher_", "excitement", "confusion", "pause",
})

# Local estimator weights
SENTIMENT_WORD_WEIGHT = 0.4
NEUTRAL_WORD_WEIGHT = 0.3
NEUTRAL_BASE_SCORE = 0.3
AFFECT_MARKER_WEIGHT = 0.5
EXCITEMENT_WEIGHT = 0.3
COMPARATIVE_WEIGHT = 0.2
NEUTRAL_CUE_WEIGHT = 0.1
INTENSIFIER_FACTOR = 1.3
DIMINISHER_POLAR_FACTOR = 0.8
DIMINISHER_NEUTRAL_FACTOR = 1.2
