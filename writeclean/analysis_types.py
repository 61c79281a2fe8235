from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

SentimentLabel = Literal["Very Bad", "Bad", "Neutral", "Good", "Very Good"]

# (lower bound, inclusive?, label), checked top to bottom
LABEL_THRESHOLDS: Tuple[Tuple[float, bool, SentimentLabel], ...] = (
    (0.6, True, "Very Good"),
    (0.2, True, "Good"),
    (-0.2, False, "Neutral"),
    (-0.6, False, "Bad"),
)


def label_for_score(score: float) -> SentimentLabel:
    """Bucket a polarity score in [-1, 1] into the 5-point label."""
    for bound, inclusive, label in LABEL_THRESHOLDS:
        if score > bound or (inclusive and score == bound):
            return label
    return "Very Bad"


@dataclass(frozen=True)
class Token:
    """
    One word unit of the input, in original text order.

    - stem_porter: aggressive suffix-stripping stem
    - stem_snowball: conservative stem, never shorter than stem_porter
    - lemma_wordnet: dictionary lemma keyed by (word, coarse POS)
    - lemma_spacy: rule-based POS-aware lemma
    """

    word: str
    pos_tag: str
    is_stop_word: bool
    stem_porter: str
    stem_snowball: str
    lemma_wordnet: str
    lemma_spacy: str


@dataclass(frozen=True)
class SentimentResult:
    score: float
    label: SentimentLabel
    explanation: str
    emotional_sentences: Tuple[str, ...]
    slang_detected: Tuple[str, ...]
    emoji_sentiment: Tuple[str, ...]


@dataclass(frozen=True)
class Improvement:
    """Cleaned rewrite. `original` is always the untouched input."""

    original: str
    improved: str
    changes: Tuple[str, ...]


@dataclass(frozen=True)
class AnalysisResult:
    tokens: Tuple[Token, ...]
    sentiment: SentimentResult
    improvement: Improvement
    raw_text: str
