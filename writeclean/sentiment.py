from __future__ import annotations

"""
Lexicon-based sentiment with slang and emoji awareness.

Per sentence:
  1. slang phrases are matched first, longest phrase wins; homographs
     such as "lit" only count in their slang context (see phrases.py)
  2. emoji are scored from the emoji table
  3. remaining words are looked up in the polarity dictionary
Each cue is scaled by an intensifier right before it and flipped
(x -0.75) by a negator within NEGATION_WINDOW tokens before it. The raw
sum, plus a small boost per exclamation mark, is squashed into (-1, 1)
with x / sqrt(x*x + alpha).

The document score is a weighted mean of sentence scores where later
sentences weigh more (1 .. 1 + recency_weight).
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Set, Tuple

import emoji

from .analysis_types import SentimentResult, label_for_score
from .lexicons import EmojiInfo, Lexicons
from .phrases import PhraseMatcher
from .tagger import TaggedToken
from .tokenizer import TokenStream

logger = logging.getLogger(__name__)

NEGATION_FACTOR = -0.75
EXCLAMATION_BOOST = 0.292
MAX_EXCLAMATIONS = 3
NEUTRAL_BAND = 0.05
TOP_CUES = 3

# Function words never carry dictionary polarity ("like" as a preposition)
NO_POLARITY_TAGS = frozenset({"ADP", "DET", "CONJ", "PRON"})

VARIATION_SELECTOR = chr(0xFE0F)


@dataclass(frozen=True)
class Cue:
    """One sentiment-bearing match. start/end are token indices in the stream."""

    text: str
    kind: str  # word | slang | emoji
    value: float
    start: int
    end: int


@dataclass(frozen=True)
class SentenceScore:
    text: str
    raw: float
    score: float
    cues: Tuple[Cue, ...]


def polarity_word(value: float) -> str:
    if value > NEUTRAL_BAND:
        return "positive"
    if value < -NEUTRAL_BAND:
        return "negative"
    return "neutral"


class SentimentAnalyzer:
    def __init__(
        self,
        lexicons: Lexicons,
        emotional_threshold: float = 0.5,
        recency_weight: float = 0.5,
        alpha: float = 15.0,
        negation_window: int = 3,
    ) -> None:
        if alpha <= 0:
            raise ValueError("alpha must be positive")
        self.lexicons = lexicons
        self.emotional_threshold = emotional_threshold
        self.recency_weight = recency_weight
        self.alpha = alpha
        self.negation_window = negation_window
        self.slang_matcher = PhraseMatcher(lexicons.slang, lexicons)

    # ---- scoring primitives ----
    def normalize(self, raw: float) -> float:
        if raw == 0:
            return 0.0
        return raw / math.sqrt(raw * raw + self.alpha)

    def lookup_emoji(self, text: str) -> Optional[EmojiInfo]:
        """Exact entry, then without the variation selector, then the longest known prefix (skin tones, ZWJ sequences)."""
        table = self.lexicons.emoji
        if text in table:
            return table[text]
        base = text.replace(VARIATION_SELECTOR, "")
        for k in range(len(base), 0, -1):
            if base[:k] in table:
                return table[base[:k]]
        return None

    def emoji_name(self, text: str) -> str:
        info = self.lookup_emoji(text)
        if info is not None:
            return info.name
        name = emoji.demojize(text, delimiters=("", ""))
        if name == text:
            return "emoji"
        return name.replace("_", " ").strip()

    def _modify(self, tokens: Sequence[TaggedToken], i: int, value: float, consumed: Set[int]) -> float:
        if i > 0 and tokens[i - 1].lower in self.lexicons.intensifiers:
            value *= self.lexicons.intensifiers[tokens[i - 1].lower]
        for j in range(i - 1, max(-1, i - 1 - self.negation_window), -1):
            if tokens[j].pos == "PUNCT":
                break
            if j not in consumed and tokens[j].lower in self.lexicons.negators:
                value *= NEGATION_FACTOR
                break
        return value

    def score_sentence(self, tokens: Sequence[TaggedToken], text: str, offset: int = 0) -> SentenceScore:
        cues: List[Cue] = []
        consumed: Set[int] = set()
        i = 0
        while i < len(tokens):
            tok = tokens[i]
            if tok.raw.kind == "emoji":
                info = self.lookup_emoji(tok.word)
                value = info.polarity if info is not None else 0.0
                cues.append(Cue(tok.word, "emoji", value, offset + i, offset + i + 1))
                i += 1
                continue
            if tok.raw.kind != "word":
                i += 1
                continue

            size = self.slang_matcher.match_at(tokens, i)
            if size:
                phrase = " ".join(t.lower for t in tokens[i:i + size])
                consumed.update(range(i, i + size))
                value = self._modify(tokens, i, self.lexicons.slang[phrase].polarity, consumed)
                cues.append(Cue(phrase, "slang", value, offset + i, offset + i + size))
                i += size
                continue

            if tok.lower in self.lexicons.polarity and tok.pos not in NO_POLARITY_TAGS:
                value = self._modify(tokens, i, self.lexicons.polarity[tok.lower], consumed)
                cues.append(Cue(tok.lower, "word", value, offset + i, offset + i + 1))
            i += 1

        raw = sum(c.value for c in cues)
        if raw:
            bangs = min(sum(t.word.count("!") for t in tokens if t.pos == "PUNCT"), MAX_EXCLAMATIONS)
            raw += math.copysign(EXCLAMATION_BOOST * bangs, raw)
        return SentenceScore(text=text, raw=raw, score=self.normalize(raw), cues=tuple(cues))

    def score_sentences(self, stream: TokenStream, tagged: Sequence[TaggedToken]) -> List[SentenceScore]:
        return [
            self.score_sentence(tagged[s.start:s.end], s.text, offset=s.start)
            for s in stream.sentences
        ]

    def document_score(self, scores: Sequence[float]) -> float:
        if not scores:
            return 0.0
        n = len(scores)
        if n == 1:
            weights = [1.0]
        else:
            weights = [1.0 + self.recency_weight * i / (n - 1) for i in range(n)]
        value = sum(w * s for w, s in zip(weights, scores)) / sum(weights)
        return round(max(-1.0, min(1.0, value)), 4)

    # ---- result assembly ----
    def _emoji_entries(self, cues: Sequence[Cue]) -> Tuple[str, ...]:
        entries: Dict[str, str] = {}
        for cue in cues:
            if cue.kind != "emoji" or cue.text in entries:
                continue
            score = self.normalize(cue.value)
            entries[cue.text] = f"{cue.text} {self.emoji_name(cue.text)}: {polarity_word(score)} ({score:+.2f})"
        return tuple(entries.values())

    def explain(self, score: float, label: str, cues: Sequence[Cue], slang: Sequence[str]) -> str:
        parts = [f"Overall tone is {label.lower()} (score {score:+.2f})."]
        strongest = sorted((c for c in cues if c.value), key=lambda c: -abs(c.value))[:TOP_CUES]
        if strongest:
            listed = ", ".join(f'"{c.text}" ({c.value:+.2f})' for c in strongest)
            parts.append(f"Strongest cues: {listed}.")
        else:
            parts.append("No sentiment-bearing words were found.")
        if slang:
            noun = "term" if len(slang) == 1 else "terms"
            parts.append(f"Detected {len(slang)} slang {noun}.")
        return " ".join(parts)

    def analyze(self, stream: TokenStream, tagged: Sequence[TaggedToken]) -> SentimentResult:
        sentences = self.score_sentences(stream, tagged)
        score = self.document_score([s.score for s in sentences])
        label = label_for_score(score)
        cues = [c for s in sentences for c in s.cues]
        slang = tuple(dict.fromkeys(c.text for c in cues if c.kind == "slang"))
        result = SentimentResult(
            score=score,
            label=label,
            explanation=self.explain(score, label, cues, slang),
            emotional_sentences=tuple(
                s.text for s in sentences if abs(s.score) > self.emotional_threshold
            ),
            slang_detected=slang,
            emoji_sentiment=self._emoji_entries(cues),
        )
        logger.debug(
            "Sentiment: sentences=%s score=%s label=%s slang=%s",
            len(sentences), score, label, len(slang),
        )
        return result

    def contributions(self, stream: TokenStream, tagged: Sequence[TaggedToken]) -> List[float]:
        """Absolute polarity carried by each token; phrase cues credit every token they span."""
        out = [0.0] * len(tagged)
        for sentence in self.score_sentences(stream, tagged):
            for cue in sentence.cues:
                for k in range(cue.start, cue.end):
                    out[k] += abs(cue.value)
        return out
