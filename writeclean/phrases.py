from __future__ import annotations

"""
Multi-word phrase matching over tagged tokens.

Phrases are matched longest first over consecutive word tokens. A phrase
listed in `Lexicons.phrase_contexts` must also sit in the named context,
which keeps ordinary uses of homographs ("he lit a candle", "the room was
lit by candles") from being read as slang.
"""

import logging
from typing import Iterable, List, NamedTuple, Sequence

from .lexicons import Lexicons
from .tagger import TaggedToken

logger = logging.getLogger(__name__)

CLAUSE_BREAK_TAGS = frozenset({"CONJ", "INTJ"})


class PhraseMatch(NamedTuple):
    phrase: str
    start: int  # token index range [start, end)
    end: int


class PhraseMatcher:
    def __init__(self, phrases: Iterable[str], lexicons: Lexicons) -> None:
        self.phrases = frozenset(phrases)
        self.lexicons = lexicons
        self.max_words = max((len(p.split()) for p in self.phrases), default=0)

    # ---- context gates ----
    def _clause_ends(self, tokens: Sequence[TaggedToken], j: int) -> bool:
        if j >= len(tokens):
            return True
        tok = tokens[j]
        return (
            tok.raw.kind in ("punct", "emoji")
            or tok.pos in CLAUSE_BREAK_TAGS
            or tok.lower in self.lexicons.slang
        )

    def _clause_starts(self, tokens: Sequence[TaggedToken], i: int) -> bool:
        if i == 0:
            return True
        prev = tokens[i - 1]
        return prev.raw.kind in ("punct", "emoji") or prev.pos in CLAUSE_BREAK_TAGS

    def _after_copula(self, tokens: Sequence[TaggedToken], i: int) -> bool:
        j = i - 1
        while j >= 0 and (tokens[j].lower in self.lexicons.intensifiers or tokens[j].lower in self.lexicons.negators):
            j -= 1
        return j >= 0 and tokens[j].lower in self.lexicons.copulas

    def in_context(self, phrase: str, tokens: Sequence[TaggedToken], start: int, end: int) -> bool:
        context = self.lexicons.phrase_contexts.get(phrase)
        if context is None:
            return True
        if context == "predicative":
            return self._after_copula(tokens, start) and self._clause_ends(tokens, end)
        if context == "intransitive":
            return self._clause_ends(tokens, end)
        if context == "standalone":
            return self._clause_starts(tokens, start) and self._clause_ends(tokens, end)
        logger.warning("Unknown phrase context: phrase=%s context=%s", phrase, context)
        return False

    # ---- matching ----
    def match_at(self, tokens: Sequence[TaggedToken], i: int) -> int:
        """Length in tokens of the longest phrase starting at i, or 0."""
        for size in range(min(self.max_words, len(tokens) - i), 0, -1):
            window = tokens[i:i + size]
            if any(t.raw.kind != "word" for t in window):
                continue
            phrase = " ".join(t.lower for t in window)
            if phrase in self.phrases and self.in_context(phrase, tokens, i, i + size):
                return size
        return 0

    def find_all(self, tokens: Sequence[TaggedToken]) -> List[PhraseMatch]:
        """Non-overlapping matches, scanned left to right."""
        matches: List[PhraseMatch] = []
        i = 0
        while i < len(tokens):
            size = self.match_at(tokens, i)
            if size:
                matches.append(PhraseMatch(" ".join(t.lower for t in tokens[i:i + size]), i, i + size))
                i += size
            else:
                i += 1
        return matches
