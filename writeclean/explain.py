from __future__ import annotations
from typing import List, Optional, Tuple

from .engine import TextAnalyzer, get_analyzer

# Lexicon attribution: each token's share of the strongest polarity cue.
# Tokens inside a multi-word slang phrase share the phrase's weight.

class TokenAttributor:
    def __init__(self, analyzer: Optional[TextAnalyzer] = None) -> None:
        self.analyzer = analyzer or get_analyzer()

    def attribute(self, text: str) -> List[Tuple[str, float]]:
        pairs = self.analyzer.contributions(text)
        smax = max((s for _, s in pairs), default=0.0)
        if smax == 0:
            return [(tok, 0.0) for tok, _ in pairs]
        return [(tok, round(s / smax, 4)) for tok, s in pairs]
