# writeclean/models.py
from __future__ import annotations

"""
WriteClean model services

- AnalysisService:
    Full pipeline (tokens, sentiment, rewrite) for one text.

- SentimentService:
    Document label and score only.

- GeneratorService:
    Rule-based rewrite in one of the supported tones, timed in milliseconds.

All three share the process-wide TextAnalyzer (lexicons load once).
"""

import time
from typing import Optional, Tuple

from .analysis_types import AnalysisResult, Improvement
from .engine import TextAnalyzer, get_analyzer


# ------------------------ Full analysis ------------------------
class AnalysisService:
    def __init__(self, analyzer: Optional[TextAnalyzer] = None) -> None:
        self.analyzer = analyzer or get_analyzer()

    def analyze(self, text: str, tone: Optional[str] = None) -> AnalysisResult:
        return self.analyzer.analyze(text, tone)


# ------------------------ Sentiment ------------------------
class SentimentService:
    """Lexicon sentiment: 5-point label plus score in [-1, 1]."""

    def __init__(self, analyzer: Optional[TextAnalyzer] = None) -> None:
        self.analyzer = analyzer or get_analyzer()

    def predict(self, text: str) -> Tuple[str, float]:
        result = self.analyzer.sentiment(text)
        return result.label, result.score


# ------------------------ Rewrite ------------------------
class GeneratorService:
    def __init__(self, analyzer: Optional[TextAnalyzer] = None) -> None:
        self.analyzer = analyzer or get_analyzer()

    def rewrite(self, text: str, tone: Optional[str] = None) -> Tuple[Improvement, int]:
        start = time.time()
        improvement = self.analyzer.rewrite(text, tone)
        latency_ms = int((time.time() - start) * 1000)
        return improvement, latency_ms
