from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

from .analysis_types import AnalysisResult, Improvement, SentimentResult, label_for_score
from .errors import AnalysisError, EmptyInputError
from .lexicons import Lexicons, load_lexicons
from .morphology import MorphologyReducer
from .rewrite import TONES, Rewriter
from .sentiment import SentimentAnalyzer
from .settings import Settings, settings
from .tagger import TaggedToken, Tagger
from .tokenizer import TokenStream, tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    emotional_sentence_threshold: float = 0.5
    recency_weight: float = 0.5
    saturation_alpha: float = 15.0
    negation_window: int = 3
    download_corpora: bool = True
    default_tone: str = "professional"

    @classmethod
    def from_settings(cls, s: Settings) -> EngineConfig:
        return cls(
            emotional_sentence_threshold=s.EMOTIONAL_SENTENCE_THRESHOLD,
            recency_weight=s.RECENCY_WEIGHT,
            saturation_alpha=s.SATURATION_ALPHA,
            negation_window=s.NEGATION_WINDOW,
            download_corpora=s.NLTK_DOWNLOAD,
            default_tone=s.DEFAULT_TONE,
        )


class TextAnalyzer:
    """
    Composes tokenizer -> tagger -> morphology -> sentiment + rewrite.

    Holds no per-request state; one instance can serve concurrent callers.
    """

    def __init__(self, lexicons: Optional[Lexicons] = None, config: Optional[EngineConfig] = None) -> None:
        self.config = config or EngineConfig()
        self.lexicons = lexicons if lexicons is not None else load_lexicons(download=self.config.download_corpora)
        if self.config.default_tone not in TONES:
            raise ValueError(f"unknown default tone {self.config.default_tone!r}")
        self.tagger = Tagger(self.lexicons)
        self.morphology = MorphologyReducer(self.lexicons, download=self.config.download_corpora)
        self.sentiment_analyzer = SentimentAnalyzer(
            self.lexicons,
            emotional_threshold=self.config.emotional_sentence_threshold,
            recency_weight=self.config.recency_weight,
            alpha=self.config.saturation_alpha,
            negation_window=self.config.negation_window,
        )
        self.rewriter = Rewriter(self.lexicons, self.tagger)

    def prepare(self, text: str) -> Tuple[TokenStream, List[TaggedToken]]:
        stream = tokenize(text, self.lexicons.abbreviations)
        return stream, self.tagger.tag(stream.tokens)

    def sentiment(self, text: str) -> SentimentResult:
        stream, tagged = self.prepare(text)
        return self.sentiment_analyzer.analyze(stream, tagged)

    def rewrite(
        self, text: str, tone: Optional[str] = None, tagged: Optional[Sequence[TaggedToken]] = None
    ) -> Improvement:
        return self.rewriter.rewrite(text, tone or self.config.default_tone, tagged)

    def contributions(self, text: str) -> List[Tuple[str, float]]:
        stream, tagged = self.prepare(text)
        values = self.sentiment_analyzer.contributions(stream, tagged)
        return [(t.word, v) for t, v in zip(tagged, values)]

    def analyze(self, text: str, tone: Optional[str] = None) -> AnalysisResult:
        """
        Run the full pipeline.

        Raises:
            EmptyInputError: on blank input, before any stage runs.
            AnalysisError: if the assembled result breaks an invariant.
        """
        if text is None or not text.strip():
            raise EmptyInputError()
        stream, tagged = self.prepare(text)
        result = AnalysisResult(
            tokens=self.morphology.reduce_all(tagged),
            sentiment=self.sentiment_analyzer.analyze(stream, tagged),
            improvement=self.rewrite(text, tone, tagged),
            raw_text=text,
        )
        self._verify(result, text)
        logger.debug(
            "Analyzed text: chars=%s tokens=%s sentences=%s label=%s",
            len(text), len(result.tokens), len(stream.sentences), result.sentiment.label,
        )
        return result

    @staticmethod
    def _verify(result: AnalysisResult, text: str) -> None:
        if not result.tokens:
            raise AnalysisError("no tokens produced for non-empty text")
        for tok in result.tokens:
            if len(tok.stem_snowball) < len(tok.stem_porter):
                raise AnalysisError(
                    f"conservative stem {tok.stem_snowball!r} is shorter than "
                    f"aggressive stem {tok.stem_porter!r} for {tok.word!r}"
                )
        sentiment = result.sentiment
        if not -1.0 <= sentiment.score <= 1.0:
            raise AnalysisError(f"score {sentiment.score} outside [-1, 1]")
        expected = label_for_score(sentiment.score)
        if sentiment.label != expected:
            raise AnalysisError(f"label {sentiment.label!r} does not match score {sentiment.score} ({expected!r})")
        if result.improvement.original != text or result.raw_text != text:
            raise AnalysisError("result does not carry the original text unchanged")
        if not result.improvement.improved:
            raise AnalysisError("rewrite produced empty text")


@lru_cache(maxsize=1)
def get_analyzer() -> TextAnalyzer:
    """
    Process-wide analyzer built from settings.

    Raises:
        LexiconLoadError: if NLTK data, the spaCy lemmatizer tables or a
            LEXICON_DIR override cannot be loaded.
    """
    lexicons = load_lexicons(settings.LEXICON_DIR, settings.NLTK_DOWNLOAD)
    return TextAnalyzer(lexicons, EngineConfig.from_settings(settings))


def analyze(text: str) -> AnalysisResult:
    if text is None or not text.strip():
        raise EmptyInputError()
    return get_analyzer().analyze(text)
