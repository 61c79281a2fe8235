from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

from .analysis_types import AnalysisResult, SentimentLabel

Tone = Literal["professional", "formal", "friendly"]


class _WireModel(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(populate_by_name=True)


class AnalyzeRequest(BaseModel):
    text: str
    tone: Optional[Tone] = None


class SentimentRequest(BaseModel):
    text: str


class TokenAttribution(BaseModel):
    token: str
    score: float


class SentimentResponse(BaseModel):
    label: SentimentLabel
    score: float
    tokens: Optional[List[TokenAttribution]] = None


class RewriteRequest(BaseModel):
    text: str
    tone: Optional[Tone] = None  # falls back to settings.DEFAULT_TONE


class RewriteResponse(BaseModel):
    rewrite: str
    changes: List[str] = []
    latency_ms: int


class TokenOut(_WireModel):
    word: str
    pos_tag: str = Field(alias="posTag")
    is_stop_word: bool = Field(alias="isStopWord")
    stem_porter: str = Field(alias="stemPorter")
    stem_snowball: str = Field(alias="stemSnowball")
    lemma_wordnet: str = Field(alias="lemmaWordNet")
    lemma_spacy: str = Field(alias="lemmaSpacy")


class SentimentOut(_WireModel):
    score: float
    label: SentimentLabel
    explanation: str
    emotional_sentences: List[str] = Field(alias="emotionalSentences")
    slang_detected: List[str] = Field(alias="slangDetected")
    emoji_sentiment: List[str] = Field(alias="emojiSentiment")


class ImprovementOut(_WireModel):
    original: str
    improved: str
    changes: List[str]


class AnalysisResponse(_WireModel):
    tokens: List[TokenOut]
    sentiment: SentimentOut
    improvement: ImprovementOut
    raw_text: str = Field(alias="rawText")

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalysisResponse":
        s = result.sentiment
        return cls(
            tokens=[
                TokenOut(
                    word=t.word,
                    pos_tag=t.pos_tag,
                    is_stop_word=t.is_stop_word,
                    stem_porter=t.stem_porter,
                    stem_snowball=t.stem_snowball,
                    lemma_wordnet=t.lemma_wordnet,
                    lemma_spacy=t.lemma_spacy,
                )
                for t in result.tokens
            ],
            sentiment=SentimentOut(
                score=s.score,
                label=s.label,
                explanation=s.explanation,
                emotional_sentences=list(s.emotional_sentences),
                slang_detected=list(s.slang_detected),
                emoji_sentiment=list(s.emoji_sentiment),
            ),
            improvement=ImprovementOut(
                original=result.improvement.original,
                improved=result.improvement.improved,
                changes=list(result.improvement.changes),
            ),
            raw_text=result.raw_text,
        )


class ErrorResponse(BaseModel):
    error: str
    detail: str
