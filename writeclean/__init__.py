from .analysis_types import AnalysisResult, Improvement, SentimentResult, Token
from .engine import EngineConfig, TextAnalyzer, analyze
from .errors import AnalysisError, EmptyInputError, LexiconLoadError, WriteCleanError

__all__ = [
    "analyze",
    "TextAnalyzer",
    "EngineConfig",
    "AnalysisResult",
    "Token",
    "SentimentResult",
    "Improvement",
    "WriteCleanError",
    "EmptyInputError",
    "LexiconLoadError",
    "AnalysisError",
]
