# writeclean/errors.py
from __future__ import annotations


class WriteCleanError(Exception):
    """Base class for every error raised by the analysis engine."""


class EmptyInputError(WriteCleanError, ValueError):
    """Input text is empty or whitespace-only."""

    def __init__(self, message: str = "text must not be empty") -> None:
        super().__init__(message)


class LexiconLoadError(WriteCleanError):
    """A lexicon or rule table could not be loaded. Fatal at startup."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"failed to load lexicon '{name}': {reason}")


class AnalysisError(WriteCleanError):
    """A pipeline stage produced an internally inconsistent result."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)
