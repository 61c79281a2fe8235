from __future__ import annotations

"""
Third-party language data: NLTK corpora and the spaCy rule lemmatizer.

Each resource is loaded once per process. Missing NLTK packages are
downloaded on first use unless downloading is disabled; anything that
still cannot be loaded surfaces as LexiconLoadError at startup.
"""

import logging
from functools import lru_cache
from typing import FrozenSet

import nltk
import spacy
from nltk.corpus import stopwords, wordnet
from nltk.stem import WordNetLemmatizer
from spacy.language import Language

from .errors import LexiconLoadError

logger = logging.getLogger(__name__)

NLTK_PACKAGES = {
    "stopwords": "corpora/stopwords",
    "wordnet": "corpora/wordnet",
    "omw-1.4": "corpora/omw-1.4",
}


def require_nltk(package: str, download: bool = True, optional: bool = False) -> bool:
    """
    Make sure an NLTK data package is installed.

    Returns True when the package can be found. A required package that
    is still missing after the download attempt raises LexiconLoadError.
    """
    try:
        nltk.data.find(NLTK_PACKAGES[package])
        return True
    except LookupError:
        pass
    if download:
        logger.info("Downloading NLTK data: package=%s", package)
        if nltk.download(package, quiet=True):
            return True
    if optional:
        logger.warning("NLTK data not available: package=%s", package)
        return False
    raise LexiconLoadError(package, "NLTK data package is not installed")


@lru_cache(maxsize=2)
def english_stopwords(download: bool = True) -> FrozenSet[str]:
    require_nltk("stopwords", download)
    try:
        return frozenset(w.lower() for w in stopwords.words("english"))
    except (LookupError, OSError) as e:
        raise LexiconLoadError("stopwords", str(e)) from e


@lru_cache(maxsize=2)
def wordnet_lemmatizer(download: bool = True) -> WordNetLemmatizer:
    require_nltk("wordnet", download)
    require_nltk("omw-1.4", download, optional=True)
    try:
        wordnet.ensure_loaded()
    except (LookupError, OSError) as e:
        raise LexiconLoadError("wordnet", str(e)) from e
    return WordNetLemmatizer()


@lru_cache(maxsize=1)
def spacy_lemmatizer() -> Language:
    """Blank English pipeline holding only the rule-based lemmatizer."""
    try:
        nlp = spacy.blank("en")
        lemmatizer = nlp.add_pipe("lemmatizer", config={"mode": "rule"})
        # lookup tables come from spacy-lookups-data
        lemmatizer.initialize()
    except (ImportError, OSError, ValueError) as e:
        raise LexiconLoadError("spacy", f"rule lemmatizer unavailable: {e}") from e
    logger.info("spaCy rule lemmatizer ready: spacy=%s", spacy.__version__)
    return nlp
