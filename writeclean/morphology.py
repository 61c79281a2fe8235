from __future__ import annotations

"""
Morphology reducer: two stemmers and two lemmatizers per token.

  stem_porter     nltk PorterStemmer
  stem_snowball   nltk SnowballStemmer("english"), floored so it is never
                  shorter than the Porter stem
  lemma_wordnet   nltk WordNetLemmatizer with the coarse tag, after the
                  lexicon override table
  lemma_spacy     spaCy rule lemmatizer driven by our own tags
"""

import logging
import re
from typing import Dict, List, Sequence, Tuple

from nltk.stem import PorterStemmer, SnowballStemmer
from spacy.tokens import Doc

from .analysis_types import Token
from .lexicons import Lexicons
from .resources import spacy_lemmatizer, wordnet_lemmatizer
from .tagger import TaggedToken

logger = logging.getLogger(__name__)

COARSE_POS: Dict[str, str] = {"NOUN": "n", "VERB": "v", "ADJ": "a", "ADV": "r"}

# spaCy uses the Universal Dependencies name for conjunctions
SPACY_POS: Dict[str, str] = {"CONJ": "CCONJ"}

_WORD_RE = re.compile(r"[a-z]+(?:['-][a-z]+)*")


def _normalize(word: str) -> str:
    return word.lower().replace("’", "'")


class MorphologyReducer:
    def __init__(self, lexicons: Lexicons, download: bool = True) -> None:
        self.lexicons = lexicons
        self.porter = PorterStemmer()
        self.snowball = SnowballStemmer("english")
        self.wordnet = wordnet_lemmatizer(download)
        self.nlp = spacy_lemmatizer()
        self.spacy_lemmatizer = self.nlp.get_pipe("lemmatizer")

    # --- stems ---
    def stems(self, word: str) -> Tuple[str, str]:
        lw = _normalize(word)
        if not _WORD_RE.fullmatch(lw):
            return lw, lw
        aggressive = self.porter.stem(lw)
        conservative = self.snowball.stem(lw)
        if len(conservative) < len(aggressive):
            conservative = lw
        return aggressive, conservative

    # --- lemmas ---
    def dictionary_lemma(self, word: str, pos: str) -> str:
        lw = _normalize(word)
        coarse = COARSE_POS.get(pos)
        if coarse is None:
            return lw
        override = self.lexicons.dictionary_lemmas.get((lw, coarse))
        if override is not None:
            return override
        if not _WORD_RE.fullmatch(lw):
            return lw
        return self.wordnet.lemmatize(lw, coarse)

    def heuristic_lemma(self, word: str, pos: str) -> str:
        return self.heuristic_lemmas([word], [pos])[0]

    def heuristic_lemmas(self, words: Sequence[str], tags: Sequence[str]) -> List[str]:
        """Lemmatize a tagged sentence in one spaCy call."""
        if not words:
            return []
        doc = Doc(
            self.nlp.vocab,
            words=[_normalize(w) for w in words],
            pos=[SPACY_POS.get(t, t) for t in tags],
        )
        doc = self.spacy_lemmatizer(doc)
        lemmas = []
        for word, tag, tok in zip(words, tags, doc):
            if tag in ("PUNCT", "X"):
                lemmas.append(word)
            else:
                lemmas.append(tok.lemma_ or tok.text)
        return lemmas

    # --- combined ---
    def reduce(self, tok: TaggedToken, lemma_spacy: str) -> Token:
        aggressive, conservative = self.stems(tok.word)
        return Token(
            word=tok.word,
            pos_tag=tok.pos,
            is_stop_word=tok.is_stop,
            stem_porter=aggressive,
            stem_snowball=conservative,
            lemma_wordnet=self.dictionary_lemma(tok.word, tok.pos),
            lemma_spacy=lemma_spacy,
        )

    def reduce_all(self, tokens: Sequence[TaggedToken]) -> Tuple[Token, ...]:
        lemmas = self.heuristic_lemmas([t.word for t in tokens], [t.pos for t in tokens])
        return tuple(self.reduce(t, lemma) for t, lemma in zip(tokens, lemmas))
