from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .lexicons import Lexicons
from .tokenizer import RawToken

logger = logging.getLogger(__name__)

TAGSET = ("NOUN", "VERB", "ADJ", "ADV", "DET", "PRON", "ADP", "CONJ", "INTJ", "PUNCT", "X")

# Unknown-word suffixes, longest first. A word must be at least
# len(suffix) + 3 characters long for its suffix to count.
SUFFIX_TAGS: Tuple[Tuple[str, Tuple[str, ...]], ...] = tuple(sorted(
    (
        ("ness", ("NOUN",)), ("ment", ("NOUN",)), ("tion", ("NOUN",)),
        ("sion", ("NOUN",)), ("ity", ("NOUN",)), ("ship", ("NOUN",)),
        ("hood", ("NOUN",)), ("ism", ("NOUN",)), ("ist", ("NOUN",)),
        ("ance", ("NOUN",)), ("ence", ("NOUN",)), ("er", ("NOUN",)),
        ("or", ("NOUN",)), ("ly", ("ADV",)), ("ous", ("ADJ",)),
        ("ful", ("ADJ",)), ("less", ("ADJ",)), ("able", ("ADJ",)),
        ("ible", ("ADJ",)), ("ive", ("ADJ",)), ("ical", ("ADJ",)),
        ("ic", ("ADJ",)), ("ish", ("ADJ",)), ("al", ("ADJ",)),
        ("ary", ("ADJ",)), ("est", ("ADJ",)), ("ize", ("VERB",)),
        ("ise", ("VERB",)), ("ify", ("VERB",)), ("ate", ("VERB",)),
        ("ing", ("VERB", "NOUN", "ADJ")), ("ed", ("VERB", "ADJ")),
        ("s", ("NOUN", "VERB")),
    ),
    key=lambda rule: -len(rule[0]),
))

# Preferred tags when the previous token carries the given tag
CONTEXT_PREFERENCES: Dict[Optional[str], Tuple[str, ...]] = {
    "DET": ("ADJ", "NOUN"),
    "ADJ": ("NOUN", "ADJ"),
    "PRON": ("VERB",),
    "NOUN": ("VERB",),
    "ADV": ("VERB", "ADJ"),
    "ADP": ("NOUN", "ADJ"),
    "VERB": ("ADJ", "NOUN", "ADV"),
}

# Preferred tags after specific words
WORD_PREFERENCES: Dict[str, Tuple[str, ...]] = {
    "to": ("VERB", "NOUN"),
    "will": ("VERB",), "would": ("VERB",), "can": ("VERB",), "could": ("VERB",),
    "should": ("VERB",), "must": ("VERB",), "might": ("VERB",), "may": ("VERB",),
    "shall": ("VERB",), "don't": ("VERB",), "doesn't": ("VERB",),
    "didn't": ("VERB",), "can't": ("VERB",), "won't": ("VERB",),
    "i'll": ("VERB",), "let's": ("VERB",),
}

MODALS = frozenset(WORD_PREFERENCES) - {"to"}


@dataclass(frozen=True)
class TaggedToken:
    raw: RawToken
    pos: str
    is_stop: bool

    @property
    def word(self) -> str:
        return self.raw.text

    @property
    def lower(self) -> str:
        return self.raw.lower


@dataclass
class _Context:
    prev_tag: Optional[str]
    prev_word: Optional[str]
    next_token: Optional[RawToken]
    is_closed: Callable[[str], bool]


def _next_is_content(ctx: _Context) -> bool:
    nxt = ctx.next_token
    return nxt is not None and nxt.kind == "word" and not ctx.is_closed(nxt.lower)


def _next_is_punct_or_end(ctx: _Context) -> bool:
    return ctx.next_token is None or ctx.next_token.kind == "punct"


def _next_is_closed(ctx: _Context) -> bool:
    nxt = ctx.next_token
    return nxt is not None and nxt.kind == "word" and ctx.is_closed(nxt.lower)


def _prev_is_pron(ctx: _Context) -> bool:
    return ctx.prev_tag == "PRON"


def _prev_is_modal(ctx: _Context) -> bool:
    return ctx.prev_word in MODALS


def _prev_is_verb(ctx: _Context) -> bool:
    return ctx.prev_tag == "VERB"


def _sentence_start(ctx: _Context) -> bool:
    return ctx.prev_tag is None


# Context overrides for ambiguous closed-class words: first match wins,
# otherwise the word's most frequent tag is used.
CLOSED_CLASS_RULES: Dict[str, Tuple[Tuple[Callable[[_Context], bool], str], ...]] = {
    "that": ((_next_is_content, "DET"), (_prev_is_verb, "CONJ")),
    "this": ((_next_is_content, "DET"),),
    "these": ((_next_is_content, "DET"),),
    "those": ((_next_is_content, "DET"),),
    "her": ((_next_is_content, "DET"),),
    "his": ((_next_is_punct_or_end, "PRON"),),
    "what": ((_next_is_content, "DET"),),
    "which": ((_next_is_content, "DET"),),
    "like": ((_prev_is_pron, "VERB"), (_prev_is_modal, "VERB")),
    "well": ((_sentence_start, "INTJ"),),
    "no": ((_next_is_punct_or_end, "INTJ"),),
    "all": ((_next_is_punct_or_end, "PRON"), (_next_is_closed, "PRON")),
    "some": ((_next_is_punct_or_end, "PRON"),),
    "any": ((_next_is_punct_or_end, "PRON"),),
    "both": ((_next_is_punct_or_end, "PRON"),),
    "each": ((_next_is_punct_or_end, "PRON"),),
    "up": ((_next_is_punct_or_end, "ADV"),),
    "down": ((_next_is_punct_or_end, "ADV"),),
    "out": ((_next_is_punct_or_end, "ADV"),),
    "off": ((_next_is_punct_or_end, "ADV"),),
    "over": ((_next_is_punct_or_end, "ADV"),),
    "okay": ((_prev_is_verb, "ADJ"),),
    "ok": ((_prev_is_verb, "ADJ"),),
}


class Tagger:
    """
    Rule-based part-of-speech tagger and stopword classifier.

    Order of evaluation per token: token shape (punctuation, emoji,
    numbers), closed-class lexicon with context overrides, open-class
    vocabulary, suffix table; ambiguity among candidates is resolved by
    the previous tag. Unknown words are nouns.
    """

    def __init__(self, lexicons: Lexicons) -> None:
        self.lexicons = lexicons

    def _is_closed(self, word: str) -> bool:
        return word in self.lexicons.closed_class

    def candidates(self, tok: RawToken) -> Tuple[str, ...]:
        if tok.kind == "punct":
            return ("PUNCT",)
        if tok.kind in ("emoji", "url", "number") or tok.text.isdigit():
            return ("X",)
        word = tok.lower
        if word in self.lexicons.closed_class:
            return self.lexicons.closed_class[word]
        if word in self.lexicons.open_class:
            return self.lexicons.open_class[word]
        if tok.kind == "abbrev":
            return ("NOUN",)
        for suffix, tags in SUFFIX_TAGS:
            if word.endswith(suffix) and len(word) >= len(suffix) + 3:
                if suffix == "s" and word.endswith(("ss", "us", "is")):
                    continue
                return tags
        return ("NOUN",)

    def choose(self, tok: RawToken, cands: Sequence[str], ctx: _Context) -> str:
        if len(cands) == 1:
            return cands[0]
        rules = CLOSED_CLASS_RULES.get(tok.lower, ())
        for predicate, tag in rules:
            if tag in cands and predicate(ctx):
                return tag
        if tok.lower in self.lexicons.closed_class:
            return cands[0]
        prefs = WORD_PREFERENCES.get(ctx.prev_word or "", ()) or CONTEXT_PREFERENCES.get(ctx.prev_tag, ())
        for tag in prefs:
            if tag in cands:
                return tag
        return cands[0]

    def tag(self, tokens: Sequence[RawToken]) -> List[TaggedToken]:
        out: List[TaggedToken] = []
        prev_tag: Optional[str] = None
        prev_word: Optional[str] = None
        for i, tok in enumerate(tokens):
            if tok.kind == "punct" and tok.is_terminal:
                pos = "PUNCT"
            else:
                ctx = _Context(
                    prev_tag=prev_tag,
                    prev_word=prev_word,
                    next_token=tokens[i + 1] if i + 1 < len(tokens) else None,
                    is_closed=self._is_closed,
                )
                pos = self.choose(tok, self.candidates(tok), ctx)
            is_stop = tok.kind == "word" and tok.lower in self.lexicons.stopwords
            out.append(TaggedToken(raw=tok, pos=pos, is_stop=is_stop))

            if tok.is_terminal:
                prev_tag, prev_word = None, None
            elif pos != "PUNCT":
                prev_tag, prev_word = pos, tok.lower
        logger.debug("Tagged %s tokens", len(out))
        return out
