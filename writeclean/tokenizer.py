from __future__ import annotations

import re
from dataclasses import dataclass
from typing import AbstractSet, List, Optional, Tuple

import emoji

from .errors import EmptyInputError

URL_RE = r"https?://\S+|www\.\S+"
INITIALISM_RE = r"(?:[A-Za-z]\.){2,}"
NUMBER_RE = r"\d+(?:[.,:]\d+)+"
WORD_RE = r"[^\W_]+(?:['’\-][^\W_]+)*"
TERMINAL_RE = r"[.!?…]+"

# Emoji are located with emoji.emoji_list before this runs, so the
# segments handed to it never contain one.
TOKEN_RE = re.compile(
    rf"(?P<url>{URL_RE})"
    rf"|(?P<abbrev>{INITIALISM_RE})"
    rf"|(?P<number>{NUMBER_RE})"
    rf"|(?P<word>{WORD_RE})"
    rf"|(?P<punct>{TERMINAL_RE}|\S)"
)

_TERMINAL_CHARS = frozenset(".!?…")
_CLOSERS = frozenset("\"')]}”’»")


@dataclass(frozen=True)
class RawToken:
    text: str
    start: int  # character offsets into the original text
    end: int
    kind: str  # word | abbrev | number | emoji | punct | url

    @property
    def lower(self) -> str:
        return self.text.lower().replace("’", "'")

    @property
    def is_terminal(self) -> bool:
        return self.kind == "punct" and all(ch in _TERMINAL_CHARS for ch in self.text)


@dataclass(frozen=True)
class Sentence:
    text: str
    start: int  # token index range [start, end)
    end: int


@dataclass(frozen=True)
class TokenStream:
    text: str
    tokens: Tuple[RawToken, ...]
    sentences: Tuple[Sentence, ...]


def _scan_segment(
    text: str, pos: int, endpos: int, abbreviations: AbstractSet[str], tokens: List[RawToken]
) -> None:
    for m in TOKEN_RE.finditer(text, pos, endpos):
        start, end = m.span()
        kind = m.lastgroup or "punct"
        if tokens and start < tokens[-1].end:
            # the previous abbreviation already owns the period; keep the rest ("etc.!")
            start = tokens[-1].end
            if start >= end:
                continue
            kind = "punct"
        if kind == "word" and text[end:end + 1] == "." and (m.group().lower() + ".") in abbreviations:
            kind, end = "abbrev", end + 1
        tokens.append(RawToken(text[start:end], start, end, kind))


def _scan(text: str, abbreviations: AbstractSet[str]) -> List[RawToken]:
    tokens: List[RawToken] = []
    pos = 0
    for found in emoji.emoji_list(text):
        start, end = found["match_start"], found["match_end"]
        _scan_segment(text, pos, start, abbreviations, tokens)
        tokens.append(RawToken(text[start:end], start, end, "emoji"))
        pos = end
    _scan_segment(text, pos, len(text), abbreviations, tokens)
    return tokens


def _make_sentence(text: str, tokens: List[RawToken], start: int, end: int) -> Sentence:
    raw = text[tokens[start].start:tokens[end - 1].end]
    return Sentence(" ".join(raw.split()), start, end)


def _split_sentences(text: str, tokens: List[RawToken]) -> Tuple[Sentence, ...]:
    sentences: List[Sentence] = []
    begin = 0
    pending = False
    for i, tok in enumerate(tokens):
        if pending and not (tok.kind == "punct" and tok.text in _CLOSERS):
            sentences.append(_make_sentence(text, tokens, begin, i))
            begin, pending = i, False
        if tok.is_terminal:
            pending = True
    if begin < len(tokens):
        sentences.append(_make_sentence(text, tokens, begin, len(tokens)))
    return tuple(sentences)


def tokenize(text: Optional[str], abbreviations: AbstractSet[str] = frozenset()) -> TokenStream:
    """
    Split raw text into word, punctuation and emoji tokens plus sentences.

    Whitespace only separates tokens. Contractions ("don't") and hyphenated
    words stay whole; abbreviations keep their period and never end a
    sentence, though punctuation right after one ("etc.!") still does.
    A sentence ends after a run of `.`, `!`, `?` (plus any closing quotes
    or brackets that follow it). Emoji, including ZWJ sequences and skin
    tone variants, are single tokens.

    Raises:
        EmptyInputError: if the trimmed text is empty.
    """
    if text is None or not text.strip():
        raise EmptyInputError()
    tokens = _scan(text, abbreviations)
    return TokenStream(text=text, tokens=tuple(tokens), sentences=_split_sentences(text, tokens))
