from __future__ import annotations

import logging
import re
from typing import Callable, Dict, List, Optional, Pattern, Sequence, Tuple, Union

import emoji

from .analysis_types import Improvement
from .errors import EmptyInputError
from .lexicons import Lexicons, Substitution
from .phrases import PhraseMatcher
from .tagger import TaggedToken, Tagger
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

TONES = ("professional", "formal", "friendly")

_CLOSERS = "\"')]}”’»"
_CONTROL_RE = re.compile(r"[\x00-\x08\x0e-\x1b\x7f]")
_ELONGATED_WORD_RE = re.compile(r"[^\W\d_]{4,}")
_LOWER_RUN_RE = re.compile(r"([a-z])\1{2,}")
_ROMAN_RE = re.compile(r"m{0,4}(?:cm|cd|d?c{0,3})(?:xc|xl|l?x{0,3})(?:ix|iv|v?i{0,3})")


def _shorten_elongation(m: re.Match) -> str:
    """Squeeze letter runs (sooo -> soo) but keep acronyms and Roman numerals like XXXL or viii."""
    word = m.group()
    if word.isupper() or _ROMAN_RE.fullmatch(word.lower()):
        return word
    return _LOWER_RUN_RE.sub(r"\1\1", word)


Replacement = Union[str, Callable[[re.Match], str]]

# (pattern, replacement, change entry), applied in order with URLs masked
NORMALIZATION_RULES: Tuple[Tuple[Pattern[str], Replacement, str], ...] = (
    (_CONTROL_RE, "", "Removed control characters"),
    (_ELONGATED_WORD_RE, _shorten_elongation, "Shortened elongated words"),
    (re.compile(r"([!?])[!?]+"), r"\1", "Reduced repeated punctuation"),
    (re.compile(r"\.{4,}"), "...", "Reduced repeated punctuation"),
    (re.compile(r"(?<!\.)\.\.(?!\.)"), ".", "Reduced repeated punctuation"),
    (re.compile(r"([,;:])(?:\s*[,;:])+"), r"\1", "Reduced repeated punctuation"),
    (re.compile(r"\s+([,.!?;:])"), r"\1", "Fixed spacing around punctuation"),
    (re.compile(r"([,;:])(?=[^\W\d_])"), r"\1 ", "Fixed spacing around punctuation"),
    (re.compile(r"[,;:]+\s*(?=[.!?]|$)"), "", "Removed dangling punctuation"),
    (re.compile(r"^\s*[,;:]+\s*"), "", "Removed dangling punctuation"),
    (re.compile(r"([.!?])\s*[,;:]+"), r"\1", "Removed dangling punctuation"),
)

_STANDALONE_I_RE = re.compile(r"(?<![\w.'’-])i(?![\w]|\.\w)")
_SENTENCE_START_RE = re.compile(r"(^|[.!?]\s+)([a-z])")


def _match_case(matched: str, replacement: str) -> str:
    if replacement and matched[:1].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement


def _sentinel(text: str) -> str:
    """A private-use character that does not occur in text."""
    code = 0xE000
    while chr(code) in text:
        code += 1
    return chr(code)


def _describe(matched: str, sub: Substitution) -> str:
    if sub.kind == "filler" or not sub.replacement:
        noun = "filler" if sub.kind == "filler" else f"{sub.kind} term"
        return f'Removed {noun} "{matched}"'
    if sub.kind == "harsh":
        return f'Softened harsh term "{matched}" to "{sub.replacement}"'
    return f'Replaced {sub.kind} "{matched}" with "{sub.replacement}"'


def _ends_with_emoji(text: str) -> bool:
    found = emoji.emoji_list(text)
    return bool(found) and found[-1]["match_end"] == len(text)


class Rewriter:
    """
    Rule-based rewrite of informal text.

    professional: substitutions, emoji removed, normalization
    formal:       professional plus contraction expansion
    friendly:     substitutions and normalization, emoji kept

    Substitutions run over tagged tokens, so homographs listed in
    `Lexicons.phrase_contexts` are only replaced in their slang context
    and URLs are never touched.
    """

    def __init__(self, lexicons: Lexicons, tagger: Optional[Tagger] = None) -> None:
        self.lexicons = lexicons
        self.tagger = tagger or Tagger(lexicons)
        self.substitutions = PhraseMatcher(lexicons.substitutions, lexicons)

    def _capitalize_sentences(self, text: str) -> str:
        def repl(m: re.Match) -> str:
            before = text[:m.start(2)].split()
            if before and before[-1].lower() in self.lexicons.abbreviations:
                return m.group()
            return m.group(1) + m.group(2).upper()

        return _SENTENCE_START_RE.sub(repl, text)

    def _normalize(self, text: str, changes: List[str]) -> str:
        def record(before: str, after: str, entry: str) -> None:
            if before != after and entry not in changes:
                changes.append(entry)

        out = text
        for pattern, replacement, entry in NORMALIZATION_RULES:
            updated = pattern.sub(replacement, out)
            record(out, updated, entry)
            out = updated

        updated = " ".join(out.split())
        record(out, updated, "Collapsed extra whitespace")
        out = updated

        updated = _STANDALONE_I_RE.sub("I", out)
        record(out, updated, 'Capitalized standalone "i"')
        out = updated

        updated = self._capitalize_sentences(out)
        record(out, updated, "Capitalized sentence starts")
        out = updated

        core = out.rstrip(_CLOSERS)
        if core and core[-1] not in ".!?…" and not _ends_with_emoji(core):
            out = core + "." + out[len(core):]
            changes.append("Added terminal punctuation")
        return out

    def _edit_tokens(
        self, text: str, tagged: Sequence[TaggedToken], tone: str, sentinel: str
    ) -> Tuple[str, List[str], List[str]]:
        """
        Rebuild text from the token spans with substitutions, emoji removal
        and contraction expansion applied. URLs become numbered sentinels.
        Returns (text, urls, changes).
        """
        starts: Dict[int, Tuple[int, str]] = {}
        for match in self.substitutions.find_all(tagged):
            starts[match.start] = (match.end, match.phrase)

        pieces: List[str] = []
        urls: List[str] = []
        substituted: Dict[str, None] = {}
        expanded: Dict[str, None] = {}
        removed_emoji: List[str] = []
        pos = 0
        i = 0
        while i < len(tagged):
            tok = tagged[i].raw
            end_index = i + 1
            if i in starts:
                end_index, phrase = starts[i]
                sub = self.lexicons.substitutions[phrase]
                matched = text[tok.start:tagged[end_index - 1].raw.end]
                substituted.setdefault(_describe(phrase, sub))
                replacement = _match_case(matched, sub.replacement)
            elif tok.kind == "url":
                urls.append(tok.text)
                replacement = f"{sentinel}{len(urls) - 1}{sentinel}"
            elif tok.kind == "emoji" and tone != "friendly":
                removed_emoji.append(tok.text)
                replacement = ""
            elif tone == "formal" and tok.kind == "word" and tok.lower in self.lexicons.contractions:
                full = self.lexicons.contractions[tok.lower]
                expanded.setdefault(f'Expanded contraction "{tok.lower}" to "{full}"')
                replacement = _match_case(tok.text, full)
            else:
                replacement = tok.text

            if replacement:
                pieces.append(text[pos:tok.start])
            # a removed token takes the whitespace before it along
            pieces.append(replacement)
            pos = tagged[end_index - 1].raw.end
            i = end_index
        pieces.append(text[pos:])

        changes = list(substituted)
        if len(removed_emoji) == 1:
            changes.append(f"Removed emoji {removed_emoji[0]}")
        elif removed_emoji:
            changes.append(f"Removed {len(removed_emoji)} emoji")
        changes.extend(expanded)
        return "".join(pieces), urls, changes

    def rewrite(
        self, text: str, tone: str = "professional", tagged: Optional[Sequence[TaggedToken]] = None
    ) -> Improvement:
        """
        `tagged` may carry the tokens already produced for `text`; the text
        is tokenized and tagged here otherwise.

        Raises:
            EmptyInputError: if the trimmed text is empty.
            ValueError: if tone is not one of TONES.
        """
        if text is None or not text.strip():
            raise EmptyInputError()
        if tone not in TONES:
            raise ValueError(f"unknown tone {tone!r}, expected one of {', '.join(TONES)}")
        if tagged is None:
            tagged = self.tagger.tag(tokenize(text, self.lexicons.abbreviations).tokens)

        sentinel = _sentinel(text)
        out, urls, changes = self._edit_tokens(text, tagged, tone, sentinel)
        out = self._normalize(out, changes)
        out = re.sub(rf"{sentinel}(\d+){sentinel}", lambda m: urls[int(m.group(1))], out)

        if not re.search(r"\w", out):
            out = " ".join(text.split())
            changes.append("Kept the original wording because nothing else would remain")

        logger.debug("Rewrite: tone=%s changes=%s", tone, len(changes))
        return Improvement(original=text, improved=out, changes=tuple(changes))
