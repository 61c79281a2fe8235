# writeclean/lexicons.py
from __future__ import annotations

"""
Lexicons and word tables for the analysis engine.

Everything here is built once per process by `load_lexicons()` and is
read-only afterwards (frozensets and MappingProxyType views), so the same
`Lexicons` instance can be shared by any number of concurrent requests.

Stopwords come from the NLTK English stopword corpus. Dictionary lemmas
come from WordNet (see morphology.py); the table here only holds
overrides.

Built-in tables can be extended or replaced with JSON files placed in a
directory (settings.LEXICON_DIR):

  stopwords.json      ["the", "a", ...]                       replaces
  polarity.json       {"word": 1.5, ...}                      merges
  slang.json          {"lit": {"polarity": 2.0, "meaning": "exciting", "context": "predicative"}}
  emoji.json          {"😂": {"polarity": 2.0, "name": "tears of joy"}}
  substitutions.json  {"mid": {"replacement": "mediocre", "kind": "slang"}}
  lemmas.json         [["mice", "n", "mouse"], ...]
"""

import json
import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, NamedTuple, Optional, Tuple

from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import LexiconLoadError
from .resources import english_stopwords

logger = logging.getLogger(__name__)


class SlangTerm(NamedTuple):
    polarity: float
    meaning: str


class EmojiInfo(NamedTuple):
    polarity: float
    name: str


class Substitution(NamedTuple):
    replacement: str
    kind: str  # "slang" | "harsh" | "filler"


ABBREVIATIONS = frozenset({
    "mr.", "mrs.", "ms.", "dr.", "prof.", "sr.", "jr.", "st.", "mt.", "vs.",
    "etc.", "inc.", "ltd.", "co.", "corp.", "dept.", "approx.",
    "jan.", "feb.", "mar.", "apr.", "jun.", "jul.", "aug.", "sep.", "sept.",
    "oct.", "nov.", "dec.", "mon.", "tue.", "thu.", "fri.",
    "e.g.", "i.e.", "a.m.", "p.m.", "u.s.", "u.k.", "u.n.", "ph.d.",
})

# ------------------------ Closed-class words ------------------------
# Tags are ordered by frequency; the first one wins unless a context rule applies.
CLOSED_CLASS: Dict[str, Tuple[str, ...]] = {
    # determiners
    "the": ("DET",), "a": ("DET",), "an": ("DET",), "every": ("DET",),
    "another": ("DET",), "such": ("DET",), "my": ("DET",), "your": ("DET",),
    "his": ("DET", "PRON"), "its": ("DET",), "our": ("DET",), "their": ("DET",),
    "this": ("PRON", "DET"), "these": ("PRON", "DET"), "those": ("PRON", "DET"),
    "that": ("PRON", "DET", "CONJ"), "her": ("PRON", "DET"),
    "all": ("DET", "PRON"), "some": ("DET", "PRON"), "any": ("DET", "PRON"),
    "both": ("DET", "PRON"), "each": ("DET", "PRON"), "either": ("DET", "PRON"),
    "neither": ("DET", "PRON"), "no": ("DET", "INTJ"), "few": ("DET", "ADJ"),
    "many": ("ADJ", "DET"), "much": ("ADJ", "ADV"), "several": ("DET",),
    # pronouns
    "i": ("PRON",), "me": ("PRON",), "you": ("PRON",), "he": ("PRON",),
    "him": ("PRON",), "she": ("PRON",), "it": ("PRON",), "we": ("PRON",),
    "us": ("PRON",), "they": ("PRON",), "them": ("PRON",), "mine": ("PRON",),
    "yours": ("PRON",), "hers": ("PRON",), "ours": ("PRON",), "theirs": ("PRON",),
    "myself": ("PRON",), "yourself": ("PRON",), "himself": ("PRON",),
    "herself": ("PRON",), "itself": ("PRON",), "ourselves": ("PRON",),
    "themselves": ("PRON",), "who": ("PRON",), "whom": ("PRON",),
    "whose": ("PRON",), "what": ("PRON", "DET"), "which": ("PRON", "DET"),
    "someone": ("PRON",), "somebody": ("PRON",), "something": ("PRON",),
    "anyone": ("PRON",), "anybody": ("PRON",), "anything": ("PRON",),
    "everyone": ("PRON",), "everybody": ("PRON",), "everything": ("PRON",),
    "nobody": ("PRON",), "nothing": ("PRON",), "none": ("PRON",),
    "i'm": ("PRON",), "i've": ("PRON",), "i'll": ("PRON",), "i'd": ("PRON",),
    "you're": ("PRON",), "you've": ("PRON",), "you'll": ("PRON",),
    "you'd": ("PRON",), "he's": ("PRON",), "she's": ("PRON",), "it's": ("PRON",),
    "we're": ("PRON",), "we've": ("PRON",), "they're": ("PRON",),
    "they've": ("PRON",), "that's": ("PRON",), "there's": ("PRON",),
    "what's": ("PRON",), "y'all": ("PRON",),
    # adpositions
    "of": ("ADP",), "in": ("ADP",), "on": ("ADP",), "at": ("ADP",), "by": ("ADP",),
    "with": ("ADP",), "about": ("ADP",), "against": ("ADP",), "between": ("ADP",),
    "into": ("ADP",), "through": ("ADP",), "during": ("ADP",), "to": ("ADP",),
    "from": ("ADP",), "under": ("ADP",), "without": ("ADP",), "within": ("ADP",),
    "across": ("ADP",), "along": ("ADP",), "around": ("ADP",), "behind": ("ADP",),
    "beyond": ("ADP",), "upon": ("ADP",), "toward": ("ADP",), "towards": ("ADP",),
    "via": ("ADP",), "per": ("ADP",), "among": ("ADP",), "near": ("ADP",),
    "for": ("ADP", "CONJ"), "as": ("ADP", "CONJ"), "like": ("ADP", "VERB"),
    "since": ("ADP", "CONJ"), "before": ("ADP", "CONJ"), "after": ("ADP", "CONJ"),
    "until": ("ADP", "CONJ"), "up": ("ADP", "ADV"), "down": ("ADP", "ADV"),
    "out": ("ADP", "ADV"), "off": ("ADP", "ADV"), "over": ("ADP", "ADV"),
    # conjunctions
    "and": ("CONJ",), "or": ("CONJ",), "but": ("CONJ",), "nor": ("CONJ",),
    "yet": ("CONJ", "ADV"), "because": ("CONJ",), "although": ("CONJ",),
    "though": ("CONJ",), "while": ("CONJ",), "if": ("CONJ",), "unless": ("CONJ",),
    "whereas": ("CONJ",), "whether": ("CONJ",), "than": ("CONJ",),
    # auxiliaries and modals
    "is": ("VERB",), "am": ("VERB",), "are": ("VERB",), "was": ("VERB",),
    "were": ("VERB",), "be": ("VERB",), "been": ("VERB",), "being": ("VERB",),
    "have": ("VERB",), "has": ("VERB",), "had": ("VERB",), "having": ("VERB",),
    "do": ("VERB",), "does": ("VERB",), "did": ("VERB",), "will": ("VERB",),
    "would": ("VERB",), "shall": ("VERB",), "should": ("VERB",), "can": ("VERB",),
    "could": ("VERB",), "may": ("VERB",), "might": ("VERB",), "must": ("VERB",),
    "don't": ("VERB",), "doesn't": ("VERB",), "didn't": ("VERB",),
    "isn't": ("VERB",), "aren't": ("VERB",), "wasn't": ("VERB",),
    "weren't": ("VERB",), "can't": ("VERB",), "cannot": ("VERB",),
    "won't": ("VERB",), "wouldn't": ("VERB",), "shouldn't": ("VERB",),
    "couldn't": ("VERB",), "haven't": ("VERB",), "hasn't": ("VERB",),
    "hadn't": ("VERB",), "ain't": ("VERB",),
    # adverbs
    "not": ("ADV",), "very": ("ADV",), "too": ("ADV",), "also": ("ADV",),
    "just": ("ADV",), "only": ("ADV",), "so": ("ADV",), "then": ("ADV",),
    "now": ("ADV",), "here": ("ADV",), "there": ("ADV", "PRON"),
    "always": ("ADV",), "never": ("ADV",), "often": ("ADV",), "still": ("ADV",),
    "already": ("ADV",), "again": ("ADV",), "ever": ("ADV",), "quite": ("ADV",),
    "rather": ("ADV",), "almost": ("ADV",), "even": ("ADV",), "how": ("ADV",),
    "when": ("ADV",), "where": ("ADV",), "why": ("ADV",), "soon": ("ADV",),
    "maybe": ("ADV",), "perhaps": ("ADV",), "once": ("ADV",), "further": ("ADV",),
    "kinda": ("ADV",), "sorta": ("ADV",), "well": ("ADV", "INTJ"),
    # interjections
    "hello": ("INTJ",), "hi": ("INTJ",), "hey": ("INTJ",), "oh": ("INTJ",),
    "wow": ("INTJ",), "yay": ("INTJ",), "ugh": ("INTJ",), "oops": ("INTJ",),
    "ouch": ("INTJ",), "hmm": ("INTJ",), "um": ("INTJ",), "uh": ("INTJ",),
    "yes": ("INTJ",), "yeah": ("INTJ",), "yep": ("INTJ",), "yup": ("INTJ",),
    "nope": ("INTJ",), "okay": ("INTJ", "ADJ"), "ok": ("INTJ", "ADJ"),
    "please": ("INTJ",), "thanks": ("INTJ",), "bye": ("INTJ",), "lol": ("INTJ",),
    "lmao": ("INTJ",), "omg": ("INTJ",), "smh": ("INTJ",), "bruh": ("INTJ",),
    "haha": ("INTJ",), "alas": ("INTJ",), "meh": ("INTJ",), "whoa": ("INTJ",),
    "wtf": ("INTJ",),
}

# ------------------------ Open-class vocabulary ------------------------
# Base forms; regular inflections are generated when the lexicons load.
IRREGULAR_VERB_FORMS: Dict[str, Tuple[str, ...]] = {
    "be": ("am", "is", "are", "was", "were", "been", "being"),
    "have": ("has", "had", "having"),
    "do": ("does", "did", "done", "doing"),
    "go": ("goes", "went", "gone", "going"),
    "get": ("gets", "got", "gotten", "getting"),
    "see": ("sees", "saw", "seen", "seeing"),
    "come": ("comes", "came", "coming"),
    "take": ("takes", "took", "taken", "taking"),
    "give": ("gives", "gave", "given", "giving"),
    "make": ("makes", "made", "making"),
    "say": ("says", "said", "saying"),
    "tell": ("tells", "told", "telling"),
    "think": ("thinks", "thought", "thinking"),
    "know": ("knows", "knew", "known", "knowing"),
    "feel": ("feels", "felt", "feeling"),
    "run": ("runs", "ran", "running"),
    "eat": ("eats", "ate", "eaten", "eating"),
    "write": ("writes", "wrote", "written", "writing"),
    "read": ("reads", "reading"),
    "buy": ("buys", "bought", "buying"),
    "bring": ("brings", "brought", "bringing"),
    "find": ("finds", "found", "finding"),
    "keep": ("keeps", "kept", "keeping"),
    "leave": ("leaves", "left", "leaving"),
    "begin": ("begins", "began", "begun", "beginning"),
    "break": ("breaks", "broke", "broken", "breaking"),
    "choose": ("chooses", "chose", "chosen", "choosing"),
    "drive": ("drives", "drove", "driven", "driving"),
    "fall": ("falls", "fell", "fallen", "falling"),
    "fly": ("flies", "flew", "flown", "flying"),
    "forget": ("forgets", "forgot", "forgotten", "forgetting"),
    "grow": ("grows", "grew", "grown", "growing"),
    "hear": ("hears", "heard", "hearing"),
    "hold": ("holds", "held", "holding"),
    "lose": ("loses", "lost", "losing"),
    "meet": ("meets", "met", "meeting"),
    "pay": ("pays", "paid", "paying"),
    "put": ("puts", "putting"),
    "send": ("sends", "sent", "sending"),
    "sit": ("sits", "sat", "sitting"),
    "sleep": ("sleeps", "slept", "sleeping"),
    "speak": ("speaks", "spoke", "spoken", "speaking"),
    "spend": ("spends", "spent", "spending"),
    "stand": ("stands", "stood", "standing"),
    "swim": ("swims", "swam", "swum", "swimming"),
    "teach": ("teaches", "taught", "teaching"),
    "understand": ("understands", "understood", "understanding"),
    "win": ("wins", "won", "winning"),
    "wear": ("wears", "wore", "worn", "wearing"),
    "sing": ("sings", "sang", "sung", "singing"),
    "die": ("dies", "died", "dying"),
    "lie": ("lies", "lay", "lain", "lying"),
    "fight": ("fights", "fought", "fighting"),
    "catch": ("catches", "caught", "catching"),
    "sell": ("sells", "sold", "selling"),
    "build": ("builds", "built", "building"),
    "cut": ("cuts", "cutting"),
    "let": ("lets", "letting"),
    "hit": ("hits", "hitting"),
    "hurt": ("hurts", "hurting"),
    "set": ("sets", "setting"),
}

REGULAR_VERBS = (
    "love", "like", "hate", "enjoy", "want", "need", "help", "work", "play",
    "walk", "talk", "jump", "look", "watch", "call", "ask", "try", "cry",
    "study", "carry", "worry", "stop", "plan", "drop", "hope", "live", "move",
    "use", "create", "change", "improve", "believe", "answer", "arrive",
    "cook", "dance", "decide", "destroy", "disappoint", "end", "explain",
    "fail", "finish", "follow", "happen", "impress", "open", "order", "pass",
    "recommend", "relax", "remember", "return", "share", "smile", "start",
    "stay", "suggest", "thank", "travel", "trust", "visit", "wait", "wish",
    "wonder", "laugh", "learn", "listen", "miss", "offer", "pick", "produce",
    "promise", "prove", "push", "reach", "realize", "receive", "reply",
    "save", "seem", "serve", "shout", "sound", "support", "surprise", "touch",
    "turn", "vote", "waste", "annoy", "complain", "deliver", "damage",
    "admire", "agree", "appreciate", "apologize", "argue", "bore", "celebrate",
    "check", "clean", "close", "compare", "continue", "cover", "deserve",
    "describe", "excite", "expect", "fix", "guess", "hurry", "imagine",
    "include", "invite", "kill", "kiss", "mention", "notice", "own",
    "prepare", "protect", "rain", "recognize", "regret", "rely", "scare",
    "shop", "suck", "trouble", "frustrate", "confuse", "embarrass",
    "relate", "refund", "slay",
)

NOUNS = (
    "movie", "film", "show", "song", "music", "album", "game", "book", "story",
    "day", "time", "year", "week", "night", "morning", "person", "man",
    "woman", "child", "friend", "family", "house", "home", "car", "phone",
    "food", "meal", "restaurant", "service", "product", "price", "money",
    "job", "work", "team", "company", "customer", "delivery", "refund",
    "experience", "idea", "problem", "issue", "question", "answer", "plot",
    "ending", "character", "actor", "scene", "review", "dog", "cat", "fox",
    "bird", "mouse", "city", "place", "world", "country", "school", "class",
    "teacher", "student", "party", "vibe", "energy", "quality", "value",
    "hour", "minute", "thing", "way", "life", "knife", "wife", "leaf", "word",
    "text", "sentence", "message", "email", "box", "dish", "church", "bus",
    "glass", "boss", "hero", "potato", "tomato", "baby", "lady", "battery",
    "cap", "lunch", "dinner", "coffee", "gift", "trip", "weekend", "update",
    "feature", "app", "website", "link", "photo", "video", "picture", "face",
    "heart", "eye", "hand", "foot", "tooth", "goose", "love", "hate", "help",
    "play", "walk", "talk", "look", "call", "plan", "hope", "change", "end",
    "order", "smile", "start", "support", "surprise", "visit", "wish", "kiss",
    "trouble", "waste", "damage", "mess", "pain", "success", "failure",
    "disappointment", "people", "staff", "weather", "news",
)

INFLECTING_ADJECTIVES = (
    "good", "bad", "great", "nice", "happy", "sad", "quick", "brown", "lazy",
    "big", "small", "new", "old", "young", "long", "short", "high", "low",
    "easy", "hard", "fast", "slow", "hot", "cold", "warm", "cool", "large",
    "late", "early", "strong", "weak", "bright", "dark", "clean", "dirty",
    "rich", "poor", "cheap", "safe", "simple", "funny", "pretty", "ugly",
    "angry", "busy", "crazy", "fancy", "kind", "smart", "tall", "wide",
    "loud", "quiet", "sweet", "fresh", "true", "wise", "rude", "tiny", "huge",
    "lame", "gross", "weird", "fine",
)

ADJECTIVES = (
    "beautiful", "terrible", "amazing", "horrible", "awful", "excellent",
    "wonderful", "fantastic", "perfect", "boring", "interesting", "mediocre",
    "important", "different", "difficult", "possible", "real", "honest",
    "serious", "suspicious", "bitter", "embarrassing", "delicious",
    "exciting", "outstanding", "disappointing", "disappointed", "awesome",
    "incredible", "brilliant", "lovely", "helpful", "useless", "stupid",
    "dumb", "annoying", "annoyed", "frustrated", "frustrating", "confusing",
    "disgusting", "impressive", "satisfied", "pleased", "glad", "upset",
    "scared", "worried", "wrong", "broken", "painful", "unwise", "excited",
    "bored", "sorry", "special", "favorite", "whole", "total", "overall",
)

ADVERBS = (
    "really", "totally", "extremely", "absolutely", "literally", "actually",
    "honestly", "seriously", "definitely", "probably", "especially",
    "incredibly", "highly", "completely", "truly", "slightly", "somewhat",
    "fairly", "barely", "hardly", "scarcely", "finally", "usually",
    "sometimes", "today", "tomorrow", "yesterday", "together", "away",
    "unfortunately", "fortunately", "lowkey", "highkey",
)

IRREGULAR_PLURALS: Dict[str, str] = {
    "men": "man", "women": "woman", "children": "child", "people": "person",
    "mice": "mouse", "geese": "goose", "feet": "foot", "teeth": "tooth",
    "lives": "life", "knives": "knife", "wives": "wife", "leaves": "leaf",
    "wolves": "wolf", "halves": "half", "selves": "self", "shelves": "shelf",
    "oxen": "ox", "criteria": "criterion", "phenomena": "phenomenon",
    "data": "datum", "analyses": "analysis", "crises": "crisis",
}

IRREGULAR_ADJECTIVES = (
    "better", "best", "worse", "worst", "farther", "farthest", "further",
    "furthest", "less", "least", "elder", "eldest",
)

# ------------------------ Sentiment ------------------------
POLARITY: Dict[str, float] = {
    # positive
    "good": 1.9, "great": 3.1, "love": 3.2, "loved": 2.9, "loves": 2.7,
    "lovely": 2.8, "like": 1.5, "liked": 1.8, "excellent": 2.7, "amazing": 2.8,
    "awesome": 3.1, "fantastic": 2.6, "wonderful": 2.7, "perfect": 2.7,
    "best": 3.2, "better": 1.9, "nice": 1.8, "happy": 2.7, "glad": 2.0,
    "fun": 2.3, "funny": 1.9, "enjoy": 2.2, "enjoyed": 2.3, "beautiful": 2.9,
    "brilliant": 2.8, "cool": 1.3, "fine": 0.8, "okay": 0.9, "ok": 0.9,
    "thanks": 1.9, "thank": 1.5, "helpful": 1.8, "recommend": 1.5,
    "impressive": 2.3, "incredible": 2.5, "delicious": 2.7, "exciting": 2.2,
    "excited": 2.2, "outstanding": 3.0, "satisfied": 1.8, "pleased": 1.9,
    "win": 2.8, "won": 2.0, "success": 2.7, "interesting": 1.7,
    "honest": 2.3, "smart": 1.7, "sweet": 2.0, "yay": 2.4, "wow": 2.3,
    "haha": 2.0, "favorite": 2.0, "special": 1.7, "appreciate": 2.1,
    "wonderfully": 2.7, "happily": 2.3, "fortunately": 1.8, "dope": 2.0,
    "charm": 1.7, "excel": 2.0,
    # negative
    "bad": -2.5, "terrible": -2.1, "horrible": -2.5, "awful": -2.0,
    "worst": -3.1, "worse": -2.1, "hate": -2.7, "hated": -3.2, "hates": -2.7,
    "boring": -1.3, "bored": -1.1, "sad": -2.1, "angry": -2.3,
    "annoying": -1.7, "annoyed": -1.6, "disappointing": -2.2,
    "disappointed": -1.9, "disappointment": -2.3, "poor": -2.1,
    "useless": -1.8, "stupid": -2.4, "dumb": -2.3, "ugly": -2.3,
    "broken": -1.5, "fail": -2.5, "failed": -2.3, "failure": -2.3,
    "waste": -1.8, "wasted": -2.2, "mediocre": -1.5, "problem": -1.7,
    "wrong": -2.1, "sucks": -1.5, "suck": -1.9, "sucked": -2.0,
    "trash": -1.6, "garbage": -1.6, "crap": -1.6, "damn": -1.7, "pain": -2.3,
    "painful": -2.2, "sorry": -0.3, "rude": -2.0, "disgusting": -2.4,
    "gross": -2.1, "mess": -1.5, "unfortunately": -1.5, "lame": -1.8,
    "meh": -0.3, "ugh": -1.8, "scared": -1.9, "worried": -1.2, "upset": -1.6,
    "frustrated": -2.1, "frustrating": -2.0, "confusing": -1.3,
    "suspicious": -1.5, "embarrassing": -1.6, "bitter": -1.8, "idiot": -2.3,
    "idiots": -2.3, "weird": -0.7, "slow": -0.5, "late": -0.4, "unwise": -0.9,
}

NEGATORS = frozenset({
    "not", "no", "never", "nothing", "nobody", "none", "neither", "nor",
    "without", "hardly", "barely", "scarcely", "cannot", "don't", "doesn't",
    "didn't", "isn't", "wasn't", "aren't", "weren't", "can't", "won't",
    "wouldn't", "shouldn't", "couldn't", "haven't", "hasn't", "hadn't", "ain't",
})

# Multipliers applied to the next sentiment-bearing token
INTENSIFIERS: Dict[str, float] = {
    "very": 1.3, "really": 1.3, "so": 1.2, "totally": 1.3, "extremely": 1.5,
    "absolutely": 1.4, "incredibly": 1.4, "highly": 1.3, "completely": 1.3,
    "truly": 1.3, "hella": 1.3, "literally": 1.2, "insanely": 1.4,
    "too": 1.2, "super": 1.3, "mega": 1.3, "deeply": 1.3,
    "kinda": 0.7, "sorta": 0.7, "somewhat": 0.7, "slightly": 0.6,
    "fairly": 0.8, "partly": 0.7, "marginally": 0.6, "lowkey": 0.8,
}

SLANG: Dict[str, SlangTerm] = {
    "no cap": SlangTerm(0.3, "honestly, no lie"),
    "cap": SlangTerm(-0.8, "a lie"),
    "mid": SlangTerm(-1.6, "mediocre, average at best"),
    "slay": SlangTerm(2.5, "did something excellently"),
    "slayed": SlangTerm(2.5, "did something excellently"),
    "slaps": SlangTerm(2.5, "is excellent"),
    "bussin": SlangTerm(2.5, "extremely good, usually food"),
    "lit": SlangTerm(2.0, "exciting"),
    "goated": SlangTerm(3.0, "the greatest"),
    "bet": SlangTerm(0.5, "agreed"),
    "sus": SlangTerm(-1.0, "suspicious"),
    "salty": SlangTerm(-1.2, "bitter or resentful"),
    "cringe": SlangTerm(-1.8, "embarrassing"),
    "lowkey": SlangTerm(0.0, "somewhat, quietly"),
    "highkey": SlangTerm(0.0, "openly, very"),
    "fr": SlangTerm(0.2, "for real"),
    "ngl": SlangTerm(0.0, "not gonna lie"),
    "tbh": SlangTerm(0.0, "to be honest"),
    "deadass": SlangTerm(0.3, "seriously"),
    "rizz": SlangTerm(1.5, "charm"),
    "simp": SlangTerm(-1.0, "someone overly eager to please"),
    "ratio": SlangTerm(-1.0, "outnumbered in replies, a rebuke"),
    "it's giving": SlangTerm(0.5, "it resembles"),
    "main character energy": SlangTerm(1.5, "self-confidence"),
    "touch grass": SlangTerm(-1.5, "go outside, take a break"),
    "hits different": SlangTerm(2.0, "feels special"),
    "lol": SlangTerm(0.8, "laughing out loud"),
    "lmao": SlangTerm(1.0, "laughing hard"),
    "smh": SlangTerm(-1.2, "shaking my head"),
    "wtf": SlangTerm(-2.0, "expression of disbelief"),
    "omg": SlangTerm(0.3, "oh my god"),
    "yeet": SlangTerm(0.5, "throw with force"),
    "glow up": SlangTerm(2.0, "a transformation for the better"),
    "vibes": SlangTerm(0.8, "atmosphere"),
    "bruh": SlangTerm(-0.5, "expression of disbelief"),
    "periodt": SlangTerm(0.5, "end of discussion"),
    "fam": SlangTerm(0.5, "close friends"),
    "dope": SlangTerm(2.0, "great"),
    "on god": SlangTerm(0.3, "I swear"),
    "big yikes": SlangTerm(-2.0, "very embarrassing"),
    "yikes": SlangTerm(-1.5, "alarming or embarrassing"),
}

# Slang that is also an ordinary English word only counts as slang in
# the context named here (see phrases.py):
#   predicative   after a copula and closing its clause ("the party was lit")
#   intransitive  verb with nothing after it in the clause ("this song slaps")
#   standalone    a clause of its own ("Bet.")
PHRASE_CONTEXTS: Dict[str, str] = {
    "lit": "predicative",
    "cap": "predicative",
    "cringe": "predicative",
    "dope": "predicative",
    "slaps": "intransitive",
    "slay": "intransitive",
    "slayed": "intransitive",
    "bet": "standalone",
    "ratio": "standalone",
}

COPULAS = frozenset({
    "is", "am", "are", "was", "were", "be", "been", "being", "isn't", "aren't",
    "wasn't", "weren't", "ain't", "it's", "that's", "he's", "she's", "what's",
    "they're", "we're", "you're", "i'm", "looks", "look", "looked", "seems",
    "seem", "seemed", "feels", "feel", "felt", "sounds", "sound", "sounded",
    "gets", "get", "got", "getting",
})

EMOJI: Dict[str, EmojiInfo] = {
    "😂": EmojiInfo(2.0, "face with tears of joy"),
    "🤣": EmojiInfo(2.0, "rolling on the floor laughing"),
    "😊": EmojiInfo(2.0, "smiling face"),
    "🙂": EmojiInfo(1.0, "slightly smiling face"),
    "😄": EmojiInfo(2.2, "grinning face"),
    "😁": EmojiInfo(2.0, "beaming face"),
    "😍": EmojiInfo(3.0, "heart eyes"),
    "🥰": EmojiInfo(3.0, "smiling face with hearts"),
    "❤️": EmojiInfo(3.0, "red heart"),
    "❤": EmojiInfo(3.0, "red heart"),
    "💖": EmojiInfo(2.8, "sparkling heart"),
    "🔥": EmojiInfo(2.0, "fire, something is great"),
    "💯": EmojiInfo(2.0, "hundred points, fully agree"),
    "👍": EmojiInfo(1.5, "thumbs up"),
    "👏": EmojiInfo(1.5, "clapping hands"),
    "🙌": EmojiInfo(1.8, "raising hands"),
    "🎉": EmojiInfo(2.0, "party popper"),
    "✨": EmojiInfo(1.0, "sparkles"),
    "😎": EmojiInfo(1.5, "smiling face with sunglasses"),
    "🙏": EmojiInfo(1.0, "folded hands"),
    "😅": EmojiInfo(0.5, "grinning face with sweat"),
    "💀": EmojiInfo(0.5, "skull, dying of laughter"),
    "😭": EmojiInfo(-0.5, "loudly crying face"),
    "😐": EmojiInfo(0.0, "neutral face"),
    "🤔": EmojiInfo(0.0, "thinking face"),
    "🗿": EmojiInfo(0.0, "moai, deadpan"),
    "👎": EmojiInfo(-1.5, "thumbs down"),
    "😢": EmojiInfo(-2.0, "crying face"),
    "😞": EmojiInfo(-2.0, "disappointed face"),
    "🙁": EmojiInfo(-1.5, "slightly frowning face"),
    "☹️": EmojiInfo(-1.8, "frowning face"),
    "😒": EmojiInfo(-1.5, "unamused face"),
    "🙄": EmojiInfo(-1.5, "face with rolling eyes"),
    "😠": EmojiInfo(-2.5, "angry face"),
    "😡": EmojiInfo(-3.0, "pouting face"),
    "🤬": EmojiInfo(-3.2, "face with symbols on mouth"),
    "🤮": EmojiInfo(-3.0, "face vomiting"),
    "🤢": EmojiInfo(-2.5, "nauseated face"),
    "💔": EmojiInfo(-2.5, "broken heart"),
    "🤡": EmojiInfo(-1.5, "clown face"),
    "❌": EmojiInfo(-1.0, "cross mark"),
    "✅": EmojiInfo(1.0, "check mark"),
}

# ------------------------ Rewrite ------------------------
SUBSTITUTIONS: Dict[str, Substitution] = {
    # slang
    "no cap": Substitution("honestly", "slang"),
    "mid": Substitution("mediocre", "slang"),
    "slay": Substitution("excel", "slang"),
    "slayed": Substitution("excelled", "slang"),
    "slaps": Substitution("is excellent", "slang"),
    "bussin": Substitution("delicious", "slang"),
    "lit": Substitution("exciting", "slang"),
    "goated": Substitution("outstanding", "slang"),
    "sus": Substitution("suspicious", "slang"),
    "salty": Substitution("bitter", "slang"),
    "cringe": Substitution("embarrassing", "slang"),
    "lowkey": Substitution("somewhat", "slang"),
    "highkey": Substitution("clearly", "slang"),
    "fr": Substitution("really", "slang"),
    "ngl": Substitution("honestly", "slang"),
    "tbh": Substitution("honestly", "slang"),
    "deadass": Substitution("seriously", "slang"),
    "rizz": Substitution("charm", "slang"),
    "yeet": Substitution("throw", "slang"),
    "glow up": Substitution("transformation", "slang"),
    "hits different": Substitution("feels special", "slang"),
    "vibes": Substitution("atmosphere", "slang"),
    "fam": Substitution("friends", "slang"),
    "dope": Substitution("great", "slang"),
    "touch grass": Substitution("take a break", "slang"),
    "big yikes": Substitution("very embarrassing", "slang"),
    "on god": Substitution("truly", "slang"),
    # harsh or toxic wording
    "stupid": Substitution("unwise", "harsh"),
    "dumb": Substitution("unwise", "harsh"),
    "idiot": Substitution("careless person", "harsh"),
    "idiots": Substitution("careless people", "harsh"),
    "sucks": Substitution("is disappointing", "harsh"),
    "sucked": Substitution("was disappointing", "harsh"),
    "trash": Substitution("poor quality", "harsh"),
    "garbage": Substitution("poor quality", "harsh"),
    "crap": Substitution("poor quality", "harsh"),
    "hate": Substitution("dislike", "harsh"),
    "hated": Substitution("disliked", "harsh"),
    "shut up": Substitution("please stop", "harsh"),
    "pissed": Substitution("upset", "harsh"),
    "damn": Substitution("", "harsh"),
    "freaking": Substitution("", "harsh"),
    # filler
    "lol": Substitution("", "filler"),
    "lmao": Substitution("", "filler"),
    "smh": Substitution("", "filler"),
    "omg": Substitution("", "filler"),
    "bruh": Substitution("", "filler"),
    "periodt": Substitution("", "filler"),
    "wtf": Substitution("", "filler"),
}

CONTRACTIONS: Dict[str, str] = {
    "don't": "do not", "doesn't": "does not", "didn't": "did not",
    "isn't": "is not", "aren't": "are not", "wasn't": "was not",
    "weren't": "were not", "can't": "cannot", "won't": "will not",
    "wouldn't": "would not", "shouldn't": "should not",
    "couldn't": "could not", "haven't": "have not", "hasn't": "has not",
    "hadn't": "had not", "ain't": "is not", "i'm": "I am", "i've": "I have",
    "i'll": "I will", "i'd": "I would", "you're": "you are",
    "you've": "you have", "you'll": "you will", "we're": "we are",
    "we've": "we have", "they're": "they are", "they've": "they have",
    "it's": "it is", "that's": "that is", "there's": "there is",
    "what's": "what is", "let's": "let us", "y'all": "you all",
    "gonna": "going to", "wanna": "want to", "gotta": "got to",
}


# ------------------------ Lexicons container ------------------------
@dataclass(frozen=True, eq=False)
class Lexicons:
    stopwords: FrozenSet[str]
    abbreviations: FrozenSet[str]
    closed_class: Mapping[str, Tuple[str, ...]]
    open_class: Mapping[str, Tuple[str, ...]]
    polarity: Mapping[str, float]
    negators: FrozenSet[str]
    intensifiers: Mapping[str, float]
    slang: Mapping[str, SlangTerm]
    emoji: Mapping[str, EmojiInfo]
    substitutions: Mapping[str, Substitution]
    contractions: Mapping[str, str]
    copulas: FrozenSet[str]
    phrase_contexts: Mapping[str, str]
    # WordNet overrides keyed by (word, coarse POS)
    dictionary_lemmas: Mapping[Tuple[str, str], str]


# ------------------------ Regular inflection ------------------------
_VOWELS = "aeiou"
_OES_NOUNS = frozenset({"potato", "tomato", "hero", "echo", "veto"})
_SHORT_CVC = re.compile(r"^[^aeiou]*[aeiou][^aeiouwxy]$")


def _double_final(word: str) -> bool:
    return bool(_SHORT_CVC.match(word))


def plural_of(noun: str) -> str:
    if noun.endswith(("s", "x", "z", "ch", "sh")) or noun in _OES_NOUNS:
        return noun + "es"
    if noun.endswith("y") and len(noun) > 1 and noun[-2] not in _VOWELS:
        return noun[:-1] + "ies"
    return noun + "s"


def verb_forms(verb: str) -> Tuple[str, str, str]:
    """(third person singular, past, present participle) of a regular verb."""
    third = plural_of(verb)
    if verb.endswith("e"):
        past = verb + "d"
        ing = verb[:-1] + "ing" if not verb.endswith("ee") else verb + "ing"
    elif verb.endswith("y") and verb[-2] not in _VOWELS:
        past = verb[:-1] + "ied"
        ing = verb + "ing"
    elif _double_final(verb):
        past = verb + verb[-1] + "ed"
        ing = verb + verb[-1] + "ing"
    else:
        past = verb + "ed"
        ing = verb + "ing"
    return third, past, ing


def comparative_forms(adj: str) -> Tuple[str, str]:
    if adj.endswith("e"):
        return adj + "r", adj + "st"
    if adj.endswith("y") and adj[-2] not in _VOWELS:
        return adj[:-1] + "ier", adj[:-1] + "iest"
    if _double_final(adj):
        return adj + adj[-1] + "er", adj + adj[-1] + "est"
    return adj + "er", adj + "est"


def _add_tag(table: Dict[str, List[str]], word: str, tag: str) -> None:
    tags = table.setdefault(word, [])
    if tag not in tags:
        tags.append(tag)


def build_vocabulary() -> Dict[str, Tuple[str, ...]]:
    """Expand the base word lists into open-class word -> candidate tags."""
    tags: Dict[str, List[str]] = {}

    for adj in INFLECTING_ADJECTIVES:
        _add_tag(tags, adj, "ADJ")
        if adj in ("good", "bad"):
            continue
        for form in comparative_forms(adj):
            _add_tag(tags, form, "ADJ")
    for adj in ADJECTIVES:
        _add_tag(tags, adj, "ADJ")
    for form in IRREGULAR_ADJECTIVES:
        _add_tag(tags, form, "ADJ")

    for verb, forms in IRREGULAR_VERB_FORMS.items():
        for form in (verb,) + forms:
            _add_tag(tags, form, "VERB")
    for verb in REGULAR_VERBS:
        _add_tag(tags, verb, "VERB")
        for form in verb_forms(verb):
            _add_tag(tags, form, "VERB")

    for noun in NOUNS:
        _add_tag(tags, noun, "NOUN")
        if noun not in IRREGULAR_PLURALS.values() and noun not in ("people", "staff", "news", "weather"):
            _add_tag(tags, plural_of(noun), "NOUN")
    for plural in IRREGULAR_PLURALS:
        _add_tag(tags, plural, "NOUN")

    for adv in ADVERBS:
        _add_tag(tags, adv, "ADV")

    return {w: tuple(t) for w, t in tags.items()}


# ------------------------ Overrides ------------------------
class _SlangModel(BaseModel):
    polarity: float
    meaning: str = ""
    context: Optional[str] = None


class _EmojiModel(BaseModel):
    polarity: float
    name: str


class _SubstitutionModel(BaseModel):
    replacement: str
    kind: str = "slang"


_OVERRIDE_SCHEMAS: Dict[str, TypeAdapter] = {
    "stopwords": TypeAdapter(List[str]),
    "polarity": TypeAdapter(Dict[str, float]),
    "slang": TypeAdapter(Dict[str, _SlangModel]),
    "emoji": TypeAdapter(Dict[str, _EmojiModel]),
    "substitutions": TypeAdapter(Dict[str, _SubstitutionModel]),
    "lemmas": TypeAdapter(List[Tuple[str, str, str]]),
}

PHRASE_CONTEXT_KINDS = frozenset({"predicative", "intransitive", "standalone"})


def _read_override(directory: Path, name: str) -> Optional[Any]:
    path = directory / f"{name}.json"
    if not path.exists():
        return None
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise LexiconLoadError(name, f"{path}: {e}") from e
    try:
        return _OVERRIDE_SCHEMAS[name].validate_python(raw)
    except ValidationError as e:
        raise LexiconLoadError(name, f"{path}: {e.error_count()} validation error(s)") from e


def _lower_keys(items: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    return {" ".join(k.lower().split()): v for k, v in items}


@lru_cache(maxsize=4)
def load_lexicons(lexicon_dir: Optional[str] = None, download: bool = True) -> Lexicons:
    """
    Build the process-wide lexicons. Cached by (lexicon_dir, download).

    Raises:
        LexiconLoadError: if the NLTK stopword corpus is missing, lexicon_dir
            is not a directory, or an override file is unreadable or has
            the wrong shape.
    """
    stopwords = set(english_stopwords(download))
    polarity = dict(POLARITY)
    slang = dict(SLANG)
    contexts = dict(PHRASE_CONTEXTS)
    emoji = dict(EMOJI)
    substitutions = dict(SUBSTITUTIONS)
    open_class = build_vocabulary()
    dictionary_lemmas: Dict[Tuple[str, str], str] = {}

    if lexicon_dir:
        directory = Path(lexicon_dir)
        if not directory.is_dir():
            raise LexiconLoadError("lexicon_dir", f"{directory} is not a directory")
        logger.info("Loading lexicon overrides: dir=%s", directory)

        data = _read_override(directory, "stopwords")
        if data is not None:
            stopwords = {w.lower() for w in data}
        data = _read_override(directory, "polarity")
        if data is not None:
            polarity.update(_lower_keys(data.items()))
        data = _read_override(directory, "slang")
        if data is not None:
            data = _lower_keys(data.items())
            slang.update({k: SlangTerm(v.polarity, v.meaning) for k, v in data.items()})
            for phrase, model in data.items():
                if model.context is None:
                    continue
                if model.context not in PHRASE_CONTEXT_KINDS:
                    raise LexiconLoadError("slang", f"{phrase!r}: unknown context {model.context!r}")
                contexts[phrase] = model.context
        data = _read_override(directory, "emoji")
        if data is not None:
            emoji.update({k: EmojiInfo(v.polarity, v.name) for k, v in data.items()})
        data = _read_override(directory, "substitutions")
        if data is not None:
            substitutions.update(
                _lower_keys((k, Substitution(v.replacement, v.kind)) for k, v in data.items())
            )
        data = _read_override(directory, "lemmas")
        if data is not None:
            for word, pos, lemma in data:
                dictionary_lemmas[(word.lower(), pos.lower())] = lemma

    if not stopwords:
        raise LexiconLoadError("stopwords", "stopword lexicon is empty")

    lexicons = Lexicons(
        stopwords=frozenset(stopwords),
        abbreviations=ABBREVIATIONS,
        closed_class=MappingProxyType(dict(CLOSED_CLASS)),
        open_class=MappingProxyType(open_class),
        polarity=MappingProxyType(polarity),
        negators=NEGATORS,
        intensifiers=MappingProxyType(dict(INTENSIFIERS)),
        slang=MappingProxyType(slang),
        emoji=MappingProxyType(emoji),
        substitutions=MappingProxyType(substitutions),
        contractions=MappingProxyType(dict(CONTRACTIONS)),
        copulas=COPULAS,
        phrase_contexts=MappingProxyType(contexts),
        dictionary_lemmas=MappingProxyType(dictionary_lemmas),
    )
    logger.info(
        "Lexicons ready: stopwords=%s polarity=%s slang=%s emoji=%s lemma_overrides=%s",
        len(lexicons.stopwords),
        len(lexicons.polarity),
        len(lexicons.slang),
        len(lexicons.emoji),
        len(lexicons.dictionary_lemmas),
    )
    return lexicons
