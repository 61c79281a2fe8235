from writeclean.lexicons import load_lexicons
from writeclean.tagger import TAGSET, Tagger
from writeclean.tokenizer import tokenize

lexicons = load_lexicons()
tagger = Tagger(lexicons)


def tag(text):
    return [(t.word, t.pos) for t in tagger.tag(tokenize(text, lexicons.abbreviations).tokens)]


def test_pangram_tags():
    assert [pos for _, pos in tag("The quick brown fox jumps over the lazy dog")] == [
        "DET", "ADJ", "ADJ", "NOUN", "VERB", "ADP", "DET", "ADJ", "NOUN",
    ]


def test_stopwords_are_case_insensitive():
    tagged = tagger.tag(tokenize("The cat and THE dog").tokens)
    flags = {t.word: t.is_stop for t in tagged}
    assert flags["The"] and flags["THE"] and flags["and"]
    assert not flags["cat"]


def test_punctuation_and_symbols():
    tags = dict(tag("Wow, 42 🔥!!!"))
    assert tags[","] == "PUNCT"
    assert tags["!!!"] == "PUNCT"
    assert tags["42"] == "X"
    assert tags["🔥"] == "X"


def test_punctuation_is_never_a_stopword():
    assert not any(t.is_stop for t in tagger.tag(tokenize("... , !").tokens))


def test_like_after_pronoun_is_verb():
    assert dict(tag("I like pizza"))["like"] == "VERB"


def test_like_defaults_to_preposition():
    assert dict(tag("It looks like rain"))["like"] == "ADP"


def test_that_as_determiner_and_conjunction():
    assert dict(tag("That movie was fine"))["That"] == "DET"
    assert dict(tag("I think that it works"))["that"] == "CONJ"


def test_interjection():
    assert tag("Hello") == [("Hello", "INTJ")]


def test_unknown_words_use_suffixes():
    tags = dict(tag("the modernize darkness quickly"))
    assert tags["modernize"] == "VERB"
    assert tags["darkness"] == "NOUN"
    assert tags["quickly"] == "ADV"


def test_unknown_word_defaults_to_noun():
    assert dict(tag("a zorp"))["zorp"] == "NOUN"


def test_every_tag_is_in_tagset():
    text = "Honestly, the new update is kinda mid but I'd still recommend it to friends 👍."
    assert all(pos in TAGSET for _, pos in tag(text))
