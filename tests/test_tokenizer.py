import pytest

from writeclean.errors import EmptyInputError
from writeclean.lexicons import load_lexicons
from writeclean.tokenizer import tokenize

ABBREVIATIONS = load_lexicons().abbreviations


def words(text):
    return [t.text for t in tokenize(text, ABBREVIATIONS).tokens]


def test_punctuation_splits_from_words():
    assert words("Well, that was fun.") == ["Well", ",", "that", "was", "fun", "."]


def test_contractions_and_hyphenated_words_stay_whole():
    assert words("Don't say it's state-of-the-art") == ["Don't", "say", "it's", "state-of-the-art"]


def test_abbreviations_keep_their_period():
    stream = tokenize("Mr. Smith met Dr. Jones, e.g. at 5 p.m. today.", ABBREVIATIONS)
    texts = [t.text for t in stream.tokens]
    assert "Mr." in texts and "Dr." in texts and "e.g." in texts and "p.m." in texts
    assert len(stream.sentences) == 1


def test_sentence_boundaries():
    stream = tokenize("I came.  I saw!! Did I win?", ABBREVIATIONS)
    assert [s.text for s in stream.sentences] == ["I came.", "I saw!!", "Did I win?"]


def test_terminal_run_is_one_token():
    assert words("Really?!") == ["Really", "?!"]
    assert words("Wait...") == ["Wait", "..."]


def test_closing_quote_stays_with_sentence():
    stream = tokenize('He said "wow!" and left.', ABBREVIATIONS)
    assert [s.text for s in stream.sentences] == ['He said "wow!"', "and left."]


def test_trailing_text_is_last_sentence():
    stream = tokenize("First one. second one without a period", ABBREVIATIONS)
    assert len(stream.sentences) == 2
    assert stream.sentences[-1].text == "second one without a period"


def test_emoji_are_separate_tokens():
    stream = tokenize("great job🔥🔥", ABBREVIATIONS)
    assert [t.text for t in stream.tokens] == ["great", "job", "🔥", "🔥"]
    assert [t.kind for t in stream.tokens][-2:] == ["emoji", "emoji"]


def test_offsets_point_into_original_text():
    text = "  Hello,   world!  "
    for tok in tokenize(text).tokens:
        assert text[tok.start:tok.end] == tok.text


def test_single_word_is_one_sentence():
    stream = tokenize("Hello")
    assert len(stream.tokens) == 1
    assert len(stream.sentences) == 1


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_blank_input_raises(text):
    with pytest.raises(EmptyInputError):
        tokenize(text)


def test_punctuation_after_abbreviation_is_kept():
    stream = tokenize("We bought fruit etc.! Then we left.", ABBREVIATIONS)
    assert [t.text for t in stream.tokens] == [
        "We", "bought", "fruit", "etc.", "!", "Then", "we", "left", ".",
    ]
    assert [s.text for s in stream.sentences] == ["We bought fruit etc.!", "Then we left."]


def test_ellipsis_after_abbreviation_is_kept():
    stream = tokenize("apples, pears, etc...", ABBREVIATIONS)
    assert [t.text for t in stream.tokens][-2:] == ["etc.", ".."]
    assert "".join(t.text for t in stream.tokens) == "apples,pears,etc..."


def test_emoji_sequences_are_single_tokens():
    family = chr(0x1F468) + chr(0x200D) + chr(0x1F469) + chr(0x200D) + chr(0x1F467)
    thumbs = chr(0x1F44D) + chr(0x1F3FD)
    stream = tokenize(f"nice {thumbs}{family} ok", ABBREVIATIONS)
    assert [t.text for t in stream.tokens] == ["nice", thumbs, family, "ok"]
    assert [t.kind for t in stream.tokens] == ["word", "emoji", "emoji", "word"]


def test_control_characters_do_not_break_offsets():
    text = "a\x000\x00b"
    for tok in tokenize(text).tokens:
        assert text[tok.start:tok.end] == tok.text
