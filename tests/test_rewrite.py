import pytest

from writeclean.errors import EmptyInputError
from writeclean.lexicons import load_lexicons
from writeclean.rewrite import Rewriter

rewriter = Rewriter(load_lexicons())


def test_slang_is_replaced():
    result = rewriter.rewrite("That movie was totally mid, no cap.")
    assert result.improved == "That movie was totally mediocre, honestly."
    assert result.changes == (
        'Replaced slang "mid" with "mediocre"',
        'Replaced slang "no cap" with "honestly"',
    )


def test_original_is_untouched():
    text = "  lol   this is sooo good!!!  "
    assert rewriter.rewrite(text).original == text


def test_filler_and_normalization():
    result = rewriter.rewrite("lol this is sooo good!!!")
    assert result.improved == "This is soo good!"
    assert 'Removed filler "lol"' in result.changes
    assert "Shortened elongated words" in result.changes
    assert "Reduced repeated punctuation" in result.changes
    assert "Capitalized sentence starts" in result.changes


def test_harsh_terms_are_softened():
    result = rewriter.rewrite("This is stupid")
    assert result.improved == "This is unwise."
    assert result.changes == ('Softened harsh term "stupid" to "unwise"', "Added terminal punctuation")


def test_replacement_keeps_leading_capital():
    assert rewriter.rewrite("Mid movie.").improved == "Mediocre movie."


def test_professional_tone_drops_emoji():
    result = rewriter.rewrite("Great job 🔥")
    assert result.improved == "Great job."
    assert "Removed emoji 🔥" in result.changes


def test_friendly_tone_keeps_emoji():
    result = rewriter.rewrite("great job 🔥", tone="friendly")
    assert result.improved == "Great job 🔥"


def test_formal_tone_expands_contractions():
    result = rewriter.rewrite("I can't go, it's late", tone="formal")
    assert result.improved == "I cannot go, it is late."
    assert 'Expanded contraction "can\'t" to "cannot"' in result.changes


def test_standalone_i_is_capitalized():
    result = rewriter.rewrite("i think i.e. this works")
    assert result.improved == "I think i.e. this works."


def test_spacing_around_punctuation():
    assert rewriter.rewrite("wait , what ?").improved == "Wait, what?"


def test_urls_are_left_alone():
    result = rewriter.rewrite("check https://example.com/aaa?x=1,b now")
    assert result.improved == "Check https://example.com/aaa?x=1,b now."


def test_improved_is_never_empty():
    result = rewriter.rewrite("lol")
    assert result.improved == "lol"
    assert result.changes[-1].startswith("Kept the original wording")

    result = rewriter.rewrite("😂😂")
    assert result.improved == "😂😂"


def test_clean_text_has_no_changes():
    result = rewriter.rewrite("The service was excellent.")
    assert result.improved == "The service was excellent."
    assert result.changes == ()


def test_unknown_tone():
    with pytest.raises(ValueError):
        rewriter.rewrite("hello", tone="pirate")


def test_blank_text():
    with pytest.raises(EmptyInputError):
        rewriter.rewrite("  ")


def test_homographs_keep_their_ordinary_meaning():
    for text in ("He lit a candle.", "She slaps the table.", "The room was lit by candles."):
        result = rewriter.rewrite(text)
        assert result.improved == text
        assert result.changes == ()


def test_homographs_are_replaced_in_slang_use():
    assert rewriter.rewrite("The party was lit!").improved == "The party was exciting!"
    assert rewriter.rewrite("This song slaps.").improved == "This song is excellent."


def test_all_caps_and_roman_numerals_are_not_shortened():
    assert rewriter.rewrite("World War III ended.").improved == "World War III ended."
    assert rewriter.rewrite("Read part iii and part viii.").improved == "Read part iii and part viii."
    assert rewriter.rewrite("I ordered the XXXL size.").improved == "I ordered the XXXL size."
    assert rewriter.rewrite("Noooo way.").improved == "Noo way."


def test_control_characters_are_removed():
    result = rewriter.rewrite("a\x000\x00b")
    assert result.improved == "A0b."
    assert "Removed control characters" in result.changes


def test_url_survives_private_use_text():
    text = "see " + chr(0xE000) + "0" + chr(0xE000) + " at https://example.com"
    assert rewriter.rewrite(text).improved.endswith("https://example.com.")


def test_several_emoji_are_counted():
    result = rewriter.rewrite("Nice 🔥 work 🎉")
    assert result.improved == "Nice work."
    assert "Removed 2 emoji" in result.changes
