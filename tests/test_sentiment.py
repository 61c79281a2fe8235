import pytest

from writeclean.analysis_types import label_for_score
from writeclean.lexicons import load_lexicons
from writeclean.sentiment import SentimentAnalyzer
from writeclean.tagger import Tagger
from writeclean.tokenizer import tokenize

lexicons = load_lexicons()
tagger = Tagger(lexicons)
analyzer = SentimentAnalyzer(lexicons)


def run(text):
    stream = tokenize(text, lexicons.abbreviations)
    return analyzer.analyze(stream, tagger.tag(stream.tokens))


@pytest.mark.parametrize(
    "score,label",
    [(1.0, "Very Good"), (0.6, "Very Good"), (0.59, "Good"), (0.2, "Good"),
     (0.0, "Neutral"), (-0.2, "Bad"), (-0.59, "Bad"), (-0.6, "Very Bad"), (-1.0, "Very Bad")],
)
def test_label_thresholds(score, label):
    assert label_for_score(score) == label


def test_slang_example():
    result = run("That movie was totally mid, no cap.")
    assert result.slang_detected == ("mid", "no cap")
    assert result.score == pytest.approx(-0.4176, abs=1e-4)
    assert result.label == "Bad"


def test_positive_sentence_with_exclamation():
    result = run("I love this movie!")
    assert result.score == pytest.approx(0.6696, abs=1e-4)
    assert result.label == "Very Good"


def test_negation_flips_polarity():
    assert run("This movie is good.").score > 0
    negated = run("This movie is not good.")
    assert negated.score < 0
    assert negated.label == "Bad"


def test_intensifier_scales_polarity():
    assert run("It is very good.").score > run("It is good.").score
    assert run("It is slightly good.").score < run("It is good.").score


def test_exclamation_boosts_magnitude():
    assert run("This is great!!!").score > run("This is great.").score


def test_preposition_like_carries_no_polarity():
    result = run("It looks like rain.")
    assert result.score == 0.0
    assert result.label == "Neutral"


def test_emoji_sentiment_entries_are_deduplicated():
    result = run("Great job 🔥 and more 🔥")
    assert result.emoji_sentiment == ("🔥 fire, something is great: positive (+0.46)",)
    assert result.score > 0.6


def test_unknown_emoji_is_reported_as_neutral():
    result = run("ok 🦒")
    assert len(result.emoji_sentiment) == 1
    assert result.emoji_sentiment[0].startswith("🦒 giraffe: neutral")


def test_emotional_sentences():
    result = run("I hate this. The weather is okay.")
    assert result.emotional_sentences == ("I hate this.",)
    assert result.label == "Neutral"


def test_document_score_weights_later_sentences():
    assert analyzer.document_score([1.0]) == 1.0
    assert analyzer.document_score([]) == 0.0
    assert analyzer.document_score([0.0, 1.0]) == pytest.approx(0.6)
    assert analyzer.document_score([1.0, -1.0]) == pytest.approx(-0.2)


def test_single_word_has_defined_score():
    result = run("Hello")
    assert result.score == 0.0
    assert result.label == "Neutral"
    assert "No sentiment-bearing words" in result.explanation


def test_explanation_mentions_cues_and_slang():
    result = run("That movie was totally mid, no cap.")
    assert result.explanation.startswith("Overall tone is bad (score -0.42).")
    assert '"mid" (-2.08)' in result.explanation
    assert "Detected 2 slang terms." in result.explanation


def test_label_always_matches_score():
    for text in ["lol", "this slaps fr 🔥🔥", "worst day ever 😡", "meh.", "Not bad at all!"]:
        result = run(text)
        assert result.label == label_for_score(result.score)
        assert -1.0 <= result.score <= 1.0


def test_contributions_cover_slang_phrase_tokens():
    stream = tokenize("no cap")
    values = analyzer.contributions(stream, tagger.tag(stream.tokens))
    assert values == [pytest.approx(0.3), pytest.approx(0.3)]


@pytest.mark.parametrize(
    "text",
    ["He lit a candle.", "The room was lit by candles.", "She slaps the table.", "I bet you ten dollars."],
)
def test_slang_homographs_in_ordinary_use_are_not_slang(text):
    result = run(text)
    assert result.slang_detected == ()
    assert result.label == "Neutral"


@pytest.mark.parametrize(
    "text,slang",
    [
        ("The party was lit!", ("lit",)),
        ("This song slaps.", ("slaps",)),
        ("That's cap", ("cap",)),
        ("Bet. See you there", ("bet",)),
        ("The show was so dope", ("dope",)),
    ],
)
def test_slang_homographs_in_slang_use(text, slang):
    assert run(text).slang_detected == slang


def test_skin_tone_emoji_uses_base_entry():
    thumbs = chr(0x1F44D) + chr(0x1F3FD)
    result = run(f"ok {thumbs}")
    assert result.emoji_sentiment[0].startswith(f"{thumbs} thumbs up: positive")
