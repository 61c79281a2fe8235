import dataclasses

import pytest

from writeclean import analyze
from writeclean.analysis_types import label_for_score
from writeclean.engine import EngineConfig, TextAnalyzer
from writeclean.errors import AnalysisError, EmptyInputError
from writeclean.explain import TokenAttributor
from writeclean.settings import Settings

analyzer = TextAnalyzer()

SAMPLES = [
    "That movie was totally mid, no cap.",
    "The quick brown fox jumps over the lazy dog",
    "Hello",
    "OMG this pizza is bussin fr 🔥🔥 but the service was sooo slow...",
    "I don't hate it. It's fine, I guess!!",
    "Mr. Smith's generalizations weren't helpful; e.g. the examples were wrong.",
]


@pytest.mark.parametrize("text", SAMPLES)
def test_result_invariants(text):
    result = analyzer.analyze(text)
    assert len(result.tokens) >= 1
    assert result.improvement.original == text
    assert result.raw_text == text
    assert result.improvement.improved
    assert result.sentiment.label == label_for_score(result.sentiment.score)
    for tok in result.tokens:
        assert len(tok.stem_snowball) >= len(tok.stem_porter)


@pytest.mark.parametrize("text", SAMPLES)
def test_analyze_is_idempotent(text):
    assert analyzer.analyze(text) == analyzer.analyze(text)


def test_slang_example():
    result = analyzer.analyze("That movie was totally mid, no cap.")
    assert "mid" in result.sentiment.slang_detected
    assert "no cap" in result.sentiment.slang_detected
    assert result.sentiment.label in ("Neutral", "Bad")
    mid = next(t for t in result.tokens if t.word == "mid")
    assert mid.is_stop_word is False


def test_pangram_example():
    result = analyzer.analyze("The quick brown fox jumps over the lazy dog")
    assert len(result.tokens) == 9
    assert all(t.is_stop_word for t in result.tokens if t.word.lower() == "the")
    fox = next(t for t in result.tokens if t.word == "fox")
    assert fox.pos_tag == "NOUN"
    jumps = next(t for t in result.tokens if t.word == "jumps")
    assert (jumps.stem_porter, jumps.lemma_wordnet, jumps.lemma_spacy) == ("jump", "jump", "jump")


def test_single_word_example():
    result = analyzer.analyze("Hello")
    assert len(result.tokens) == 1
    assert result.tokens[0].pos_tag == "INTJ"
    assert result.sentiment.score == 0.0
    assert result.sentiment.label == "Neutral"
    assert result.improvement.improved == "Hello."


@pytest.mark.parametrize("text", ["", "   ", "\n"])
def test_blank_input(text):
    with pytest.raises(EmptyInputError):
        analyzer.analyze(text)
    with pytest.raises(EmptyInputError):
        analyze(text)


def test_module_level_analyze():
    result = analyze("Hello")
    assert result == analyzer.analyze("Hello")


def test_verify_rejects_inconsistent_label():
    good = analyzer.analyze("I love this!")
    broken = dataclasses.replace(good, sentiment=dataclasses.replace(good.sentiment, label="Very Bad"))
    with pytest.raises(AnalysisError) as exc:
        TextAnalyzer._verify(broken, "I love this!")
    assert "does not match" in exc.value.detail


def test_verify_rejects_changed_original():
    good = analyzer.analyze("Hello")
    broken = dataclasses.replace(good, improvement=dataclasses.replace(good.improvement, original="Hi"))
    with pytest.raises(AnalysisError):
        TextAnalyzer._verify(broken, "Hello")


def test_tone_override():
    assert analyzer.analyze("great job 🔥", tone="friendly").improvement.improved == "Great job 🔥"
    assert analyzer.analyze("great job 🔥").improvement.improved == "Great job."


def test_config_from_settings():
    config = EngineConfig.from_settings(Settings(RECENCY_WEIGHT=1.0, DEFAULT_TONE="formal"))
    assert config.recency_weight == 1.0
    assert TextAnalyzer(config=config).analyze("it's ok").improvement.improved == "It is ok."


def test_unknown_default_tone():
    with pytest.raises(ValueError):
        TextAnalyzer(config=EngineConfig(default_tone="pirate"))


def test_token_attribution():
    attributor = TokenAttributor(analyzer)
    pairs = dict(attributor.attribute("The food was great but the service was bad."))
    assert pairs["great"] == 1.0
    assert 0 < pairs["bad"] < 1.0
    assert pairs["food"] == 0.0
    assert attributor.attribute("Hello") == [("Hello", 0.0)]


def test_control_characters_in_input():
    result = analyzer.analyze("a\x000\x00b")
    assert result.raw_text == "a\x000\x00b"
    assert "\x00" not in result.improvement.improved


def test_abbreviation_before_exclamation_ends_sentence():
    result = analyzer.analyze("We bought fruit etc.! Then we left.")
    assert [t.word for t in result.tokens][3:5] == ["etc.", "!"]
