import json

import pytest

from writeclean.engine import TextAnalyzer
from writeclean.errors import LexiconLoadError
from writeclean.lexicons import load_lexicons, plural_of, verb_forms


def write(directory, name, data):
    (directory / f"{name}.json").write_text(json.dumps(data), encoding="utf-8")


def test_builtin_lexicons():
    lex = load_lexicons()
    assert "the" in lex.stopwords
    assert "mid" not in lex.stopwords
    assert lex.slang["no cap"].polarity > 0
    assert lex.phrase_contexts["lit"] == "predicative"
    assert "was" in lex.copulas


def test_lexicons_are_read_only():
    lex = load_lexicons()
    with pytest.raises(TypeError):
        lex.polarity["great"] = 0.0


def test_load_is_cached():
    assert load_lexicons() is load_lexicons()


def test_inflection_helpers():
    assert plural_of("box") == "boxes"
    assert plural_of("city") == "cities"
    assert plural_of("photo") == "photos"
    assert verb_forms("stop") == ("stops", "stopped", "stopping")
    assert verb_forms("love") == ("loves", "loved", "loving")
    assert verb_forms("cry") == ("cries", "cried", "crying")


def test_overrides_extend_builtin_tables(tmp_path):
    write(tmp_path, "slang", {"Skibidi": {"polarity": -1.0, "meaning": "nonsense"}})
    write(tmp_path, "polarity", {"splendid": 2.5})
    write(tmp_path, "emoji", {"🦒": {"polarity": 1.0, "name": "giraffe"}})
    write(tmp_path, "substitutions", {"skibidi": {"replacement": "odd", "kind": "slang"}})
    write(tmp_path, "lemmas", [["gonna", "v", "go"]])
    lex = load_lexicons(str(tmp_path))
    assert lex.slang["skibidi"].polarity == -1.0
    assert "mid" in lex.slang
    assert lex.polarity["splendid"] == 2.5
    assert lex.emoji["🦒"].name == "giraffe"
    assert lex.dictionary_lemmas[("gonna", "v")] == "go"

    result = TextAnalyzer(lex).analyze("That was skibidi")
    assert result.sentiment.slang_detected == ("skibidi",)
    assert result.improvement.improved == "That was odd."


def test_stopword_override_replaces(tmp_path):
    write(tmp_path, "stopwords", ["Foo", "bar"])
    assert load_lexicons(str(tmp_path)).stopwords == frozenset({"foo", "bar"})


def test_empty_stopwords_fail(tmp_path):
    write(tmp_path, "stopwords", [])
    with pytest.raises(LexiconLoadError) as exc:
        load_lexicons(str(tmp_path))
    assert exc.value.name == "stopwords"


def test_malformed_json_fails(tmp_path):
    (tmp_path / "polarity.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(LexiconLoadError) as exc:
        load_lexicons(str(tmp_path))
    assert exc.value.name == "polarity"


def test_wrong_shape_fails(tmp_path):
    write(tmp_path, "slang", {"mid": "bad"})
    with pytest.raises(LexiconLoadError) as exc:
        load_lexicons(str(tmp_path))
    assert exc.value.name == "slang"


def test_missing_directory_fails(tmp_path):
    with pytest.raises(LexiconLoadError):
        load_lexicons(str(tmp_path / "nope"))


def test_stopwords_come_from_nltk_corpus():
    from nltk.corpus import stopwords

    assert load_lexicons().stopwords == frozenset(stopwords.words("english"))


def test_slang_override_with_context(tmp_path):
    write(tmp_path, "slang", {"fire": {"polarity": 2.0, "meaning": "great", "context": "predicative"}})
    lex = load_lexicons(str(tmp_path))
    assert lex.phrase_contexts["fire"] == "predicative"

    analyzer = TextAnalyzer(lex)
    assert analyzer.sentiment("This track is fire!").slang_detected == ("fire",)
    assert analyzer.sentiment("The fire spread to the barn.").slang_detected == ()


def test_unknown_slang_context_fails(tmp_path):
    write(tmp_path, "slang", {"fire": {"polarity": 2.0, "context": "sometimes"}})
    with pytest.raises(LexiconLoadError) as exc:
        load_lexicons(str(tmp_path))
    assert exc.value.name == "slang"
