import logging

import pytest

from autosuggest import constants
from autosuggest.dictionary import Dictionary


@pytest.fixture
def dictionary():
    d = Dictionary()
    d.insert("Dog")
    d.insert("Dogecoin")
    return d


def test_new_dictionary_is_empty():
    d = Dictionary()
    assert len(d) == 0
    assert d.find_words_based_on_prefix("") is None
    assert d.auto_suggest_alternative_words("Dog") is None


def test_full_words_based_on_prefix(dictionary):
    assert dictionary.find_words_based_on_prefix("Dog") == {"Dog", "Dogecoin"}
    assert dictionary.find_words_based_on_prefix("Dogecoins") is None


def test_auto_correct_if_word_isnt_available(dictionary):
    assert dictionary.auto_suggest_alternative_words("Dogecoins") == {"Dogecoin"}
    assert dictionary.auto_suggest_alternative_words("Do") == {"Dog", "Dogecoin"}


def test_no_alternatives_without_matching_words(dictionary):
    assert dictionary.auto_suggest_alternative_words("Cat") is None
    assert dictionary.auto_suggest_alternative_words("") is None


def test_seed_words():
    d = Dictionary(["Dog", "Dogecoin", "Dog"])
    assert len(d) == 2
    assert "Dog" in d
    assert "Doge" not in d


def test_load_word_list(tmp_path, caplog):
    path = tmp_path / "words.txt"
    path.write_text("# coins\nDog\n\n  Dogecoin  \nDog\nBitcoin\n", encoding="utf-8")

    d = Dictionary(["Dog"])
    with caplog.at_level(logging.INFO, logger=constants.LOGGER_NAME):
        added = d.load(str(path))

    assert added == 2
    assert len(d) == 3
    assert "# coins" not in d
    assert d.find_words_based_on_prefix("") == {"Dog", "Dogecoin", "Bitcoin"}
    assert "Loaded 2 words" in caplog.text


def test_from_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Café\ncafé\n", encoding="utf-8")
    d = Dictionary.from_file(str(path))
    assert d.find_words_based_on_prefix("Caf") == {"Café"}
    assert d.find_words_based_on_prefix("caf") == {"café"}


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Dictionary().load(str(tmp_path / "missing.txt"))


def test_load_default_prefers_explicit_path(tmp_path, monkeypatch):
    explicit = tmp_path / "mine.txt"
    explicit.write_text("Dog\n", encoding="utf-8")
    fallback = tmp_path / "other.txt"
    fallback.write_text("Cat\n", encoding="utf-8")
    monkeypatch.setattr("autosuggest.dictionary.WORD_LIST_PATHS", [str(fallback)])

    d = Dictionary()
    assert d.load_default(str(explicit)) == 1
    assert "Dog" in d
    assert "Cat" not in d


def test_load_default_searches_paths(tmp_path, monkeypatch):
    fallback = tmp_path / "other.txt"
    fallback.write_text("Cat\n", encoding="utf-8")
    monkeypatch.setattr(
        "autosuggest.dictionary.WORD_LIST_PATHS",
        [str(tmp_path / "missing.txt"), str(fallback)],
    )

    d = Dictionary()
    d.load_default(str(tmp_path / "also-missing.txt"))
    assert "Cat" in d


def test_load_default_falls_back_to_sample_words(tmp_path, monkeypatch, caplog):
    monkeypatch.setattr("autosuggest.dictionary.WORD_LIST_PATHS", [str(tmp_path / "missing.txt")])

    d = Dictionary()
    with caplog.at_level(logging.WARNING, logger=constants.LOGGER_NAME):
        added = d.load_default()

    assert added == len(set(constants.SAMPLE_WORDS))
    assert d.auto_suggest_alternative_words("Dogecoins") == {"Dogecoin"}
    assert "sample vocabulary" in caplog.text


def test_hash_words_are_not_comments(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("#\n# note\n#\tnote\n#hashtag\n#1\n", encoding="utf-8")

    d = Dictionary.from_file(str(path))
    assert d.find_words_based_on_prefix("#") == {"#hashtag", "#1"}
    assert "# note" not in d


def test_load_default_skips_empty_word_list(tmp_path, monkeypatch, caplog):
    empty = tmp_path / "dictionary.txt"
    empty.write_text("", encoding="utf-8")
    words = tmp_path / "words.txt"
    words.write_text("Cat\n", encoding="utf-8")
    monkeypatch.setattr("autosuggest.dictionary.WORD_LIST_PATHS", [str(empty), str(words)])

    d = Dictionary()
    with caplog.at_level(logging.WARNING, logger=constants.LOGGER_NAME):
        assert d.load_default() == 1

    assert "Cat" in d
    assert "No new words in" in caplog.text


def test_load_default_empty_lists_fall_back_to_sample_words(tmp_path, monkeypatch):
    empty = tmp_path / "dictionary.txt"
    empty.write_text("# nothing here\n", encoding="utf-8")
    monkeypatch.setattr("autosuggest.dictionary.WORD_LIST_PATHS", [str(empty)])

    d = Dictionary()
    d.load_default()
    assert len(d) == len(set(constants.SAMPLE_WORDS))
