# tests/test_vocabulary.py
"""Tests for the vocabulary index."""

import threading
import time

import pytest

from triword import vocabulary as vocabulary_module
from triword.vocabulary import Vocabulary, VocabularyError, WordListTooShortError


class TestPackagedVocabulary:
    def test_has_4096_words_in_both_directions(self, vocabulary):
        assert len(vocabulary) == 4096
        assert len(vocabulary.words) == 4096
        assert len(vocabulary.indices) == 4096

    def test_known_positions(self, vocabulary):
        assert vocabulary.word_at(0) == "abacus"
        assert vocabulary.word_at(12) == "abridge"
        assert vocabulary.word_at(45) == "activator"
        assert vocabulary.word_at(68) == "affluent"
        assert vocabulary.word_at(255) == "apostle"
        assert vocabulary.word_at(4095) == "movable"

    def test_reverse_is_inverse_of_forward(self, vocabulary):
        for index, word in enumerate(vocabulary.words):
            assert vocabulary.index_of(word) == index

    def test_words_are_usable_in_triples(self, vocabulary):
        for word in vocabulary.words:
            assert word
            assert "-" not in word
            assert word == word.strip()

    def test_lines_beyond_4096_are_ignored(self, vocabulary):
        # "move" directly follows "movable" in the shipped word list.
        assert vocabulary.index_of("move") is None
        assert "move" not in vocabulary

    def test_unknown_word(self, vocabulary):
        assert vocabulary.index_of("xyz") is None
        assert vocabulary.index_of("") is None

    def test_lookup_is_case_sensitive(self, vocabulary):
        assert vocabulary.index_of("abacus") == 0
        assert vocabulary.index_of("Abacus") is None
        assert vocabulary.index_of(" abacus") is None

    @pytest.mark.parametrize("index", [-1, 4096, 10**6])
    def test_word_at_out_of_range(self, vocabulary, index):
        with pytest.raises(IndexError):
            vocabulary.word_at(index)

    def test_indices_are_read_only(self, vocabulary):
        with pytest.raises(TypeError):
            vocabulary.indices["new"] = 1


class TestConstruction:
    def test_from_sequence(self, synthetic_words):
        vocabulary = Vocabulary(synthetic_words)
        assert vocabulary.word_at(17) == "word0017"
        assert vocabulary.index_of("word4095") == 4095

    def test_extra_words_are_discarded(self, synthetic_words):
        vocabulary = Vocabulary(synthetic_words + ["extra", "words"])
        assert len(vocabulary) == 4096
        assert vocabulary.index_of("extra") is None

    def test_too_short_fails_fast(self, synthetic_words):
        with pytest.raises(WordListTooShortError) as exc_info:
            Vocabulary(synthetic_words[:4095])
        assert exc_info.value.length == 4095
        assert isinstance(exc_info.value, VocabularyError)

    def test_empty_word_list(self):
        with pytest.raises(VocabularyError):
            Vocabulary.from_text("")

    def test_duplicates_last_index_wins(self, synthetic_words):
        synthetic_words[5] = "word0000"
        vocabulary = Vocabulary(synthetic_words)
        assert vocabulary.word_at(0) == "word0000"
        assert vocabulary.word_at(5) == "word0000"
        assert vocabulary.index_of("word0000") == 5
        assert len(vocabulary.words) == 4096
        assert len(vocabulary.indices) == 4095

    def test_from_text(self, synthetic_words):
        vocabulary = Vocabulary.from_text("\n".join(synthetic_words) + "\n")
        assert len(vocabulary) == 4096
        assert vocabulary.word_at(4095) == "word4095"

    def test_from_text_with_windows_line_endings(self, synthetic_words):
        vocabulary = Vocabulary.from_text("\r\n".join(synthetic_words))
        assert vocabulary.index_of("word0001") == 1


class TestDefaultVocabulary:
    def test_is_shared(self):
        assert vocabulary_module.get_default() is vocabulary_module.get_default()

    def test_built_once_under_concurrent_first_use(self, monkeypatch, synthetic_words):
        calls = []

        def slow_load():
            calls.append(threading.get_ident())
            time.sleep(0.05)
            return Vocabulary(synthetic_words)

        monkeypatch.setattr(vocabulary_module, "_default", None)
        monkeypatch.setattr(vocabulary_module, "load", slow_load)

        barrier = threading.Barrier(8)
        results = []

        def first_use():
            barrier.wait()
            results.append(vocabulary_module.get_default())

        threads = [threading.Thread(target=first_use) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert len(results) == 8
        assert all(r is results[0] for r in results)
        assert results[0].word_at(1) == "word0001"
