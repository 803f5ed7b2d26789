"""Tests for vegam.core.words – corpus loading and word list generation."""

from __future__ import annotations

from pathlib import Path

import pytest

from vegam.core.words import WORD_LIST_LENGTH, base_words, generate, load_corpus


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# load_corpus
# ---------------------------------------------------------------------------

class TestLoadCorpus:
    def test_packaged_corpus(self):
        words = base_words()
        assert len(words) == 82
        assert words[0] == "all"
        assert words[-1] == "under"

    def test_packaged_corpus_keeps_on_and_off_as_words(self):
        words = base_words()
        assert "on" in words
        assert "off" in words

    def test_all_lowercase_letters(self):
        assert all(w.isalpha() and w.islower() for w in base_words())

    def test_custom_file(self, tmp_path: Path):
        path = _write(tmp_path / "words.yaml", "words:\n  - alpha\n  - beta\n")
        assert load_corpus(path) == ("alpha", "beta")

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_corpus(tmp_path / "nope.yaml")

    def test_not_a_mapping(self, tmp_path: Path):
        path = _write(tmp_path / "words.yaml", "- alpha\n- beta\n")
        with pytest.raises(ValueError, match="expected YAML"):
            load_corpus(path)

    def test_missing_words_key(self, tmp_path: Path):
        path = _write(tmp_path / "words.yaml", "title: nothing\n")
        with pytest.raises(ValueError, match="'words'"):
            load_corpus(path)

    def test_empty_words(self, tmp_path: Path):
        path = _write(tmp_path / "words.yaml", "words: []\n")
        with pytest.raises(ValueError, match="empty"):
            load_corpus(path)

    def test_uppercase_word_rejected(self, tmp_path: Path):
        path = _write(tmp_path / "words.yaml", "words:\n  - Alpha\n")
        with pytest.raises(ValueError, match="lowercase"):
            load_corpus(path)

    def test_unquoted_yaml_boolean_rejected(self, tmp_path: Path):
        # YAML 1.1 reads a bare `on` as True.
        path = _write(tmp_path / "words.yaml", "words:\n  - on\n")
        with pytest.raises(ValueError, match="lowercase"):
            load_corpus(path)


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------

class TestGenerate:
    def test_same_seed_same_list(self):
        assert generate(7) == generate(7)

    def test_different_seed_different_list(self):
        assert generate(0) != generate(1)

    def test_default_length(self):
        assert len(generate(0)) == WORD_LIST_LENGTH == 180

    def test_returns_tuple(self):
        assert isinstance(generate(3), tuple)

    def test_is_permutation_of_corpus(self):
        words = generate(5)
        n = len(base_words())
        assert sorted(words[:n]) == sorted(base_words())

    def test_extends_by_cycling(self):
        words = generate(2)
        n = len(base_words())
        assert words[n:2 * n] == words[:n]

    def test_small_corpus_seed_zero(self):
        # Every swap target is i itself for N=3 and seed 0.
        assert generate(0, ["a", "b", "c"], length=3) == ("a", "b", "c")

    def test_small_corpus_seed_one(self):
        # i=0 -> j=1: b a c; i=1 -> j=2: b c a; i=2 -> j=0: a c b
        assert generate(1, ["a", "b", "c"], length=3) == ("a", "c", "b")

    def test_truncates(self):
        assert generate(0, ["a", "b", "c"], length=2) == ("a", "b")

    def test_cycles_small_corpus(self):
        assert generate(0, ["a", "b", "c"], length=5) == ("a", "b", "c", "a", "b")

    def test_empty_corpus(self):
        assert generate(4, []) == ()

    def test_does_not_mutate_input(self):
        corpus = ["a", "b", "c"]
        generate(1, corpus, length=3)
        assert corpus == ["a", "b", "c"]
