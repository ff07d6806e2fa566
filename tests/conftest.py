"""Shared fixtures for the subwords tests."""

import pytest

from subwords.solver.config import config as solver_config
from subwords.wordlist import DictionaryIndex, build_dictionary

SAMPLE_WORDS = ["cat", "act", "tac", "at", "a"]


@pytest.fixture
def sample_index() -> DictionaryIndex:
    """The index of a small dictionary of anagrams of 'cat' and its sub-words."""
    return build_dictionary(SAMPLE_WORDS)


@pytest.fixture
def words_file(tmp_path):
    """A word list file with several tokens per line and mixed case."""
    path = tmp_path / "words.txt"
    path.write_text("cat ACT\ntac\n\n  at a\ndog\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Run every test against the default solver settings."""
    monkeypatch.setattr(solver_config, "max_letters", 64)
    monkeypatch.setattr(solver_config, "presentation", "buckets")
    monkeypatch.setattr(solver_config, "deterministic", True)
    monkeypatch.setattr(solver_config, "max_workers", 1)
    monkeypatch.setattr(solver_config, "min_word_length", 1)
    monkeypatch.setattr(solver_config, "max_word_length", None)
    monkeypatch.setattr(solver_config, "log_path", None)
