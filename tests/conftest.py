import json
from unittest.mock import Mock

import pytest

from word_lookup.dictionary import DictionaryStore
from word_lookup.interaction import ConfirmationPrompter
from word_lookup.resolution import FuzzyWordMatcher, WordResolver


@pytest.fixture
def cat_words():
    return {"cat": ["a feline"]}


@pytest.fixture
def sample_words():
    return {
        "cat": ["a feline", "a wild animal of the cat family"],
        "hello": ["a greeting"],
        "kitten": ["a young cat"],
        "tree": ["a woody perennial plant"],
    }


@pytest.fixture
def sample_store(sample_words):
    return DictionaryStore(sample_words)


@pytest.fixture
def make_prompter():
    """Build a ConfirmationPrompter fed from a list of scripted answers."""
    def _make(*answers):
        reader = Mock(side_effect=list(answers))
        writer = Mock()
        return ConfirmationPrompter(reader=reader, writer=writer)
    return _make


@pytest.fixture
def make_resolver(make_prompter):
    """Build a WordResolver over `words` with scripted confirmation answers."""
    def _make(words, *answers, threshold=0.8):
        store = DictionaryStore(words, fuzzy_matcher=FuzzyWordMatcher(threshold=threshold))
        prompter = make_prompter(*answers)
        return WordResolver(store, prompter=prompter), prompter
    return _make


@pytest.fixture
def dictionary_file(tmp_path, sample_words):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(sample_words), encoding="utf-8")
    return path
