import json

import pytest
from word_lookup.data_loader import DictionaryDataLoader
from word_lookup.exceptions import DictionaryLoadError


@pytest.fixture
def write_json(tmp_path):
    def _write(payload, name="words.json"):
        path = tmp_path / name
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path
    return _write


def test_load_returns_normalized_tuples(write_json):
    path = write_json({" Cat ": ["a feline", "a wild cat"], "tree": ["a plant"]})
    
    words = DictionaryDataLoader(str(path)).load()
    
    assert words == {"cat": ("a feline", "a wild cat"), "tree": ("a plant",)}


def test_colliding_keys_are_merged(write_json):
    path = write_json({"Cat": ["first"], "cat": ["second"]})
    
    assert DictionaryDataLoader(str(path)).load() == {"cat": ("first", "second")}


def test_empty_definitions_allowed(write_json):
    path = write_json({"cat": []})
    
    assert DictionaryDataLoader(str(path)).load() == {"cat": ()}


def test_missing_file(tmp_path):
    with pytest.raises(DictionaryLoadError, match="Cannot read"):
        DictionaryDataLoader(str(tmp_path / "missing.json")).load()


@pytest.mark.parametrize(
    "payload, message",
    [
        ("{not json", "Invalid JSON"),
        (["cat"], "JSON object"),
        ({"cat": "a feline"}, "must be a list"),
        ({"cat": ["a feline", 3]}, "must be strings"),
        ({"  ": ["blank"]}, "empty word"),
    ],
)
def test_malformed_data(write_json, payload, message):
    path = write_json(payload)
    
    with pytest.raises(DictionaryLoadError, match=message):
        DictionaryDataLoader(str(path)).load()


def test_bundled_dictionary():
    words = DictionaryDataLoader().load()
    
    assert "hello" in words
    assert all(key == key.strip().lower() for key in words)
    assert all(isinstance(definitions, tuple) for definitions in words.values())
