"""
Tests for the WordLookupApp facade and resolver factory.
"""
import pytest
from word_lookup import (
    ConfigurationError,
    DictionaryLoadError,
    NotFound,
    ResolverNotInitializedError,
    WordLookupApp,
    WordLookupConfig,
)
from word_lookup.resolution import IncorrectWord
from word_lookup.resolver_factory import create_dictionary_store, create_word_resolver


class TestWordLookupApp:
    """Tests for WordLookupApp."""

    def test_requires_initialize(self):
        """Test that using the app before initialize() raises."""
        app = WordLookupApp()
        
        with pytest.raises(ResolverNotInitializedError):
            app.lookup("cat")
        with pytest.raises(ResolverNotInitializedError):
            app.suggest("cat")

    def test_lookup_from_file(self, dictionary_file, make_prompter):
        """Test lookups against a dictionary file."""
        app = WordLookupApp(
            WordLookupConfig(dictionary_path=str(dictionary_file)),
            prompter=make_prompter("y"),
        )
        app.initialize()
        
        assert app.is_initialized
        assert app.lookup("Tree").definitions == ("a woody perennial plant",)
        assert app.lookup("helo").definitions == ("a greeting",)

    def test_suggest(self, dictionary_file):
        """Test suggest() through the app."""
        app = WordLookupApp(WordLookupConfig(dictionary_path=str(dictionary_file)))
        app.initialize()
        
        assert app.suggest("helo").failure == IncorrectWord("hello")
        assert app.suggest("zzzzz").failure == NotFound()

    def test_bundled_dictionary(self):
        """Test that the bundled dictionary loads by default."""
        app = WordLookupApp()
        app.initialize()
        
        assert app.lookup("python").is_resolved

    def test_initialize_is_idempotent(self, dictionary_file):
        """Test that a second initialize() does not reload data."""
        app = WordLookupApp(WordLookupConfig(dictionary_path=str(dictionary_file)))
        app.initialize()
        
        dictionary_file.unlink()
        app.initialize()
        
        assert app.lookup("cat").is_resolved

    def test_malformed_dictionary_fails_initialize(self, tmp_path):
        """Test that bad data fails initialize()."""
        path = tmp_path / "bad.json"
        path.write_text("[1, 2]", encoding="utf-8")
        app = WordLookupApp(WordLookupConfig(dictionary_path=str(path)))
        
        with pytest.raises(DictionaryLoadError):
            app.initialize()


class TestResolverFactory:
    """Tests for resolver_factory."""

    def test_store_uses_config_threshold(self, cat_words):
        """Test that the store takes its threshold from config."""
        store = create_dictionary_store(WordLookupConfig(fuzzy_threshold=0.6), words=cat_words)
        
        assert store.closest_candidate("kat") == "cat"

    def test_invalid_scorer_is_configuration_error(self, cat_words):
        """Test that an unknown scorer is a configuration error."""
        with pytest.raises(ConfigurationError, match="Unknown scorer"):
            create_dictionary_store(WordLookupConfig(fuzzy_scorer="nope"), words=cat_words)

    def test_resolver_with_prebuilt_store(self, sample_store, make_prompter):
        """Test that a prebuilt store is used as given."""
        resolver = create_word_resolver(store=sample_store, prompter=make_prompter("n"))
        
        assert resolver.store is sample_store
        assert resolver.resolve("helo").failure == NotFound()
