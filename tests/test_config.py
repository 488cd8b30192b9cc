"""
Tests for environment-based configuration.
"""
import pytest
from word_lookup.config import WordLookupConfig
from word_lookup.config_loader import load_config_from_env
from word_lookup.exceptions import ConfigurationError

ENV_KEYS = [
    "WORD_LOOKUP_DICTIONARY_PATH",
    "WORD_LOOKUP_FUZZY_THRESHOLD",
    "WORD_LOOKUP_FUZZY_SCORER",
    "WORD_LOOKUP_EXIT_COMMANDS",
    "WORD_LOOKUP_LOG_LEVEL",
    "WORD_LOOKUP_VERBOSE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env."""

    def test_defaults(self):
        """Test that an empty environment yields the default config."""
        config = load_config_from_env(use_dotenv=False)
        
        assert config == WordLookupConfig()
        assert config.fuzzy_threshold == 0.8
        assert config.exit_commands == ("exit",)
        assert config.dictionary_path is None

    def test_reads_environment(self, monkeypatch, dictionary_file):
        """Test that every WORD_LOOKUP_* variable is applied."""
        monkeypatch.setenv("WORD_LOOKUP_DICTIONARY_PATH", str(dictionary_file))
        monkeypatch.setenv("WORD_LOOKUP_FUZZY_THRESHOLD", "0.65")
        monkeypatch.setenv("WORD_LOOKUP_FUZZY_SCORER", "token_sort_ratio")
        monkeypatch.setenv("WORD_LOOKUP_EXIT_COMMANDS", "exit, quit ,")
        monkeypatch.setenv("WORD_LOOKUP_LOG_LEVEL", "info")
        monkeypatch.setenv("WORD_LOOKUP_VERBOSE", "true")
        
        config = load_config_from_env(use_dotenv=False)
        
        assert config.dictionary_path == str(dictionary_file)
        assert config.fuzzy_threshold == 0.65
        assert config.fuzzy_scorer == "token_sort_ratio"
        assert config.exit_commands == ("exit", "quit")
        assert config.log_level == "INFO"
        assert config.verbose is True

    def test_missing_dictionary_path(self, monkeypatch, tmp_path):
        """Test that a missing dictionary file is a configuration error."""
        monkeypatch.setenv("WORD_LOOKUP_DICTIONARY_PATH", str(tmp_path / "nope.json"))
        
        with pytest.raises(ConfigurationError, match="does not exist"):
            load_config_from_env(use_dotenv=False)

    @pytest.mark.parametrize("value", ["high", "1.5", "-0.1"])
    def test_invalid_threshold(self, monkeypatch, value):
        """Test that a bad threshold is a configuration error."""
        monkeypatch.setenv("WORD_LOOKUP_FUZZY_THRESHOLD", value)
        
        with pytest.raises(ConfigurationError, match="WORD_LOOKUP_FUZZY_THRESHOLD"):
            load_config_from_env(use_dotenv=False)

    def test_placeholder_is_ignored(self, monkeypatch):
        """Test that placeholder values warn and fall back to defaults."""
        monkeypatch.setenv("WORD_LOOKUP_DICTIONARY_PATH", "your_dictionary.json")
        
        with pytest.warns(UserWarning, match="placeholder"):
            config = load_config_from_env(use_dotenv=False)
        
        assert config.dictionary_path is None

    def test_dotenv_file(self, monkeypatch, tmp_path):
        """Test that a .env file in the working directory is read."""
        # lets monkeypatch remove the value load_dotenv sets
        monkeypatch.setenv("WORD_LOOKUP_FUZZY_THRESHOLD", "0.5")
        monkeypatch.delenv("WORD_LOOKUP_FUZZY_THRESHOLD")
        (tmp_path / ".env").write_text("WORD_LOOKUP_FUZZY_THRESHOLD=0.7\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        
        config = load_config_from_env()
        
        assert config.fuzzy_threshold == 0.7
