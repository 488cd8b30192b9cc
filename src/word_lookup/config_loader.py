"""
Configuration loader with validation.

Builds WordLookupConfig from environment variables (and a local .env file).
"""
from dotenv import find_dotenv, load_dotenv
from .config import WordLookupConfig
from .config_validator import get_optional_env, parse_bool, parse_float, validate_path

ENV_PREFIX = "WORD_LOOKUP_"


def load_config_from_env(use_dotenv: bool = True) -> WordLookupConfig:
    """
    Load configuration from environment variables with validation.
    
    Recognized variables (all optional):
    - WORD_LOOKUP_DICTIONARY_PATH: JSON dictionary file (bundled data if unset)
    - WORD_LOOKUP_FUZZY_THRESHOLD: minimum similarity for a suggestion (0.0-1.0)
    - WORD_LOOKUP_FUZZY_SCORER: rapidfuzz scorer name
    - WORD_LOOKUP_EXIT_COMMANDS: comma separated exit tokens
    - WORD_LOOKUP_LOG_LEVEL: logging level name
    - WORD_LOOKUP_VERBOSE: "true" to enable debug logging
    
    :param use_dotenv: Load a .env file from the working directory first
    :return: Validated WordLookupConfig instance
    :raises: ConfigurationError if a value is invalid or a path is missing
    """
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    
    defaults = WordLookupConfig()
    
    dictionary_path = get_optional_env(f"{ENV_PREFIX}DICTIONARY_PATH")
    if dictionary_path:
        validate_path(
            dictionary_path,
            f"{ENV_PREFIX}DICTIONARY_PATH",
            must_exist=True
        )
    
    threshold_raw = get_optional_env(f"{ENV_PREFIX}FUZZY_THRESHOLD")
    fuzzy_threshold = (
        parse_float(threshold_raw, f"{ENV_PREFIX}FUZZY_THRESHOLD")
        if threshold_raw
        else defaults.fuzzy_threshold
    )
    
    exit_raw = get_optional_env(f"{ENV_PREFIX}EXIT_COMMANDS")
    exit_commands = (
        tuple(token.strip() for token in exit_raw.split(",") if token.strip())
        if exit_raw
        else defaults.exit_commands
    )
    
    return WordLookupConfig(
        dictionary_path=dictionary_path,
        fuzzy_threshold=fuzzy_threshold,
        fuzzy_scorer=get_optional_env(f"{ENV_PREFIX}FUZZY_SCORER", defaults.fuzzy_scorer),
        exit_commands=exit_commands or defaults.exit_commands,
        log_level=get_optional_env(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
        verbose=parse_bool(get_optional_env(f"{ENV_PREFIX}VERBOSE", "false")),
    )
