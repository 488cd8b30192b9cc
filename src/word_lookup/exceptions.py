class WordLookupError(Exception):
    """Base exception for word lookup."""


class ConfigurationError(WordLookupError):
    """Raised when configuration values are missing or invalid."""


class DictionaryLoadError(WordLookupError):
    """Raised when dictionary source data cannot be read or is malformed."""


class ResolverNotInitializedError(WordLookupError):
    """Raised when the app is used before initialization."""
