"""
word_lookup: interactive dictionary with closest-word suggestions.
"""
from .app import WordLookupApp
from .config import WordLookupConfig
from .dictionary import DictionaryStore
from .exceptions import (
    ConfigurationError,
    DictionaryLoadError,
    ResolverNotInitializedError,
    WordLookupError,
)
from .interaction import ConfirmationPrompter, UserResponse
from .resolution import (
    IncorrectWord,
    LookupOutcome,
    NotFound,
    UnknownInput,
    WordResolver,
)

__all__ = [
    "WordLookupApp",
    "WordLookupConfig",
    "DictionaryStore",
    "ConfigurationError",
    "DictionaryLoadError",
    "ResolverNotInitializedError",
    "WordLookupError",
    "ConfirmationPrompter",
    "UserResponse",
    "IncorrectWord",
    "LookupOutcome",
    "NotFound",
    "UnknownInput",
    "WordResolver",
]
