"""
Public application facade for word lookup.

Single stable entry point: wires config, dictionary and resolver.
"""
from typing import Optional

from .config import WordLookupConfig
from .exceptions import ResolverNotInitializedError
from .interaction.prompter import ConfirmationPrompter
from .resolution.outcomes import LookupOutcome
from .resolution.word_resolver import WordResolver
from .resolver_factory import create_word_resolver


class WordLookupApp:
    """
    Public application facade.
    
    Usage:
        app = WordLookupApp(WordLookupConfig())
        app.initialize()
        outcome = app.lookup("helo")
    """

    def __init__(
        self,
        config: Optional[WordLookupConfig] = None,
        prompter: Optional[ConfirmationPrompter] = None,
    ):
        """
        :param config: WordLookupConfig instance (defaults if None)
        :param prompter: Confirmation prompter (console by default)
        """
        self._config = config or WordLookupConfig()
        self._prompter = prompter
        self._resolver: Optional[WordResolver] = None

    @property
    def config(self) -> WordLookupConfig:
        return self._config

    @property
    def is_initialized(self) -> bool:
        return self._resolver is not None

    def initialize(self) -> None:
        """
        Load the dictionary and build the resolver. Idempotent.
        
        :raises: DictionaryLoadError or ConfigurationError on bad data/settings
        """
        if self._resolver:
            return

        self._resolver = create_word_resolver(config=self._config, prompter=self._prompter)

    def lookup(self, query: str) -> LookupOutcome:
        """
        Look a word up, prompting to confirm a close match.
        
        :raises: ResolverNotInitializedError if initialize() has not been called
        """
        return self._require_resolver().resolve(query)

    def suggest(self, query: str) -> LookupOutcome:
        """
        Look a word up without prompting; near misses come back as IncorrectWord.
        
        :raises: ResolverNotInitializedError if initialize() has not been called
        """
        return self._require_resolver().suggest(query)

    def _require_resolver(self) -> WordResolver:
        if not self._resolver:
            raise ResolverNotInitializedError("App not initialized. Call initialize() first.")
        return self._resolver
