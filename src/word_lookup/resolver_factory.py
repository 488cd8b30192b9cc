"""
Factory for creating the word resolver.

Loads the dictionary and wires store, matcher and prompter from config.
"""
import logging
from typing import Mapping, Optional, Sequence

from .config import WordLookupConfig
from .data_loader import DictionaryDataLoader
from .dictionary import DictionaryStore
from .exceptions import ConfigurationError
from .interaction.prompter import ConfirmationPrompter
from .resolution.fuzzy_matcher import FuzzyWordMatcher
from .resolution.word_resolver import WordResolver

logger = logging.getLogger(__name__)


def create_dictionary_store(
    config: Optional[WordLookupConfig] = None,
    words: Optional[Mapping[str, Sequence[str]]] = None,
) -> DictionaryStore:
    """
    Build a DictionaryStore.
    
    :param config: WordLookupConfig instance (defaults if None)
    :param words: Optional pre-loaded mapping; loaded from config.dictionary_path otherwise
    :return: DictionaryStore
    :raises: ConfigurationError for invalid matcher settings, DictionaryLoadError for bad data
    """
    config = config or WordLookupConfig()

    try:
        fuzzy_matcher = FuzzyWordMatcher(
            threshold=config.fuzzy_threshold,
            scorer=config.fuzzy_scorer,
        )
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    if words is None:
        words = DictionaryDataLoader(config.dictionary_path).load()

    store = DictionaryStore(words, fuzzy_matcher=fuzzy_matcher)
    logger.info(
        f"Dictionary ready: {len(store)} words, "
        f"fuzzy threshold {fuzzy_matcher.threshold} ({fuzzy_matcher.scorer})"
    )
    return store


def create_word_resolver(
    config: Optional[WordLookupConfig] = None,
    store: Optional[DictionaryStore] = None,
    prompter: Optional[ConfirmationPrompter] = None,
) -> WordResolver:
    """
    Factory function to create a WordResolver.
    
    :param config: WordLookupConfig instance
    :param store: Optional pre-built DictionaryStore
    :param prompter: Optional prompter (console by default)
    :return: WordResolver
    """
    if store is None:
        store = create_dictionary_store(config)

    return WordResolver(store, prompter=prompter)
