"""
Resolution engine: exact lookup, fuzzy suggestion, confirmation, retry.
"""
import logging
from typing import TYPE_CHECKING, Optional, Tuple

from ..interaction.prompter import ConfirmationPrompter
from ..interaction.user_response import UserResponse
from ..models import normalize_word
from .outcomes import IncorrectWord, LookupOutcome, NotFound, UnknownInput
from .word_matcher import ResolutionResult

if TYPE_CHECKING:
    from ..dictionary import DictionaryStore

logger = logging.getLogger(__name__)


class WordResolver:
    """
    Turns a raw query into a LookupOutcome.
    
    Per query:
    1. Normalize and look the word up exactly. A hit resolves.
    2. On a miss, ask the store for the closest key. None -> NotFound.
    3. Prompt once to confirm the candidate:
       yes -> look the candidate up again (always an exact hit, since it is a key),
       no -> NotFound, anything else -> UnknownInput.
    
    Nothing is kept between queries.
    
    Usage:
        resolver = WordResolver(store, ConfirmationPrompter())
        outcome = resolver.resolve("helo")
        if outcome.is_resolved:
            print(outcome.definitions)
    """

    def __init__(
        self,
        store: "DictionaryStore",
        prompter: Optional[ConfirmationPrompter] = None,
    ):
        """
        :param store: DictionaryStore to query
        :param prompter: Confirmation prompter (console by default)
        """
        self._store = store
        self._prompter = prompter or ConfirmationPrompter()

    @property
    def store(self) -> "DictionaryStore":
        return self._store

    def resolve(self, query: str) -> LookupOutcome:
        """
        Resolve a raw query, prompting for confirmation on a near miss.
        
        :param query: Raw user input
        :return: LookupOutcome with definitions or NotFound/UnknownInput
        """
        return self._lookup(query, original_query=query)

    def suggest(self, query: str) -> LookupOutcome:
        """
        Resolve without prompting.
        
        A near miss is reported as IncorrectWord(candidate) and left for the
        caller to act on.
        
        :param query: Raw user input
        :return: LookupOutcome with definitions or NotFound/IncorrectWord
        """
        word = normalize_word(query)
        result = self._match(word)
        if result.strategy_used == "exact":
            return LookupOutcome.resolved(query, word, self._store.lookup_exact(word))

        candidate = result.canonical_value
        if candidate is None:
            return LookupOutcome.failed(query, NotFound())

        return LookupOutcome.failed(query, IncorrectWord(candidate), suggestions=(candidate,))

    def _lookup(
        self,
        word: str,
        original_query: str,
        suggestions: Tuple[str, ...] = (),
    ) -> LookupOutcome:
        word = normalize_word(word)
        result = self._match(word)
        if result.strategy_used == "exact":
            definitions = self._store.lookup_exact(word)
            return LookupOutcome.resolved(original_query, word, definitions, suggestions)

        candidate = result.canonical_value
        if candidate is None:
            return LookupOutcome.failed(original_query, NotFound(), suggestions)

        suggestions = suggestions + (candidate,)
        response = self._prompter.confirm(candidate)

        if response is UserResponse.AFFIRMATIVE:
            # candidate is a store key, so this pass hits exactly
            return self._lookup(candidate, original_query, suggestions)

        if response is UserResponse.NEGATIVE:
            return LookupOutcome.failed(original_query, NotFound(), suggestions)

        return LookupOutcome.failed(original_query, UnknownInput(), suggestions)

    def _match(self, word: str) -> ResolutionResult:
        """Exact-then-fuzzy match, logged with its strategy and score."""
        result = self._store.match(word)
        logger.debug(
            f"Match for '{word}': {result.strategy_used} -> "
            f"{result.canonical_value!r} (score {result.confidence:.2f})"
        )
        return result
