"""
Read-only word store with exact and fuzzy retrieval.
"""
import logging
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Sequence, Tuple

from .models import Definitions, WordMapping, normalize_word
from .resolution.exact_matcher import ExactWordMatcher
from .resolution.fuzzy_matcher import FuzzyWordMatcher
from .resolution.resolution_policy import ResolutionPolicy
from .resolution.word_matcher import ResolutionResult

logger = logging.getLogger(__name__)


class DictionaryStore:
    """
    Immutable mapping of normalized word -> definitions.
    
    Keys are normalized at construction and the mapping is never mutated
    afterwards, so the store is safe to share between readers.
    
    Usage:
        store = DictionaryStore({"cat": ["a feline"]})
        store.lookup_exact(" Cat ")      # ("a feline",)
        store.closest_candidate("kat")    # None at the default 0.8 threshold
    """
    
    def __init__(
        self,
        words: Mapping[str, Sequence[str]],
        fuzzy_matcher: Optional[FuzzyWordMatcher] = None,
    ):
        """
        :param words: Source mapping of word -> definitions (keys are normalized here)
        :param fuzzy_matcher: Matcher for closest_candidate (default threshold 0.8)
        """
        normalized = {}
        for word, definitions in words.items():
            key = normalize_word(word)
            normalized[key] = normalized.get(key, ()) + tuple(definitions)
        
        self._data: WordMapping = MappingProxyType(normalized)
        self._sorted_words: Tuple[str, ...] = tuple(sorted(normalized))
        self._fuzzy_matcher = fuzzy_matcher or FuzzyWordMatcher()
        self._policy = ResolutionPolicy(
            matchers=[ExactWordMatcher(), self._fuzzy_matcher],
            confidence_threshold=self._fuzzy_matcher.threshold,
        )
    
    @property
    def data(self) -> WordMapping:
        """Read-only view of the normalized mapping."""
        return self._data
    
    @property
    def threshold(self) -> float:
        return self._fuzzy_matcher.threshold
    
    def words(self) -> Tuple[str, ...]:
        """All keys, sorted."""
        return self._sorted_words
    
    def __len__(self) -> int:
        return len(self._data)
    
    def __iter__(self) -> Iterator[str]:
        return iter(self._sorted_words)
    
    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and normalize_word(word) in self._data
    
    def lookup_exact(self, word: str) -> Optional[Definitions]:
        """Definitions for the normalized word, or None on a miss."""
        return self._data.get(normalize_word(word))
    
    def closest_candidate(self, word: str) -> Optional[str]:
        """
        Best fuzzy match among all keys, or None if nothing clears the threshold.
        
        Ties resolve to the alphabetically first key.
        """
        result = self._fuzzy_matcher.resolve(normalize_word(word), self._sorted_words)
        return result.canonical_value
    
    def match(self, word: str) -> ResolutionResult:
        """Exact-then-fuzzy match with the score and strategy used."""
        return self._policy.resolve(normalize_word(word), self._data.keys())
