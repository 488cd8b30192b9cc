"""
Core abstractions for word matching.

Defines the matcher protocol and the result type shared by matchers.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Collection, Optional


@dataclass(frozen=True)
class ResolutionResult:
    """
    Immutable result of matching a word against the known keys.
    
    Attributes:
        canonical_value: The matched dictionary key (e.g., "cat"), or None
        confidence: Similarity score between 0.0 and 1.0
        strategy_used: Name of the matching strategy used ("exact", "fuzzy", "none")
        original_query: The query that was matched
    """
    canonical_value: Optional[str]
    confidence: float
    strategy_used: str
    original_query: str
    
    def is_confident(self, threshold: float = 0.8) -> bool:
        """Check if match confidence meets threshold."""
        return self.confidence >= threshold
    
    def __post_init__(self):
        """Validate confidence score."""
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be between 0.0 and 1.0, got {self.confidence}")


class WordMatcher(ABC):
    """
    Protocol for word matching strategies.
    
    Matchers receive an already normalized query and the normalized
    dictionary keys, and pick at most one key.
    """
    
    @abstractmethod
    def resolve(
        self,
        query: str,
        candidates: Collection[str],
    ) -> ResolutionResult:
        """
        Match a query against candidate keys.
        
        :param query: Normalized word to match
        :param candidates: Normalized dictionary keys
        :return: ResolutionResult with the matched key and confidence
        """
        pass
