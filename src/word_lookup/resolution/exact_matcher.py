"""
Exact matching strategy.
"""
from typing import Collection
from .word_matcher import WordMatcher, ResolutionResult


class ExactWordMatcher(WordMatcher):
    """
    Exact match strategy. Used as first strategy in escalation.
    
    Candidates are expected to be normalized already, so membership is a
    plain lookup (constant time when candidates is a set or mapping view).
    """
    
    def resolve(
        self,
        query: str,
        candidates: Collection[str],
    ) -> ResolutionResult:
        if query in candidates:
            return ResolutionResult(
                canonical_value=query,
                confidence=1.0,
                strategy_used="exact",
                original_query=query,
            )
        
        return ResolutionResult(
            canonical_value=None,
            confidence=0.0,
            strategy_used="exact",
            original_query=query,
        )
