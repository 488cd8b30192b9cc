"""
Resolution policy for matcher escalation: exact -> fuzzy.
"""
from typing import Collection, List, Optional
from .word_matcher import WordMatcher, ResolutionResult


class ResolutionPolicy:
    """
    Policy for escalating through multiple matching strategies.
    
    Tries matchers in order until one returns a confident result.
    """
    
    def __init__(
        self,
        matchers: List[WordMatcher],
        confidence_threshold: float = 0.8,
    ):
        """
        Initialize resolution policy.
        
        :param matchers: Matchers to try in order (e.g., [ExactWordMatcher, FuzzyWordMatcher])
        :param confidence_threshold: Minimum confidence to accept a match
        """
        if not matchers:
            raise ValueError("At least one matcher must be provided")
        
        self._matchers = matchers
        self.confidence_threshold = confidence_threshold
    
    def resolve(
        self,
        query: str,
        candidates: Collection[str],
    ) -> ResolutionResult:
        """
        Resolve query by trying matchers in order.
        
        Returns the first result meeting the threshold, otherwise the best
        result seen (which may carry no canonical value).
        
        :param query: Normalized word
        :param candidates: Normalized dictionary keys
        :return: ResolutionResult with best match or None
        """
        best_result: Optional[ResolutionResult] = None
        
        for matcher in self._matchers:
            result = matcher.resolve(query, candidates)
            
            if result.canonical_value is not None and result.is_confident(self.confidence_threshold):
                return result
            
            if best_result is None or result.confidence > best_result.confidence:
                best_result = result
        
        if best_result and best_result.canonical_value is not None:
            return best_result
        
        return ResolutionResult(
            canonical_value=None,
            confidence=0.0,
            strategy_used="none",
            original_query=query,
        )
