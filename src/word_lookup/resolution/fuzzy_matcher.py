"""
Fuzzy matching strategy using rapidfuzz.

Handles typos and near-misses ("helo" -> "hello").
"""
import logging
from typing import Collection
from rapidfuzz import fuzz, process

from .word_matcher import WordMatcher, ResolutionResult

logger = logging.getLogger(__name__)


class FuzzyWordMatcher(WordMatcher):
    """
    Fuzzy match strategy using rapidfuzz.
    
    The default "ratio" scorer is the normalized Indel similarity,
    2 * LCS / (len(a) + len(b)), where LCS is the longest common
    subsequence. difflib's Ratcliff/Obershelp ratio counts only contiguous
    matching blocks, so it never scores higher and can score lower
    ("aaac" vs "acacac": 0.8 here, 0.4 in difflib).
    
    Only the single best candidate is ever returned. Candidates are scanned
    in sorted order and the first one reaching the best score wins, so ties
    resolve to the alphabetically first key.
    """
    
    DEFAULT_THRESHOLD = 0.8
    
    SCORERS = {
        "ratio": fuzz.ratio,
        "partial_ratio": fuzz.partial_ratio,
        "token_sort_ratio": fuzz.token_sort_ratio,
        "token_set_ratio": fuzz.token_set_ratio,
    }
    
    def __init__(
        self,
        threshold: float = DEFAULT_THRESHOLD,
        scorer: str = "ratio",
    ):
        """
        Initialize fuzzy matcher.
        
        :param threshold: Minimum similarity to accept a match (0.0-1.0)
        :param scorer: rapidfuzz scorer to use (see SCORERS)
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"Threshold must be between 0.0 and 1.0, got {threshold}")
        
        if scorer not in self.SCORERS:
            raise ValueError(
                f"Unknown scorer '{scorer}'. "
                f"Must be one of: {list(self.SCORERS.keys())}"
            )
        
        self.threshold = threshold
        self.scorer = scorer
    
    def resolve(
        self,
        query: str,
        candidates: Collection[str],
    ) -> ResolutionResult:
        """
        Find the best fuzzy match in candidates.
        
        :param query: Normalized word to match
        :param candidates: Normalized dictionary keys
        :return: ResolutionResult with best match if at or above threshold
        """
        if not candidates:
            return self._no_match(query)
        
        # extractOne keeps the first candidate with the highest score
        result = process.extractOne(
            query,
            sorted(candidates),
            scorer=self.SCORERS[self.scorer],
            score_cutoff=round(self.threshold * 100, 6),
        )
        
        if result is None:
            logger.debug(f"No fuzzy match for '{query}' at threshold {self.threshold}")
            return self._no_match(query)
        
        matched_value, score, _ = result
        # Convert score (0-100) to confidence (0.0-1.0)
        confidence = min(score / 100.0, 1.0)
        logger.debug(f"Fuzzy match for '{query}': '{matched_value}' (score {confidence:.2f})")
        
        return ResolutionResult(
            canonical_value=matched_value,
            confidence=confidence,
            strategy_used="fuzzy",
            original_query=query,
        )
    
    @staticmethod
    def _no_match(query: str) -> ResolutionResult:
        return ResolutionResult(
            canonical_value=None,
            confidence=0.0,
            strategy_used="fuzzy",
            original_query=query,
        )
