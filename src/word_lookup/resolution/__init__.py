"""
Word resolution layer.

Key components:
- WordMatcher: Protocol for matching strategies
- ResolutionResult: Immutable match result with confidence scoring
- Matchers: Exact and Fuzzy (rapidfuzz) strategies
- ResolutionPolicy: Escalation from exact to fuzzy matching
- WordResolver: Lookup / suggest / confirm / retry engine
- LookupOutcome: Result of one query, with its failure kinds
"""
from .word_matcher import WordMatcher, ResolutionResult
from .exact_matcher import ExactWordMatcher
from .fuzzy_matcher import FuzzyWordMatcher
from .resolution_policy import ResolutionPolicy
from .outcomes import (
    IncorrectWord,
    LookupFailure,
    LookupOutcome,
    NotFound,
    UnknownInput,
)
from .word_resolver import WordResolver

__all__ = [
    "WordMatcher",
    "ResolutionResult",
    "ExactWordMatcher",
    "FuzzyWordMatcher",
    "ResolutionPolicy",
    "IncorrectWord",
    "LookupFailure",
    "LookupOutcome",
    "NotFound",
    "UnknownInput",
    "WordResolver",
]
