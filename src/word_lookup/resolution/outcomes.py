"""
Lookup outcome types.

Every branch of a lookup ends in a LookupOutcome value: either the
definitions that were found, or one failure from the closed set
NotFound | IncorrectWord | UnknownInput. None of these are exceptions;
they are expected results rendered by the caller.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from ..models import Definitions


@dataclass(frozen=True)
class NotFound:
    """No key matched, or the user rejected the suggested word."""

    def message(self) -> str:
        return "The word doesn't exist."


@dataclass(frozen=True)
class IncorrectWord:
    """The queried word doesn't exist; `candidate` is the closest known key."""
    candidate: str

    def message(self) -> str:
        return f"Did you mean {self.candidate} instead?"


@dataclass(frozen=True)
class UnknownInput:
    """The confirmation response was neither yes nor no."""

    def message(self) -> str:
        return "We didn't understand your input."


LookupFailure = Union[NotFound, IncorrectWord, UnknownInput]


@dataclass(frozen=True)
class LookupOutcome:
    """
    Result of resolving one top-level query.
    
    Attributes:
        query: The raw query as typed
        definitions: Definitions when resolved, otherwise None
        failure: Failure kind when not resolved, otherwise None
        resolved_word: Dictionary key the definitions belong to
        suggestions: Candidates offered to the user along the way
    """
    query: str
    definitions: Optional[Definitions] = None
    failure: Optional[LookupFailure] = None
    resolved_word: Optional[str] = None
    suggestions: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if (self.definitions is None) == (self.failure is None):
            raise ValueError("LookupOutcome needs exactly one of definitions or failure")

    @classmethod
    def resolved(
        cls,
        query: str,
        word: str,
        definitions: Definitions,
        suggestions: Tuple[str, ...] = (),
    ) -> "LookupOutcome":
        return cls(
            query=query,
            definitions=tuple(definitions),
            resolved_word=word,
            suggestions=suggestions,
        )

    @classmethod
    def failed(
        cls,
        query: str,
        failure: LookupFailure,
        suggestions: Tuple[str, ...] = (),
    ) -> "LookupOutcome":
        return cls(query=query, failure=failure, suggestions=suggestions)

    @property
    def is_resolved(self) -> bool:
        return self.definitions is not None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        result = {"query": self.query}

        if self.is_resolved:
            result["resolved_word"] = self.resolved_word
            result["definitions"] = list(self.definitions)
        else:
            result["failure"] = type(self.failure).__name__
            result["message"] = self.failure.message()

        if self.suggestions:
            result["suggestions"] = list(self.suggestions)

        return result
