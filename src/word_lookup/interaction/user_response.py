"""
Classification of the answer to a "Did you mean ...?" prompt.
"""
from enum import Enum, auto


class UserResponse(Enum):
    """Possible readings of one line of confirmation input."""
    AFFIRMATIVE = auto()
    NEGATIVE = auto()
    UNRECOGNIZED = auto()

    @classmethod
    def from_input(cls, raw: str) -> "UserResponse":
        """
        Classify raw console input (case-insensitive, trimmed).
        
        :param raw: One line as read from the console
        :return: AFFIRMATIVE for y/yes, NEGATIVE for n/no, else UNRECOGNIZED
        """
        answer = (raw or "").strip().lower()
        if answer in AFFIRMATIVE_ANSWERS:
            return cls.AFFIRMATIVE
        if answer in NEGATIVE_ANSWERS:
            return cls.NEGATIVE
        return cls.UNRECOGNIZED


AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})
NEGATIVE_ANSWERS = frozenset({"n", "no"})
