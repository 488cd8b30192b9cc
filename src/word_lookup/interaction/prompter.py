"""
Console confirmation prompter.

Wraps the blocking "read one line" and "write one line" collaborators so
the resolution engine can be driven by the console or by tests.
"""
import logging
from typing import Callable, Optional

from .user_response import UserResponse

logger = logging.getLogger(__name__)

CONFIRMATION_PROMPT = "Did you mean {word}? (Y/N)"


def read_line() -> str:
    return input()


class ConfirmationPrompter:
    """
    Asks the user to confirm a suggested word.
    
    :param reader: Blocking callable returning one line of input (default: input)
    :param writer: Callable receiving one line of output (default: print)
    """

    def __init__(
        self,
        reader: Optional[Callable[[], str]] = None,
        writer: Optional[Callable[[str], None]] = None,
    ):
        self._reader = reader or read_line
        self._writer = writer or print

    def confirm(self, word: str) -> UserResponse:
        """Prompt once for `word` and classify the answer. No re-prompting."""
        self._writer(CONFIRMATION_PROMPT.format(word=word))
        try:
            answer = self._reader()
        except EOFError:
            # End of input while confirming reads as an empty answer
            answer = ""

        response = UserResponse.from_input(answer)
        logger.debug(f"Confirmation for '{word}': {answer!r} -> {response.name}")
        return response
