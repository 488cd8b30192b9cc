from typing import Mapping, Tuple

# Display order of definitions is preserved from the source data.
Definitions = Tuple[str, ...]
WordMapping = Mapping[str, Definitions]


def normalize_word(word: str) -> str:
    """Case-fold and trim a word before it is used as (or compared to) a key."""
    return word.strip().lower()
