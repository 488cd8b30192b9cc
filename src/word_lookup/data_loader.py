import json
import logging
from importlib import resources
from typing import Dict, List, Optional

from .exceptions import DictionaryLoadError
from .models import Definitions, normalize_word

logger = logging.getLogger(__name__)

BUNDLED_DATA_PACKAGE = "word_lookup.data"
BUNDLED_DATA_FILE = "english_english.json"


class DictionaryDataLoader:
    """
    Loads and normalizes word -> definitions data from a JSON object.

    Expected shape: {"word": ["definition", ...], ...}
    """
    def __init__(self, json_path: Optional[str] = None):
        self.json_path = json_path

    def load(self) -> Dict[str, Definitions]:
        if self.json_path is None:
            return self.load_bundled()

        source = str(self.json_path)
        try:
            with open(self.json_path, encoding="utf-8") as f:
                raw = f.read()
        except OSError as e:
            raise DictionaryLoadError(f"Cannot read dictionary file {source}: {e}") from e

        return self.parse(raw, source=source)

    @classmethod
    def load_bundled(cls) -> Dict[str, Definitions]:
        raw = (
            resources.files(BUNDLED_DATA_PACKAGE)
            .joinpath(BUNDLED_DATA_FILE)
            .read_text(encoding="utf-8")
        )
        return cls.parse(raw, source=BUNDLED_DATA_FILE)

    @classmethod
    def parse(cls, raw: str, source: str = "<string>") -> Dict[str, Definitions]:
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise DictionaryLoadError(f"Invalid JSON in {source}: {e}") from e

        if not isinstance(data, dict):
            raise DictionaryLoadError(
                f"{source} must contain a JSON object mapping words to definitions, "
                f"got {type(data).__name__}"
            )

        words: Dict[str, List[str]] = {}
        for word, definitions in data.items():
            key = normalize_word(word)
            if not key:
                raise DictionaryLoadError(f"{source} contains an empty word key")
            words.setdefault(key, []).extend(cls._parse_definitions(word, definitions, source))

        logger.info(f"Loaded {len(words)} words from {source}")
        return {word: tuple(definitions) for word, definitions in words.items()}

    @staticmethod
    def _parse_definitions(word: str, definitions, source: str) -> List[str]:
        if not isinstance(definitions, list):
            raise DictionaryLoadError(
                f"Definitions for {word!r} in {source} must be a list, "
                f"got {type(definitions).__name__}"
            )
        for definition in definitions:
            if not isinstance(definition, str):
                raise DictionaryLoadError(
                    f"Definitions for {word!r} in {source} must be strings, "
                    f"got {type(definition).__name__}"
                )
        return list(definitions)
