from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class WordLookupConfig:
    # Data
    dictionary_path: Optional[str] = None

    # Fuzzy suggestion
    fuzzy_threshold: float = 0.8
    fuzzy_scorer: str = "ratio"

    # REPL
    exit_commands: Tuple[str, ...] = ("exit",)

    # Logging
    log_level: str = "WARNING"
    verbose: bool = False
