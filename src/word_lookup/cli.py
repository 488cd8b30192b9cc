#!/usr/bin/env python3
"""
Interactive command-line dictionary.

Reads words one per line, prints their definitions, and offers the
closest known word when there is no exact match.
"""
import argparse
import logging
import sys
from typing import Callable, List, Optional, Sequence

from .app import WordLookupApp
from .config import WordLookupConfig
from .config_loader import load_config_from_env
from .exceptions import WordLookupError
from .interaction.prompter import ConfirmationPrompter, read_line
from .resolution.outcomes import LookupOutcome, NotFound

logger = logging.getLogger(__name__)

INPUT_PROMPT = "Enter a word to look up (or 'exit' to quit):"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="word-lookup",
        description="Look up word definitions, with spelling suggestions for near misses.",
    )
    parser.add_argument(
        "--dictionary",
        help="JSON file mapping words to lists of definitions (default: bundled dictionary)",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        help="Minimum similarity (0.0-1.0) for suggesting a word",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def configure_logging(config: WordLookupConfig) -> None:
    """Send log records to stderr so they never mix with dictionary output."""
    level = logging.DEBUG if config.verbose else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def render_outcome(outcome: LookupOutcome) -> List[str]:
    """Format a LookupOutcome as console lines."""
    if outcome.is_resolved:
        return ["Definitions:"] + [f"- {definition}" for definition in outcome.definitions]

    failure = outcome.failure
    if isinstance(failure, NotFound):
        return [f"Sorry, the word '{outcome.query}' was not found in the dictionary."]
    return [failure.message()]


def run_repl(
    app: WordLookupApp,
    exit_commands: Sequence[str] = ("exit",),
    reader: Callable[[], str] = read_line,
    writer: Callable[[str], None] = print,
) -> None:
    """
    Main lookup loop.
    
    Ends on an exit command or end of input. Every lookup outcome is
    reported and the loop continues.
    """
    while True:
        writer(INPUT_PROMPT)
        try:
            query = reader().strip()
        except EOFError:
            break

        if query in exit_commands:
            break

        if not query:
            continue

        outcome = app.lookup(query)
        logger.debug(f"Outcome: {outcome.to_dict()}")
        for line in render_outcome(outcome):
            writer(line)


def main(
    argv: Optional[Sequence[str]] = None,
    reader: Callable[[], str] = read_line,
    writer: Callable[[str], None] = print,
) -> int:
    """Entry point for the word-lookup console script."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config_from_env()
        if args.dictionary:
            config.dictionary_path = args.dictionary
        if args.threshold is not None:
            config.fuzzy_threshold = args.threshold
        if args.verbose:
            config.verbose = True

        configure_logging(config)

        app = WordLookupApp(config, prompter=ConfirmationPrompter(reader=reader, writer=writer))
        app.initialize()
    except WordLookupError as e:
        print(f"Failed to load dictionary: {e}", file=sys.stderr)
        return 1

    try:
        run_repl(app, config.exit_commands, reader=reader, writer=writer)
    except KeyboardInterrupt:
        writer("")

    return 0


if __name__ == "__main__":
    sys.exit(main())
