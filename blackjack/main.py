"""Main entry point for console blackjack."""

import logging
from random import Random

from blackjack.console import ConsoleIO
from blackjack.game.session import SessionController
from blackjack.rules import RuleSet
from config import config

logger = logging.getLogger(__name__)


def init_logging(debug: bool = False, filename: str | None = None) -> None:
    """Configure the root logger; stderr unless a log file is given."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if debug else logging.WARNING)

    for handler in root.handlers:
        handler.close()
    root.handlers.clear()

    handler = logging.FileHandler(filename) if filename else logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    root.addHandler(handler)


def main() -> int:
    """Run one interactive session. Always exits 0."""
    init_logging(config.debug, config.log_file)

    rules = RuleSet.from_config(config.game)
    io = ConsoleIO(rng=Random(config.game.seed))

    try:
        io.wait_for_start()
        summary = SessionController(io, rules=rules).run()
        logger.info("Session over after %d rounds: %s", summary.rounds_played, summary.reason)
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed, leaving the table")
        print()

    return 0
