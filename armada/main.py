"""Application entry point."""

import logging
import sys

from armada.game.app.console import ConsoleSession, iter_tokens
from armada.game.infra.config import load_default_env_files
from armada.game.infra.logging import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the Armada console session over stdin."""
    load_default_env_files()
    run_file = setup_logging()
    logger.info("session_start run_file=%s", run_file)
    try:
        session = ConsoleSession(iter_tokens(sys.stdin))
        for line in session.run():
            print(line, flush=True)
        logger.info("session_end")
    finally:
        shutdown_logging()


if __name__ == "__main__":
    main()
