"""Composition root for the Game Fairy project.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring happens here.
"""

import logging
import sys

from gamefairy.adapters.gateway.game_fairy_gateway import GameFairyGateway
from gamefairy.config import load_settings
from gamefairy.core.game import Game


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def run() -> bool:
    """Load configuration, wire the game, and ask whether it is done.

    Raises:
        IndeterminateOracleError: If the configured visions are unrecognized.
        ValidationError: If settings validation fails.
    """
    settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info(f"Consulting the game fairy (visions: {settings.mystic_visions!r})")

    gateway = GameFairyGateway(mystic_visions=settings.mystic_visions)
    game = Game(gateway)

    done = game.is_done()
    print("done" if done else "not done")
    return done


def main() -> None:
    """Application entry point.

    Exit codes:
        0: The fairy answered
        1: Fatal error, including an indeterminate oracle
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        run()
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
