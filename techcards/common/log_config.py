"""
Logging Configuration

Sets up the "techcards" logger used by the card, sitemap and profile
scripts. Progress lines ("[3/12] 123456", cache refresh counts) and
warnings go to stderr, so the summary and document path printed on
stdout can be piped or redirected on their own.
"""

import logging
import sys

LOGGER_NAME = "techcards"
LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the techcards logger for a script run.

    Args:
        verbose: If True, set level to DEBUG (image checks, cache keys)
        quiet: If True, set level to WARNING (lookup misses, failed fetches)
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Scripts may call this more than once; keep a single handler
    logger.handlers.clear()
    logger.addHandler(handler)
