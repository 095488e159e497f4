"""Centralized logging configuration for the pizzeria CLI.

Logs go to stderr so they never interleave with the order summaries and
notification lines the CLI prints on stdout.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger.

    WARNING and above by default; everything down to DEBUG with *verbose*.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
