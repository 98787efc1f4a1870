import logging
import os
import sys
from typing import Optional


def configure_logging(level: Optional[int] = None) -> None:
    """Route all log records to stdout through a single handler.

    Without an explicit level, respects BEAST_ESCAPE_LOG_LEVEL env var if
    present and defaults to INFO.
    """
    if level is None:
        level_name = os.getenv("BEAST_ESCAPE_LOG_LEVEL", "INFO")
        level = getattr(logging, level_name.upper(), logging.INFO)

    handler = logging.StreamHandler(stream=sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplicates in repeated test runs
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
