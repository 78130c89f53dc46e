import logging
import sys
from functools import lru_cache

from ..interface import FSMLogger

DEFAULT_LOGGER_NAME = "fsm_engine.console"


class LoggingAdapter(FSMLogger):
    """
    Forwards state machine messages to a stdlib ``logging.Logger``.
    ``log`` maps to INFO and ``warn`` maps to WARNING.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def log(self, message: str) -> None:
        self.logger.info(message)

    def warn(self, message: str) -> None:
        self.logger.warning(message)


class NullLogger(FSMLogger):
    """Discards every message."""

    def log(self, message: str) -> None:
        pass

    def warn(self, message: str) -> None:
        pass


# Default Logger (Singleton)
# Cached so the stderr handler is attached exactly once per process.
@lru_cache()
def get_default_logger() -> FSMLogger:
    """
    The default stdio logger: plain messages written to standard error.
    """
    console = logging.getLogger(DEFAULT_LOGGER_NAME)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    console.addHandler(handler)
    console.setLevel(logging.DEBUG)
    # The engine already filters by log_level; don't duplicate into app handlers.
    console.propagate = False
    return LoggingAdapter(console)
