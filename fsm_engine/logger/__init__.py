"""
Logger Layer - Injected Message Sink

Defines the two-method FSMLogger contract and the adapters shipped with the
package (stdlib logging, null, and the default stderr logger).
"""

from fsm_engine.logger.interface import FSMLogger, is_logger
from fsm_engine.logger.adapters import (
    LoggingAdapter,
    NullLogger,
    get_default_logger,
)

__all__ = [
    "FSMLogger",
    "LoggingAdapter",
    "NullLogger",
    "get_default_logger",
    "is_logger",
]
