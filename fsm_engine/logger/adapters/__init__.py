from fsm_engine.logger.adapters.logging_adapter import (
    DEFAULT_LOGGER_NAME,
    LoggingAdapter,
    NullLogger,
    get_default_logger,
)

__all__ = [
    "DEFAULT_LOGGER_NAME",
    "LoggingAdapter",
    "NullLogger",
    "get_default_logger",
]
