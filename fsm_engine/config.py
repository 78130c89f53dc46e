"""
Configuration - Resolution of Per-Machine Settings

Every StateMachine resolves its configuration exactly once, at construction,
field by field with this precedence (first present value wins):

1. The call-site override passed to the StateMachine.
2. The innermost active ``config_scope(...)`` block (ambient configuration).
3. The process-wide ``Settings`` (environment / .env).
4. Hard defaults: log_level=none, max_history_length=None (unbounded),
   logger=the default stderr logger.

Scopes live in a ContextVar, so they nest and are local to the current thread
or asyncio task. Nothing here is re-read after a machine is built.
"""

import logging
import math
from contextlib import contextmanager
from contextvars import ContextVar
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, Iterator, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logger.adapters import LoggingAdapter, get_default_logger
from .logger.interface import is_logger

logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    """
    Verbosity of the messages a StateMachine sends to its logger.

    NONE: Nothing is logged.
    INFO: Warnings only (rejected transitions, undo with empty history).
    DEBUG: Warnings plus every successful transition and undo.
    """
    NONE = "none"
    INFO = "info"
    DEBUG = "debug"


def _normalise_max_history_length(value: Any) -> Any:
    # Unbounded is spelled None; accept float('inf') as a synonym.
    if isinstance(value, float) and math.isinf(value):
        return None if value > 0 else 0
    return value


def _check_logger(value: Any) -> Any:
    # Logger.log takes a level first, so a bare stdlib logger gets wrapped.
    if isinstance(value, logging.Logger):
        return LoggingAdapter(value)
    if value is not None and not is_logger(value):
        raise ValueError("logger must provide callable 'log' and 'warn' methods")
    return value


class FSMConfig(BaseModel):
    """
    Fully resolved configuration of one StateMachine.

    Attributes:
        log_level: Which messages reach the logger.
        max_history_length: Cap on the undo history (FIFO). None is unbounded;
            0 or less disables history (and therefore undo).
        logger: Object with ``log`` and ``warn`` methods.
    """
    model_config = ConfigDict(frozen=True)

    log_level: LogLevel = LogLevel.NONE
    max_history_length: Optional[int] = None
    logger: Any = Field(default_factory=get_default_logger)

    @field_validator("max_history_length", mode="before")
    @classmethod
    def normalise_max_history_length(cls, value: Any) -> Any:
        return _normalise_max_history_length(value)

    @field_validator("logger")
    @classmethod
    def validate_logger(cls, value: Any) -> Any:
        if value is None:
            return get_default_logger()
        return _check_logger(value)

    @property
    def history_enabled(self) -> bool:
        return self.max_history_length is None or self.max_history_length > 0


class ConfigOverride(BaseModel):
    """
    Partial configuration. Only fields explicitly passed count as present,
    so ``ConfigOverride(max_history_length=None)`` overrides to unbounded
    while ``ConfigOverride()`` overrides nothing.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    log_level: Optional[LogLevel] = None
    max_history_length: Optional[int] = None
    logger: Any = None

    @field_validator("max_history_length", mode="before")
    @classmethod
    def normalise_max_history_length(cls, value: Any) -> Any:
        return _normalise_max_history_length(value)

    @field_validator("logger")
    @classmethod
    def validate_logger(cls, value: Any) -> Any:
        return _check_logger(value)

    def present(self) -> Dict[str, Any]:
        """The explicitly set fields, as a dict ready to merge."""
        fields = {name: getattr(self, name) for name in self.model_fields_set}
        # log_level has no "unset" value of its own; None falls through.
        if fields.get("log_level", LogLevel.NONE) is None:
            del fields["log_level"]
        return fields


class Settings(BaseSettings):
    """
    Process-wide defaults, read from the environment or a .env file.
    Anything left unset falls through to the hard defaults.
    """
    FSM_LOG_LEVEL: LogLevel = LogLevel.NONE
    FSM_MAX_HISTORY_LENGTH: Optional[int] = None

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", env_ignore_empty=True
    )


# Settings (Singleton)
# Call get_settings.cache_clear() after changing the environment.
@lru_cache()
def get_settings() -> Settings:
    return Settings()


OverrideLike = Union[ConfigOverride, FSMConfig, Mapping[str, Any], None]

_ambient: ContextVar[Optional[Dict[str, Any]]] = ContextVar(
    "fsm_engine_ambient_config", default=None
)


def _as_override(override: OverrideLike) -> ConfigOverride:
    if override is None:
        return ConfigOverride()
    if isinstance(override, ConfigOverride):
        return override
    if isinstance(override, FSMConfig):
        return ConfigOverride(
            **{name: getattr(override, name) for name in FSMConfig.model_fields}
        )
    return ConfigOverride(**override)


def ambient_config() -> Dict[str, Any]:
    """Fields supplied by the active config scopes (empty outside any scope)."""
    return dict(_ambient.get() or {})


@contextmanager
def config_scope(**overrides: Any) -> Iterator[FSMConfig]:
    """
    Supply ambient configuration to every StateMachine built inside the block.

    Scopes nest; an inner scope merges over the outer one field by field.
    Yields the configuration a machine built here with no override would get.

    Example:
        with config_scope(log_level="debug", max_history_length=10):
            machine = StateMachine("idle", transitions)
    """
    scoped = ConfigOverride(**overrides)
    token = _ambient.set({**ambient_config(), **scoped.present()})
    try:
        yield resolve_config()
    finally:
        _ambient.reset(token)


def resolve_config(override: OverrideLike = None) -> FSMConfig:
    """
    Merge settings, ambient scope and ``override`` into an FSMConfig.

    Raises:
        pydantic.ValidationError: A field has an invalid value or the
            override names an unknown field.
    """
    settings = get_settings()
    fields: Dict[str, Any] = {
        "log_level": settings.FSM_LOG_LEVEL,
        "max_history_length": settings.FSM_MAX_HISTORY_LENGTH,
    }
    fields.update(ambient_config())
    fields.update(_as_override(override).present())

    config = FSMConfig(**fields)
    logger.debug(
        f"Resolved config: log_level={config.log_level.value}, "
        f"max_history_length={config.max_history_length}"
    )
    return config
