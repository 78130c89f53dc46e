"""
fsm_engine

A small finite state machine engine: validated transition tables, a
StateMachine with bounded undo history and pluggable logging, and Mermaid
diagram generation.
"""

from fsm_engine.config import (
    ConfigOverride,
    FSMConfig,
    LogLevel,
    Settings,
    config_scope,
    get_settings,
    resolve_config,
)
from fsm_engine.diagrams import generate_mermaid_diagram
from fsm_engine.domain import Edge, TransitionTable, display_name
from fsm_engine.exceptions import FSMError, InvalidTransitionTableError
from fsm_engine.execution import StateMachine, StateMachineTransition
from fsm_engine.logger import (
    FSMLogger,
    LoggingAdapter,
    NullLogger,
    get_default_logger,
)
from fsm_engine.state import MachineState

__all__ = [
    # Domain Layer
    "Edge",
    "TransitionTable",
    "display_name",
    # State Layer
    "MachineState",
    # Execution Layer
    "StateMachine",
    "StateMachineTransition",
    # Configuration
    "ConfigOverride",
    "FSMConfig",
    "LogLevel",
    "Settings",
    "config_scope",
    "get_settings",
    "resolve_config",
    # Logging
    "FSMLogger",
    "LoggingAdapter",
    "NullLogger",
    "get_default_logger",
    # Diagrams
    "generate_mermaid_diagram",
    # Errors
    "FSMError",
    "InvalidTransitionTableError",
]
