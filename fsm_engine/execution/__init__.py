"""
Execution Layer - State Machine Runtime

Defines the StateMachine (commands, queries, logging policy) and the pure
reducer that computes every state change.
"""

from fsm_engine.execution.engine import StateMachine
from fsm_engine.execution.reducer import bounded_history, reduce
from fsm_engine.execution.schemas.state_machine import (
    StateMachineTransition,
    TransitionAction,
    UndoAction,
)

__all__ = [
    "StateMachine",
    "StateMachineTransition",
    "TransitionAction",
    "UndoAction",
    "bounded_history",
    "reduce",
]
