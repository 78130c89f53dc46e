from fsm_engine.execution.schemas.state_machine import (
    Action,
    StateMachineTransition,
    TransitionAction,
    UndoAction,
)

__all__ = [
    "Action",
    "StateMachineTransition",
    "TransitionAction",
    "UndoAction",
]
