"""
Reducer - Pure State Updates

``reduce`` is the only place a MachineState changes. It never validates the
action against a transition table (the StateMachine has already done that)
and never logs; it just computes the next record.
"""

from typing import Optional, Tuple

from ..state.models import MachineState
from .schemas.state_machine import Action, TransitionAction, UndoAction


def bounded_history(
    history: Tuple, entry, max_history_length: Optional[int]
) -> Tuple:
    """
    Append ``entry`` and keep only the most recent ``max_history_length`` items.

    None means unbounded. Zero or a negative cap disables history entirely,
    so the result is always empty.
    """
    if max_history_length is not None and max_history_length <= 0:
        return ()
    appended = history + (entry,)
    if max_history_length is None:
        return appended
    return appended[-max_history_length:]


def reduce(
    state: MachineState,
    action: Action,
    max_history_length: Optional[int] = None,
) -> MachineState:
    if isinstance(action, TransitionAction):
        return MachineState(
            current_state=action.destination,
            history=bounded_history(
                state.history, state.current_state, max_history_length
            ),
        )

    if isinstance(action, UndoAction):
        if not state.history:
            return state
        return MachineState(
            current_state=state.history[-1],
            history=state.history[:-1],
        )

    raise TypeError(f"Unknown action: {action!r}")
