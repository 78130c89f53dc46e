"""
Action and Outcome Types - FSM Reducer Vocabulary

Type definitions shared by the reducer (which applies actions) and the
StateMachine (which dispatches them and reports the outcome to its caller).
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Union


class StateMachineTransition(Enum):
    """
    What a command did to the machine's pointer.
    Callers may ignore it and read ``current_state`` instead.
    """

    HOLD = auto()  # Nothing changed (rejected transition or empty history).
    ADVANCE = auto()  # Moved along a declared edge; prior state pushed to history.
    REVERT = auto()  # Undo restored the most recent history entry.


@dataclass(frozen=True)
class TransitionAction:
    """Move to an already-resolved destination state."""

    destination: Any


@dataclass(frozen=True)
class UndoAction:
    """Pop the most recent history entry back into ``current_state``."""


Action = Union[TransitionAction, UndoAction]
