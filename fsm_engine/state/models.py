"""
State Layer - Runtime Data Models

This module defines the runtime record a StateMachine owns: the state it
currently occupies and the bounded history of states it left behind. The
record is immutable; every change produces a new MachineState.
"""

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class MachineState(BaseModel):
    """
    Runtime state of one StateMachine.

    Attributes:
        current_state: The State the machine occupies right now.
        history: Previously occupied states, oldest first.
    """
    model_config = ConfigDict(frozen=True)

    current_state: Any
    history: Tuple[Any, ...] = Field(default_factory=tuple)

    @property
    def previous_state(self) -> Optional[Any]:
        """The state undo() would restore, or None when history is empty."""
        if not self.history:
            return None
        return self.history[-1]
