"""
State Layer - Runtime Data Models

Defines the runtime record (current state + history) owned by a StateMachine.
"""

from fsm_engine.state.models import MachineState

__all__ = [
    "MachineState",
]
