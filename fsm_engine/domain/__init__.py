"""
Domain Layer - Static Data Models

Defines the static structure of a state machine: declared states and the
transitions each one permits.
"""

from fsm_engine.domain.models import (
    Edge,
    State,
    Transition,
    TransitionTable,
    display_name,
)

__all__ = [
    "Edge",
    "State",
    "Transition",
    "TransitionTable",
    "display_name",
]
