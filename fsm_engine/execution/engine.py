"""
Engine - State Machine Runtime

The StateMachine owns one MachineState (current state + bounded history) and
exposes plain synchronous commands and queries over it:

- transition(name): follow a declared edge from the current state
- undo(): step back to the most recent history entry
- available_transitions() / get_history(): pure reads

Invalid commands are not errors. They leave the state untouched and are only
reported through the injected logger, at the configured verbosity:

    log_level | successful transition/undo | rejected transition / empty undo
    --------- | -------------------------- | --------------------------------
    none      | -                          | -
    info      | -                          | logger.warn
    debug     | logger.log                 | logger.warn

The machine does no locking; one machine belongs to one owner.
"""

import logging
from typing import Any, List, Tuple

from ..config import FSMConfig, LogLevel, OverrideLike, resolve_config
from ..domain.models import State, Transition, TransitionTable, display_name
from ..state.models import MachineState
from .reducer import reduce
from .schemas.state_machine import (
    Action,
    StateMachineTransition,
    TransitionAction,
    UndoAction,
)

logger = logging.getLogger(__name__)


class StateMachine:
    """
    Args:
        initial_state: State the machine starts in. Not checked against the
            table: an undeclared state simply has no available transitions.
        transitions: A TransitionTable, or a mapping that is built into one
            (raising InvalidTransitionTableError if a destination is undeclared).
        config: Optional ConfigOverride / dict / FSMConfig. Merged once, here,
            over the ambient scope and process settings.

    Example:
        machine = StateMachine(
            "idle",
            {
                "idle": {"typing": "typing"},
                "typing": {"submitting": "submitting", "canceling": "idle"},
                "submitting": {"success": "idle", "failure": "fail"},
                "fail": {"restart": "idle"},
            },
            {"log_level": "debug", "max_history_length": 10},
        )
        machine.transition("typing")
    """

    def __init__(
        self,
        initial_state: State,
        transitions: Any,
        config: OverrideLike = None,
    ):
        self._table = TransitionTable.from_mapping(transitions)
        self._config = resolve_config(config)
        self._state = MachineState(current_state=initial_state)

        if initial_state not in self._table:
            logger.debug(
                f"Initial state '{display_name(initial_state)}' is not declared "
                "in the transition table; no transitions will be available"
            )

    # ==========================================================================
    # Commands
    # ==========================================================================

    def transition(self, name: Transition) -> StateMachineTransition:
        """
        Follow transition ``name`` from the current state.

        The debug message echoes ``name`` as given, not the destination state.
        A name counts as declared by key presence alone, so an edge whose
        destination is a falsy name such as "" is still followed.
        """
        current = self._state.current_state
        edges = self._table.transitions_from(current)

        if name not in edges:
            if self._config.log_level != LogLevel.NONE:
                self._config.logger.warn(
                    f"Invalid transition from {display_name(current)} to {display_name(name)}"
                )
            return StateMachineTransition.HOLD

        if self._config.log_level == LogLevel.DEBUG:
            self._config.logger.log(
                f"Transitioning from {display_name(current)} to {display_name(name)}"
            )
        self._dispatch(TransitionAction(destination=edges[name]))
        return StateMachineTransition.ADVANCE

    def undo(self) -> StateMachineTransition:
        """Restore the most recent history entry, if any."""
        if not self._state.history:
            if self._config.log_level != LogLevel.NONE:
                self._config.logger.warn("No history to undo")
            return StateMachineTransition.HOLD

        if self._config.log_level == LogLevel.DEBUG:
            self._config.logger.log(
                f"Undoing from {display_name(self._state.current_state)} "
                f"to {display_name(self._state.history[-1])}"
            )
        self._dispatch(UndoAction())
        return StateMachineTransition.REVERT

    # ==========================================================================
    # Queries
    # ==========================================================================

    @property
    def current_state(self) -> State:
        return self._state.current_state

    def available_transitions(self) -> List[Transition]:
        """Transition names declared for the current state, in declared order."""
        return list(self._table.transitions_from(self._state.current_state))

    def can_transition(self, name: Transition) -> bool:
        return name in self._table.transitions_from(self._state.current_state)

    def get_history(self) -> Tuple[State, ...]:
        """Previously occupied states, oldest first."""
        return self._state.history

    def snapshot(self) -> MachineState:
        """The current runtime record. Immutable, so safe to keep."""
        return self._state

    @property
    def config(self) -> FSMConfig:
        return self._config

    @property
    def table(self) -> TransitionTable:
        return self._table

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _dispatch(self, action: Action) -> None:
        self._state = reduce(self._state, action, self._config.max_history_length)

    def __repr__(self) -> str:
        return (
            f"StateMachine(current_state={display_name(self._state.current_state)!r}, "
            f"history_length={len(self._state.history)})"
        )
