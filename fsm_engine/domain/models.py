"""
Domain Layer - Static Data Models

This module defines the static structure of a finite state machine: the
TransitionTable declaring every state and the named transitions it permits.
A table is built (and validated) once and is treated as immutable for the
lifetime of any StateMachine bound to it.
"""

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import (
    Dict,
    Hashable,
    Iterator,
    Mapping,
    Optional,
    Tuple,
    Type,
)

from ..exceptions import InvalidTransitionTableError

logger = logging.getLogger(__name__)

"""
State and Transition are opaque hashable names. Plain strings work, and so do
members of an Enum (a str-valued Enum gives the closed-set typing the engine
was designed around).
"""
State = Hashable
Transition = Hashable

_NO_TRANSITIONS: Mapping = MappingProxyType({})


def display_name(value: Hashable) -> str:
    """Text used for a state or transition in log messages and diagrams."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@dataclass(frozen=True)
class Edge:
    """
    A single declared transition.

    Attributes:
        source: State the transition is valid from.
        transition: Name the caller passes to StateMachine.transition().
        destination: State the machine lands in.
    """
    source: State
    transition: Transition
    destination: State


class TransitionTable:
    """
    Validated mapping of State -> {transition name -> destination State}.

    Declaration order of states, and of transitions within a state, is kept
    and is the iteration order of every read below. A state mapped to an
    empty dict or to None has no outgoing transitions.

    Args:
        transitions: The raw table, e.g. ``{"idle": {"typing": "typing"}, "typing": {}}``.
        states: Optional Enum class. When given, every key and destination
            must be one of its members, and every member must be declared.

    Raises:
        InvalidTransitionTableError: A destination is not a declared state,
            a state's transitions are not a mapping, or the closed-set check fails.
    """

    def __init__(
        self,
        transitions: Mapping[State, Optional[Mapping[Transition, State]]],
        states: Optional[Type[Enum]] = None,
    ):
        if not isinstance(transitions, Mapping):
            raise InvalidTransitionTableError(
                f"Transition table must be a mapping, got {type(transitions).__name__}."
            )

        table: Dict[State, Mapping[Transition, State]] = {}
        for source, edges in transitions.items():
            if edges is None:
                table[source] = _NO_TRANSITIONS
                continue
            if not isinstance(edges, Mapping):
                raise InvalidTransitionTableError(
                    f"Transitions of state '{display_name(source)}' must be a mapping, "
                    f"got {type(edges).__name__}."
                )
            # Copy so later edits to the caller's dict can't leak in.
            table[source] = MappingProxyType(dict(edges))

        self._table = table
        self._validate_destinations()
        if states is not None:
            self._validate_closed_set(states)

        logger.debug(
            f"Built transition table with {len(self._table)} states "
            f"and {sum(len(edges) for edges in self._table.values())} transitions"
        )

    @classmethod
    def from_mapping(cls, transitions) -> "TransitionTable":
        """Return ``transitions`` unchanged if it is already a table, else build one."""
        if isinstance(transitions, cls):
            return transitions
        return cls(transitions)

    # ==========================================================================
    # Validation
    # ==========================================================================

    def _validate_destinations(self) -> None:
        for edge in self.edges():
            try:
                declared = edge.destination in self._table
            except TypeError:
                raise InvalidTransitionTableError(
                    f"Transition '{display_name(edge.transition)}' from state "
                    f"'{display_name(edge.source)}' leads to unhashable destination "
                    f"{edge.destination!r}."
                ) from None
            if not declared:
                raise InvalidTransitionTableError(
                    f"Transition '{display_name(edge.transition)}' from state "
                    f"'{display_name(edge.source)}' leads to undeclared state "
                    f"'{display_name(edge.destination)}'."
                )

    def _validate_closed_set(self, states: Type[Enum]) -> None:
        members = set(states)

        foreign = [s for s in self._table if s not in members]
        if foreign:
            names = ", ".join(display_name(s) for s in foreign)
            raise InvalidTransitionTableError(
                f"States not in {states.__name__}: {names}."
            )

        missing = [m for m in states if m not in self._table]
        if missing:
            names = ", ".join(display_name(m) for m in missing)
            raise InvalidTransitionTableError(
                f"Members of {states.__name__} missing from the table: {names}."
            )

    # ==========================================================================
    # Reads
    # ==========================================================================

    @property
    def states(self) -> Tuple[State, ...]:
        return tuple(self._table)

    def transitions_from(self, state: State) -> Mapping[Transition, State]:
        """
        Read-only {transition -> destination} view for ``state``.
        Empty for terminal states and for states the table does not declare.
        """
        return self._table.get(state, _NO_TRANSITIONS)

    def lookup(self, state: State, transition: Transition) -> Optional[State]:
        """Destination of ``transition`` from ``state``, or None if not permitted."""
        return self.transitions_from(state).get(transition)

    def edges(self) -> Iterator[Edge]:
        """Every declared edge, by source declaration order then transition order."""
        for source, edges in self._table.items():
            for transition, destination in edges.items():
                yield Edge(source=source, transition=transition, destination=destination)

    def unreachable_states(self, initial_state: State) -> Tuple[State, ...]:
        """
        Declared states that can never be entered starting from ``initial_state``.

        This is a design-time check only; the engine never enforces it.
        """
        seen = {initial_state}
        queue = deque([initial_state])
        while queue:
            for destination in self.transitions_from(queue.popleft()).values():
                if destination not in seen:
                    seen.add(destination)
                    queue.append(destination)
        return tuple(s for s in self._table if s not in seen)

    def __contains__(self, state: object) -> bool:
        return state in self._table

    def __iter__(self) -> Iterator[State]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        names = ", ".join(display_name(s) for s in self._table)
        return f"TransitionTable({names})"
