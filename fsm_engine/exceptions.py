"""
Package Exceptions

Custom exceptions raised by the transition table and related construction
logic. Rejected transitions and empty undos are NOT errors; they are reported
through the injected logger only.
"""


class FSMError(Exception):
    """Base class for every error raised by fsm_engine."""
    pass


class InvalidTransitionTableError(FSMError, ValueError):
    """Raised when a transition table references undeclared states or is malformed."""
    pass
