from enum import Enum

from fsm_engine.domain.models import TransitionTable

# ==============================================================================
# SIGN-IN FORM (string states)
# ==============================================================================

# A form the user types into, submits, and either succeeds or fails.
# Transition names mostly echo their destination, except "canceling",
# "success" and "failure", which lead to differently named states.
SIGN_IN_FORM_TRANSITIONS = {
    "idle": {"typing": "typing"},
    "typing": {"submitting": "submitting", "canceling": "idle"},
    "submitting": {"success": "idle", "failure": "fail"},
    "fail": {"restart": "idle"},
}

SIGN_IN_FORM = TransitionTable(SIGN_IN_FORM_TRANSITIONS)


# ==============================================================================
# DOOR (closed-set Enum states)
# ==============================================================================

class DoorState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    LOCKED = "locked"


DOOR = TransitionTable(
    {
        DoorState.OPEN: {"close": DoorState.CLOSED},
        DoorState.CLOSED: {"open": DoorState.OPEN, "lock": DoorState.LOCKED},
        DoorState.LOCKED: {"unlock": DoorState.CLOSED},
    },
    states=DoorState,
)

EXAMPLE_MACHINES = {
    "sign_in_form": SIGN_IN_FORM,
    "door": DOOR,
}
