"""Tests for the pure reducer."""
import pytest

from fsm_engine import MachineState
from fsm_engine.execution import TransitionAction, UndoAction, bounded_history, reduce


class TestBoundedHistory:
    """bounded_history FIFO semantics."""

    def test_unbounded_appends(self):
        assert bounded_history(("a", "b"), "c", None) == ("a", "b", "c")

    def test_cap_keeps_most_recent(self):
        """Oldest entries are evicted once the cap is exceeded."""
        assert bounded_history(("a", "b"), "c", 2) == ("b", "c")
        assert bounded_history(("a", "b", "c", "d"), "e", 2) == ("d", "e")

    def test_cap_not_reached(self):
        assert bounded_history(("a",), "b", 5) == ("a", "b")

    @pytest.mark.parametrize("cap", [0, -1, -100])
    def test_non_positive_cap_clears(self, cap):
        """A cap of zero or less always yields an empty history."""
        assert bounded_history(("a", "b"), "c", cap) == ()


class TestReduce:
    """reduce() applies actions to a MachineState."""

    def test_transition_action(self):
        """TransitionAction moves to the destination and records the old state."""
        # Arrange
        state = MachineState(current_state="idle")

        # Act
        new_state = reduce(state, TransitionAction(destination="typing"))

        # Assert
        assert new_state.current_state == "typing"
        assert new_state.history == ("idle",)
        assert state.current_state == "idle"

    def test_transition_action_respects_cap(self):
        # Arrange
        state = MachineState(current_state="c", history=("a", "b"))

        # Act
        new_state = reduce(state, TransitionAction(destination="d"), max_history_length=2)

        # Assert
        assert new_state.history == ("b", "c")

    def test_undo_action(self):
        """UndoAction pops the last history entry into current_state."""
        # Arrange
        state = MachineState(current_state="c", history=("a", "b"))

        # Act
        new_state = reduce(state, UndoAction())

        # Assert
        assert new_state.current_state == "b"
        assert new_state.history == ("a",)

    def test_undo_on_empty_history_returns_same_state(self):
        # Arrange
        state = MachineState(current_state="idle")

        # Act & Assert
        assert reduce(state, UndoAction()) is state

    def test_unknown_action(self):
        """Anything that isn't a known action is a programming error."""
        # Act & Assert
        with pytest.raises(TypeError):
            reduce(MachineState(current_state="idle"), "UNDO")
