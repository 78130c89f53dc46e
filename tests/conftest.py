"""Shared fixtures for fsm_engine tests."""
import pytest

from fsm_engine.config import get_settings
from fsm_engine.data.example_machines import SIGN_IN_FORM_TRANSITIONS


class RecordingLogger:
    """Duck-typed logger that keeps every message it receives."""

    def __init__(self):
        self.logs = []
        self.warnings = []

    def log(self, message):
        self.logs.append(message)

    def warn(self, message):
        self.warnings.append(message)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from FSM_* environment variables and cached settings."""
    monkeypatch.delenv("FSM_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FSM_MAX_HISTORY_LENGTH", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def recorder():
    return RecordingLogger()


@pytest.fixture
def sign_in_transitions():
    """A fresh copy of the sign-in form table as plain dicts."""
    return {state: dict(edges) for state, edges in SIGN_IN_FORM_TRANSITIONS.items()}
