from abc import ABC, abstractmethod


class FSMLogger(ABC):
    """
    Abstract Base Class interface that defines the contract for any sink of
    state machine messages (stdlib logging, a test recorder, a UI console...).

    - log: debug-level messages (successful transitions and undos)
    - warn: rejected transitions and empty undos

    Subclassing is optional. The engine only needs an object exposing both
    methods, so any duck-typed logger is accepted as well.
    """

    @abstractmethod
    def log(self, message: str) -> None:
        """
        Records an informational message.
        """
        pass

    @abstractmethod
    def warn(self, message: str) -> None:
        """
        Records a warning. Exceptions raised here propagate to the engine's caller.
        """
        pass


def is_logger(candidate: object) -> bool:
    """True if ``candidate`` exposes callable ``log`` and ``warn`` methods."""
    return callable(getattr(candidate, "log", None)) and callable(
        getattr(candidate, "warn", None)
    )
