"""Cooperative cancellation shared between the host and the generator."""

import threading


class OperationCancelledError(Exception):
    """Raised when work is abandoned because the host cancelled it."""


class CancellationToken:
    """A flag the host sets to ask running work to stop."""

    def __init__(self) -> None:
        """Create a token in the non-cancelled state."""
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation."""
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        """Return True once cancellation has been requested."""
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise OperationCancelledError if cancellation has been requested."""
        if self._event.is_set():
            raise OperationCancelledError("Operation was cancelled")
