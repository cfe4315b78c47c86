"""Errors raised by galaxy generation.

Configuration errors are fatal to the request and are never retried
internally. Stalled generation is recoverable: the caller may retry with a
different seed or relaxed parameters.
"""

from typing import Optional, Protocol


class ConfigurationError(ValueError):
    """Generation parameters are out of bounds or inconsistent."""


class GenerationStalledError(RuntimeError):
    """A rejection-sampling loop exceeded its attempt cap."""


class GenerationCancelled(GenerationStalledError):
    """The caller's cancel signal was set while generation was running."""


class CancelSignal(Protocol):
    """Anything with an is_set() method, e.g. threading.Event."""

    def is_set(self) -> bool: ...


class AttemptGuard:
    """Caps the number of iterations of one loop and watches for cancellation.

    Call tick() once at the top of every iteration.
    """

    def __init__(self, what: str, limit: int, cancel: Optional[CancelSignal] = None):
        self.what = what
        self.limit = limit
        self.cancel = cancel
        self.attempts = 0

    def tick(self) -> None:
        """Count one attempt.

        Raises:
            GenerationCancelled: If the cancel signal is set
            GenerationStalledError: If the attempt cap is exceeded
        """
        if self.cancel is not None and self.cancel.is_set():
            raise GenerationCancelled(f"{self.what}: cancelled after {self.attempts} attempts")
        self.attempts += 1
        if self.attempts > self.limit:
            raise GenerationStalledError(
                f"{self.what}: no acceptable value after {self.limit} attempts"
            )
