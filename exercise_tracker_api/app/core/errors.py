"""
Exception types raised by the store and service layers.

Handlers catch these and turn them into plain‑text responses; anything
else is left to FastAPI's default error handling.
"""


class ExerciseTrackerError(Exception):
    """Base class for errors raised by the exercise tracker."""


class StoreError(ExerciseTrackerError):
    """A read or write against the document store failed."""


class InvalidDateError(ExerciseTrackerError, ValueError):
    """A date supplied for a new exercise could not be parsed."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid date: {value!r}")
        self.value = value
