"""
Exceptions raised by the statesharp library.

Computations themselves are total; these only report misuse of the API.
"""


class StateComputationError(Exception):
    """Base class for statesharp errors."""


class NotAComputationError(StateComputationError, TypeError):
    """Raised when a value is used where a state computation was expected."""

    def __init__(self, value, context: str = "expected a StateComputation"):
        self.value = value
        super().__init__(f"{context}, got {type(value).__name__}: {value!r}")
