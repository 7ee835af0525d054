"""
Result model for state computations.

Running a computation produces a fresh, immutable pair of the result value
and the final state. The pair carries no identity of its own.
"""

from typing import Any, NamedTuple


class StateResult(NamedTuple):
    """
    Immutable ``(value, state)`` pair produced by running a computation.

    Being a tuple, it unpacks and compares like a plain ``(value, state)``.

    Attributes:
        value: The result value of the computation
        state: The state after the computation ran
    """

    value: Any
    state: Any
