"""
Primitive state computations.

These are the building blocks every state program is assembled from. Each
function returns a new computation and touches no state until it is run.
"""

from typing import Callable, TypeVar

from statesharp.state.computation import StateComputation

S = TypeVar("S")
A = TypeVar("A")


def lift(value: A) -> StateComputation:
    """
    Wrap a value in a computation that ignores the state.

    Args:
        value: The value to return

    Returns:
        Computation producing ``(value, state)`` for any state
    """
    return StateComputation.lift(value)


def get() -> StateComputation:
    """
    Read the current state.

    Returns:
        Computation producing ``(state, state)``
    """
    return StateComputation(lambda state: (state, state))


def put(new_state: S) -> StateComputation:
    """
    Replace the state.

    Args:
        new_state: The state to install

    Returns:
        Computation producing ``(None, new_state)`` whatever the input state
    """
    return StateComputation(lambda _: (None, new_state))


def gets(f: Callable[[S], A]) -> StateComputation:
    """
    Read a value derived from the state without changing it.

    Args:
        f: Projection applied to the current state

    Returns:
        Computation producing ``(f(state), state)``
    """
    return StateComputation(lambda state: (f(state), state))


def modify(f: Callable[[S], S]) -> StateComputation:
    """
    Transform the state.

    Args:
        f: Function from the old state to the new one

    Returns:
        Computation producing ``(None, f(state))``
    """
    return StateComputation(lambda state: (None, f(state)))
