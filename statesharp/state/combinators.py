"""
Combinators over state computations.

Each combinator threads the state through its computations left to right
inside a single run function, so long chains do not grow the call stack.
"""

from typing import Any, Callable, Iterable, List, Tuple, TypeVar

from statesharp.common.trace import TraceRecord, trace_logger
from statesharp.exceptions import NotAComputationError
from statesharp.state.computation import StateComputation
from statesharp.state.primitives import lift

S = TypeVar("S")
A = TypeVar("A")


def sequence(comps: Iterable[StateComputation]) -> StateComputation:
    """
    Run computations one after another, collecting their results.

    Args:
        comps: The computations to run, in order

    Returns:
        Computation producing the list of results and the final state
    """
    steps = list(comps)
    for step in steps:
        if not isinstance(step, StateComputation):
            raise NotAComputationError(step, "sequence expects StateComputations")

    def run_sequence(state: S) -> Tuple[List[Any], S]:
        results = []
        current_state = state

        for step in steps:
            value, current_state = step.run(current_state)
            results.append(value)

        return results, current_state

    return StateComputation(run_sequence)


def traverse(
    f: Callable[[A], StateComputation], items: Iterable[A]
) -> StateComputation:
    """
    Map each item to a computation and run them in order.

    Args:
        f: Function from an item to a computation
        items: The items to visit

    Returns:
        Computation producing the list of results and the final state
    """
    return sequence(f(item) for item in items)


def replicate(n: int, comp: StateComputation) -> StateComputation:
    """
    Run the same computation ``n`` times.

    Args:
        n: Number of repetitions
        comp: The computation to repeat

    Returns:
        Computation producing the list of ``n`` results

    Raises:
        ValueError: If ``n`` is negative
    """
    if n < 0:
        raise ValueError("Replication count must not be negative.")
    return sequence([comp] * n)


def when(condition: bool, comp: StateComputation) -> StateComputation:
    """Run ``comp`` only if ``condition`` holds; otherwise do nothing."""
    if condition:
        return comp
    return lift(None)


def with_state(f: Callable[[S], S], comp: StateComputation) -> StateComputation:
    """
    Transform the state before running a computation.

    Args:
        f: Function applied to the incoming state
        comp: The computation to run on the transformed state

    Returns:
        Computation producing ``comp``'s result from ``f(state)``
    """
    return StateComputation(lambda state: comp.run(f(state)))


def traced(label: str, comp: StateComputation) -> StateComputation:
    """
    Wrap a computation so each run is written to the trace log.

    The result and final state are exactly those of ``comp``.

    Args:
        label: Name used for the computation in log records
        comp: The computation to trace

    Returns:
        A computation behaving like ``comp`` that logs a ``TraceRecord``
    """

    def run_traced(state: S) -> Tuple[Any, S]:
        value, new_state = comp.run(state)
        if trace_logger.enabled:
            trace_logger.log_step(TraceRecord(label, state, value, new_state))
        return value, new_state

    return StateComputation(run_traced)
