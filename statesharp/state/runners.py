"""
Functions that execute state computations.

Each runner invokes the computation once against an initial state and
returns some projection of the resulting pair.
"""

import logging
from typing import Any

from statesharp.state.computation import StateComputation
from statesharp.state.models import StateResult

logger = logging.getLogger("statesharp.state")


def run_state(comp: StateComputation, initial_state: Any) -> StateResult:
    """
    Run a computation and return both the result and the final state.

    Args:
        comp: The computation to run
        initial_state: The state to start from

    Returns:
        The ``(value, state)`` pair produced by the computation
    """
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Running {comp!r} from initial state {initial_state!r}")
    return comp(initial_state)


def eval_state(comp: StateComputation, initial_state: Any) -> Any:
    """Run a computation and return only its result value."""
    return run_state(comp, initial_state).value


def exec_state(comp: StateComputation, initial_state: Any) -> Any:
    """Run a computation and return only its final state."""
    return run_state(comp, initial_state).state
