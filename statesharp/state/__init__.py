"""
State computations for statesharp.

This package provides the immutable state computation type, the primitives
built from it, the runners that execute it, and combinators for larger
programs.
"""

from statesharp.state.models import StateResult
from statesharp.state.computation import StateComputation
from statesharp.state.primitives import lift, get, put, gets, modify
from statesharp.state.runners import run_state, eval_state, exec_state
from statesharp.state.combinators import (
    sequence,
    traverse,
    replicate,
    when,
    with_state,
    traced,
)

__all__ = [
    "StateResult",
    "StateComputation",
    "lift",
    "get",
    "put",
    "gets",
    "modify",
    "run_state",
    "eval_state",
    "exec_state",
    "sequence",
    "traverse",
    "replicate",
    "when",
    "with_state",
    "traced",
]
