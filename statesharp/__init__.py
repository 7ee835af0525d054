"""
statesharp: pure, composable state computations.

A state computation is a function from an input state to a result value and
an output state. Computations are sequenced with ``bind`` (or ``>>``) and
run against an initial state with ``run_state``, ``eval_state`` or
``exec_state``.
"""

import logging

from statesharp.exceptions import StateComputationError, NotAComputationError
from statesharp.common import Monad, TraceLogger, TraceRecord, trace_logger
from statesharp.state import (
    StateResult,
    StateComputation,
    lift,
    get,
    put,
    gets,
    modify,
    run_state,
    eval_state,
    exec_state,
    sequence,
    traverse,
    replicate,
    when,
    with_state,
    traced,
)

__version__ = "0.1.0"

logging.getLogger("statesharp").addHandler(logging.NullHandler())

__all__ = [
    "StateComputationError",
    "NotAComputationError",
    "Monad",
    "TraceLogger",
    "TraceRecord",
    "trace_logger",
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
