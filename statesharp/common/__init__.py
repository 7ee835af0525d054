"""
Shared building blocks for statesharp.

This package holds the generic composable-computation contract and the
trace logging used to inspect computations while they run.
"""

from statesharp.common.monad import Monad
from statesharp.common.trace import TraceLogger, TraceRecord, trace_logger

__all__ = ["Monad", "TraceLogger", "TraceRecord", "trace_logger"]
