"""
Trace logging for state computations.

Tracks the state flowing into and out of labelled computations so a
sequence of steps can be followed in the log.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class TraceRecord:
    """One traced run of a labelled computation."""

    label: str
    state_in: Any
    value: Any
    state_out: Any

    @property
    def changed(self) -> bool:
        """Whether the run produced a state different from its input."""
        return self.state_in != self.state_out

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "label": self.label,
            "state_in": repr(self.state_in),
            "value": repr(self.value),
            "state_out": repr(self.state_out),
            "changed": self.changed,
        }


class TraceLogger:
    """Logs the runs of traced state computations."""

    def __init__(self, log_level=None):
        self.logger = logging.getLogger("statesharp.trace")
        # Check environment variable to silence tracing entirely
        if os.environ.get("STATESHARP_DISABLE_TRACE", "").lower() in (
            "1",
            "true",
            "yes",
        ):
            self.logger.setLevel(logging.ERROR)
        elif log_level is not None:
            self.logger.setLevel(log_level)

    def set_level(self, level):
        """Set the logging level."""
        self.logger.setLevel(level)

    @property
    def enabled(self) -> bool:
        """Whether trace records would currently be emitted."""
        return self.logger.isEnabledFor(logging.DEBUG)

    def log_step(self, record: TraceRecord):
        """Log a single traced run."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                f"{record.label}: {record.state_in!r} -> {record.state_out!r} "
                f"(value={record.value!r})",
                extra={"trace": record.to_dict()},
            )


# Global trace logger instance
trace_logger = TraceLogger()
