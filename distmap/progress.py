"""
Progress reporting for long running distance map computations.

The algorithm reports named phases and per-row progress to a sink supplied by
the caller. Sinks are purely informational: they cannot cancel or alter the
computation.
"""

import logging
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

PHASE_INITIALIZATION = "Initialization"
PHASE_FORWARD_SCAN = "Forward Scan"
PHASE_BACKWARD_SCAN = "Backward Scan"
PHASE_NORMALIZATION = "Normalization"


class ProgressSink(Protocol):
    """Receiver of status and progress notifications."""

    def on_phase(self, name: str) -> None:
        ...

    def on_progress(self, done: int, total: int) -> None:
        ...


class NullProgressSink:
    """Sink that ignores every notification."""

    def on_phase(self, name: str) -> None:
        pass

    def on_progress(self, done: int, total: int) -> None:
        pass


class LoggingProgressSink:
    """
    Sink forwarding notifications to a logger.

    Phases are logged at INFO level. Progress is logged at DEBUG level, at most
    once per `every` rows plus the final row.
    """

    def __init__(self, log: Optional[logging.Logger] = None, every: int = 64):
        self.log = log or logger
        self.every = max(1, every)
        self.phase = ""

    def on_phase(self, name: str) -> None:
        self.phase = name
        self.log.info(f"{name}...")

    def on_progress(self, done: int, total: int) -> None:
        if done == total or done % self.every == 0:
            self.log.debug(f"{self.phase}: {done}/{total} rows")


def as_sink(progress: Optional[ProgressSink]) -> ProgressSink:
    return progress if progress is not None else NullProgressSink()
