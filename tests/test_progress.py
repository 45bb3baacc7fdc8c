"""Tests for progress sinks."""

import logging

import numpy as np

from distmap import compute_distance_map
from distmap.progress import LoggingProgressSink, NullProgressSink, as_sink


class TestProgressSinks:
    """Test cases for the provided progress sinks."""

    def test_null_sink(self):
        """The null sink accepts every notification."""
        sink = NullProgressSink()
        sink.on_phase("Forward Scan")
        sink.on_progress(1, 2)

    def test_as_sink(self):
        """Missing sinks are replaced by a null sink."""
        assert isinstance(as_sink(None), NullProgressSink)
        sink = LoggingProgressSink()
        assert as_sink(sink) is sink

    def test_logging_sink(self, caplog):
        """Phases are logged at INFO level, progress at DEBUG level."""
        log = logging.getLogger("distmap.test")
        sink = LoggingProgressSink(log, every=2)

        with caplog.at_level(logging.DEBUG, logger="distmap.test"):
            sink.on_phase("Forward Scan")
            for done in range(1, 6):
                sink.on_progress(done, 5)

        infos = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
        debugs = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
        assert infos == ["Forward Scan..."]
        assert debugs == [
            "Forward Scan: 2/5 rows",
            "Forward Scan: 4/5 rows",
            "Forward Scan: 5/5 rows",
        ]

    def test_logging_sink_during_computation(self, caplog):
        """A computation reports each phase through the logging sink."""
        mask = np.zeros((4, 4), dtype=np.uint8)
        mask[1:3, 1:3] = 255

        with caplog.at_level(logging.INFO, logger="distmap.progress"):
            compute_distance_map(mask, progress=LoggingProgressSink())

        messages = [r.getMessage() for r in caplog.records if r.name == "distmap.progress"]
        assert messages == [
            "Initialization...",
            "Forward Scan...",
            "Backward Scan...",
            "Normalization...",
        ]
