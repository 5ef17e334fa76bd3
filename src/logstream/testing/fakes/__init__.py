"""Testing fakes – in-memory byte sources and sinks."""
from logstream.testing.fakes.sinks import FailingSink, RecordingSink
from logstream.testing.fakes.sources import FakeByteSource, NonClosingSource

__all__ = ["FailingSink", "FakeByteSource", "NonClosingSource", "RecordingSink"]
