"""Kernel I/O – source/sink ports and the byte-counting writer."""
from logstream.kernel.io.counting import CountingWriter
from logstream.kernel.io.ports import ByteSource, Closer, Sink, closer_of

__all__ = ["ByteSource", "Closer", "CountingWriter", "Sink", "closer_of"]
