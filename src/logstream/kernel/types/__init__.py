"""Kernel value-object types."""

from logstream.kernel.types.ids import Identity

__all__ = ["Identity"]
