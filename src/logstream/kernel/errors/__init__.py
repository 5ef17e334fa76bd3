"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError         (application.py)
    │   └── ConfigError          (logstream.config.validation)
    └── InfrastructureError      (infrastructure.py)
        ├── ExternalServiceError
        └── StreamError          (stream.py)
            ├── DecodeError
            ├── UnderlyingIOError
            └── EncodeError
"""

from logstream.kernel.errors.application import ApplicationError
from logstream.kernel.errors.base import BaseError
from logstream.kernel.errors.infrastructure import ExternalServiceError, InfrastructureError
from logstream.kernel.errors.stream import (
    DecodeError,
    EncodeError,
    StreamError,
    UnderlyingIOError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DecodeError",
    "EncodeError",
    "ExternalServiceError",
    "InfrastructureError",
    "StreamError",
    "UnderlyingIOError",
]
