"""Application-layer errors — misuse or misconfiguration of the library."""

from __future__ import annotations

from logstream.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """The caller configured or used the library incorrectly."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
