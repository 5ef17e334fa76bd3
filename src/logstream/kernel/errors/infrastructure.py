"""Infrastructure errors — I/O failures, external integrations."""

from __future__ import annotations

from typing import Any

from logstream.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure or misbehaving collaborator outside the library."""

    default_code = "infrastructure_error"


class ExternalServiceError(InfrastructureError):
    """A log server answered with an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


__all__ = ["ExternalServiceError", "InfrastructureError"]
