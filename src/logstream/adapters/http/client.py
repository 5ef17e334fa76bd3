"""HTTP adapter – LogClient."""
from __future__ import annotations

from typing import Any

import httpx

from logstream.adapters.http.source import HttpxResponseSource
from logstream.config.settings import LogClientSettings, StreamSettings
from logstream.kernel.errors import ExternalServiceError, UnderlyingIOError
from logstream.observability.logging import get_logger
from logstream.stream import AuditStream, ErrorStream

_log = get_logger(__name__)


class LogClient:
    """Subscribe to a server's error and audit logs over HTTP.

    Each call opens a new streaming request; the returned stream owns the
    response and closes it when the log ends or the stream is closed.

    Usage::

        with LogClient(LogClientSettings(base_url="https://127.0.0.1:7373")) as client:
            with client.audit_log() as stream:
                for event in stream:
                    print(event.api_path, event.status_code)
    """

    def __init__(
        self,
        settings: LogClientSettings,
        *,
        stream_settings: StreamSettings | None = None,
        **client_kwargs: Any,
    ) -> None:
        self._settings = settings
        self._stream_settings = stream_settings
        self._client = httpx.Client(
            base_url=settings.base_url,
            timeout=settings.timeout,
            **client_kwargs,
        )

    def __enter__(self) -> "LogClient":
        self._client.__enter__()
        return self

    def __exit__(self, *args: Any) -> None:
        self._client.__exit__(*args)

    def close(self) -> None:
        self._client.close()

    def error_log(self) -> ErrorStream:
        """Open the server's error log."""
        source = self._open(self._settings.error_log_path)
        return ErrorStream(source, settings=self._stream_settings)

    def audit_log(self) -> AuditStream:
        """Open the server's audit log."""
        source = self._open(self._settings.audit_log_path)
        return AuditStream(source, settings=self._stream_settings)

    def _open(self, path: str) -> HttpxResponseSource:
        request = self._client.build_request("GET", path)
        try:
            response = self._client.send(request, stream=True)
        except httpx.TransportError as exc:
            raise UnderlyingIOError(f"GET {request.url} failed: {exc}", cause=exc) from exc

        if response.is_error:
            response.close()
            raise ExternalServiceError(
                service=str(request.url),
                message=f"HTTP {response.status_code} from GET {request.url}",
                status_code=response.status_code,
            )
        _log.debug("log_client.opened", url=str(request.url))
        return HttpxResponseSource(response)


__all__ = ["LogClient"]
