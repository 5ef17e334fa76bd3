"""HTTP adapter – byte source over a streaming httpx response."""
from __future__ import annotations

import httpx

from logstream.kernel.errors import UnderlyingIOError


class HttpxResponseSource:
    """Expose the body of a streaming :class:`httpx.Response` as a byte source.

    The response must have been sent with ``stream=True``. ``close`` closes
    the response, which releases the connection back to the pool.
    """

    def __init__(self, response: httpx.Response) -> None:
        self._response = response
        self._chunks = response.iter_bytes()
        self._pending = b""

    @property
    def response(self) -> httpx.Response:
        return self._response

    def read(self, size: int = -1, /) -> bytes:
        while not self._pending:
            try:
                self._pending = next(self._chunks)
            except StopIteration:
                return b""
            except (httpx.TransportError, httpx.StreamError) as exc:
                raise UnderlyingIOError(
                    f"reading response body from {self._response.request.url} failed: {exc}",
                    cause=exc,
                ) from exc

        if size < 0 or size >= len(self._pending):
            data, self._pending = self._pending, b""
        else:
            data, self._pending = self._pending[:size], self._pending[size:]
        return data

    def close(self) -> None:
        try:
            self._response.close()
        except httpx.HTTPError as exc:
            raise UnderlyingIOError(f"closing response failed: {exc}", cause=exc) from exc


__all__ = ["HttpxResponseSource"]
