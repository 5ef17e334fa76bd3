"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from logstream.kernel.errors import BaseError


class ErrorDetailProcessor:
    """structlog processor that expands library errors into plain dicts.

    Any value in the event dict that is a :class:`BaseError` is replaced by
    its :meth:`~BaseError.to_dict` view so the JSON renderer keeps its code,
    message and detail instead of a bare ``repr``.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, BaseError):
                event_dict[key] = value.to_dict()
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["ErrorDetailProcessor", "get_logger"]
